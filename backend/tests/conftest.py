from pathlib import Path
import os

TEST_DB = Path(__file__).resolve().parents[1] / "test_students.db"
# Must be set before the application modules read their settings.
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB}"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from student_api.database import build_engine, engine
from student_api.main import app


@pytest.fixture(scope="session", autouse=True)
def reset_db():
    """Ensure a fresh SQLite database for tests."""
    if TEST_DB.exists():
        TEST_DB.unlink()
    yield
    engine.dispose()
    if TEST_DB.exists():
        TEST_DB.unlink()


@pytest.fixture(autouse=True)
def empty_store():
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield


@pytest.fixture
def session():
    with Session(engine) as s:
        yield s


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def broken_engine(tmp_path):
    """Engine pointing at a SQLite file whose directory does not exist."""
    eng = build_engine(f"sqlite:///{tmp_path / 'missing' / 'students.db'}")
    yield eng
    eng.dispose()


@pytest.fixture
def student_payload():
    return {
        "name": {"firstName": "Jane", "lastName": "Doe"},
        "gender": "female",
        "email": "jane@x.com",
        "phone": "123",
        "department": "CSE",
        "academicSemester": "Spring2024",
        "guardian": {
            "fatherName": "John Doe",
            "fatherOccupation": "Engineer",
            "fatherContactNo": "555-0100",
            "motherName": "Mary Doe",
            "motherOccupation": "Teacher",
            "motherContactNo": "555-0101",
            "address": "1 Main St",
        },
        "localGuardian": {
            "name": "Ann Smith",
            "occupation": "Nurse",
            "contactNo": "555-0102",
            "address": "2 High St",
        },
        "isActive": "active",
    }
