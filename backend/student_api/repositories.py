"""Repository encapsulating store operations for Student documents.

Each method performs exactly one store operation and returns SQLModel
objects unmodified. Connection-level failures are reported as
`StoreUnavailableError`; any other store error propagates unchanged.
"""

from contextlib import contextmanager
from typing import List, Optional

from sqlmodel import Session, select

from . import models
from .database import STORE_ERRORS
from .exceptions import StoreUnavailableError


class StudentRepository:
    """Create and read operations for `Student` documents."""
    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _store_call(self):
        try:
            yield
        except STORE_ERRORS as exc:
            self.session.rollback()
            raise StoreUnavailableError("student store unavailable") from exc

    def create(self, student: models.Student) -> models.Student:
        """Persist a new student and return the managed instance."""
        with self._store_call():
            self.session.add(student)
            self.session.commit()
            self.session.refresh(student)
        return student

    def list_all(self) -> List[models.Student]:
        """Return every stored student in store-native order."""
        with self._store_call():
            return list(self.session.exec(select(models.Student)).all())

    def get(self, student_id: str) -> Optional[models.Student]:
        """Get a `Student` by identity or `None` if not found."""
        with self._store_call():
            return self.session.get(models.Student, student_id)
