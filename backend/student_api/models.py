"""SQLModel data models.

The `students` table stores one Student document per row. Scalar fields
map to columns; the embedded sub-records (name, guardian, local guardian,
address) are kept as JSON documents inside the parent row so they share
its lifetime and are never addressable on their own.
"""

import uuid
from typing import Any, Dict, Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


def new_identity() -> str:
    """Return a fresh opaque identity (UUID4 in 32-char hex form)."""
    return uuid.uuid4().hex


class Student(SQLModel, table=True):
    """A stored Student document.

    Fields:
    - `id`: store-assigned identity, set on insert and never changed
    - `gender` / `blood_group` / `is_active`: enumeration values as plain strings
    """
    __tablename__ = "students"

    id: str = Field(default_factory=new_identity, primary_key=True, max_length=32)
    name: Dict[str, Any] = Field(sa_column=Column(JSON, nullable=False))
    gender: str
    blood_group: Optional[str] = None
    email: str
    phone: str
    address: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON, nullable=True))
    department: str
    academic_semester: str
    guardian: Dict[str, Any] = Field(sa_column=Column(JSON, nullable=False))
    local_guardian: Dict[str, Any] = Field(sa_column=Column(JSON, nullable=False))
    profile_image: Optional[str] = None
    is_active: str
