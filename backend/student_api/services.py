"""Business logic services used by HTTP controllers.

`StudentService` is the persistence gateway: it validates input and
identities, then forwards each operation to exactly one repository call
and returns the result as a `StudentOut` schema. It never maps errors to
HTTP responses; that is the controllers' job.
"""

import logging
import re
from typing import Any, List, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlmodel import Session

from . import models, repositories
from .exceptions import InvalidIdentityError, ValidationError
from .schemas import StudentIn, StudentOut

logger = logging.getLogger("student_api.services")

IDENTITY_RE = re.compile(r"[0-9a-f]{32}")


def is_valid_identity(value: Any) -> bool:
    """Return True if `value` is shaped like a store-assigned identity."""
    return isinstance(value, str) and IDENTITY_RE.fullmatch(value) is not None


def _validation_details(exc: PydanticValidationError) -> List[dict]:
    return [
        {"field": ".".join(str(part) for part in err["loc"]) or "student", "message": err["msg"]}
        for err in exc.errors()
    ]


def _to_out(row: models.Student) -> StudentOut:
    return StudentOut.model_validate(row.model_dump())


class StudentService:
    """Create/list/get operations for the Student resource."""
    def __init__(self, session: Session):
        self.session = session
        self.repo = repositories.StudentRepository(session)

    def create(self, student: Any) -> StudentOut:
        """Validate `student` and store it under a fresh identity.

        Accepts a `StudentIn` (or `StudentOut`, whose `id` is dropped) or a
        raw mapping using either camelCase or snake_case keys. Anything
        else, and any invalid payload, raises `ValidationError` before the
        store is touched.
        """
        if isinstance(student, StudentIn):
            # the identity is always assigned on insert, never by the caller
            student = student.model_dump(by_alias=True)
        try:
            student = StudentIn.model_validate(student)
        except PydanticValidationError as exc:
            details = _validation_details(exc)
            logger.info("student_rejected fields=%s", [d["field"] for d in details])
            raise ValidationError("student payload failed validation", details=details) from exc
        row = models.Student(**student.model_dump(mode="json"))
        created = self.repo.create(row)
        logger.info("student_created id=%s", created.id)
        return _to_out(created)

    def list_all(self) -> List[StudentOut]:
        """Return every stored student; an empty list when there are none."""
        return [_to_out(row) for row in self.repo.list_all()]

    def get_by_id(self, student_id: str) -> Optional[StudentOut]:
        """Return the student with `student_id` or `None` if absent.

        A malformed identity raises `InvalidIdentityError` without a
        store round-trip.
        """
        if not is_valid_identity(student_id):
            raise InvalidIdentityError(f"invalid student id: {student_id!r}")
        row = self.repo.get(student_id)
        if row is None:
            return None
        return _to_out(row)
