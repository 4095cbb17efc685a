"""Error taxonomy for the student store.

The service layer raises these; only the HTTP layer in `main` decides
which status code each one maps to. "Not found" is deliberately absent:
lookups return `None` instead of raising.
"""

from typing import Any, Dict, List, Optional


class StudentStoreError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(self, message: str, details: Optional[List[Dict[str, Any]]] = None):
        self.message = message
        self.details = details or []
        super().__init__(self.message)


class ValidationError(StudentStoreError):
    """A payload failed presence, type or enumeration checks."""
    pass


class InvalidIdentityError(StudentStoreError):
    """A lookup identity is not syntactically valid for the store."""
    pass


class StoreUnavailableError(StudentStoreError):
    """The store connection was lost or never established."""
    pass
