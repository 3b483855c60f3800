"""
Domain errors.

Raised when a lesson, comment, report or user would break one of its
invariants. The application maps them to HTTP 400 responses.
"""


class DomainError(Exception):
    """Base class for errors raised by domain entities and services."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(DomainError):
    """A required field is missing or a value is out of range."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value
