"""Custom exception hierarchy for the Life Lessons application."""

from fastapi import HTTPException
from starlette import status


class LifeLessonsError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(LifeLessonsError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class LessonNotFoundError(NotFoundError):
    """Lesson not found error."""

    def __init__(self, lesson_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with lesson ID or custom message."""
        self.lesson_id = lesson_id
        if message:
            super().__init__(message)
        elif lesson_id is not None:
            super().__init__(f"Lesson with id {lesson_id} not found")
        else:
            super().__init__("Lesson not found")


class ValidationError(LifeLessonsError):
    """Validation error for missing or malformed client input."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        """Initialize with message and 400 status code by default."""
        super().__init__(message, status_code=status_code)


class AlreadyExistsError(LifeLessonsError):
    """Raised when a unique record is created a second time."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=400)


class StorageUnavailableError(LifeLessonsError):
    """The underlying store is unreachable or an operation on it failed."""

    def __init__(self, message: str = "Storage is unavailable") -> None:
        """Initialize with message and 500 status code."""
        super().__init__(message, status_code=500)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
