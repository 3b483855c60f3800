from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class LessonId(EntityId):
    """Strongly-typed lesson identifier."""

    value: int


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""

    value: int


@dataclass(frozen=True)
class FavoriteId(EntityId):
    """Strongly-typed favorite identifier."""

    value: int


@dataclass(frozen=True)
class CommentId(EntityId):
    """Strongly-typed comment identifier."""

    value: int


@dataclass(frozen=True)
class ReportId(EntityId):
    """Strongly-typed report identifier."""

    value: int
