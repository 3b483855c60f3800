"""Lessons domain layer."""

from lifelessons.domain.lessons.entities import (
    AccessLevel,
    Comment,
    Favorite,
    Lesson,
    Report,
    Visibility,
)

__all__ = [
    "AccessLevel",
    "Comment",
    "Favorite",
    "Lesson",
    "Report",
    "Visibility",
]
