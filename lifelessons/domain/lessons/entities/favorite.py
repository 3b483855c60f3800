"""Favorite entity."""

from dataclasses import dataclass
from datetime import datetime

from lifelessons.domain.common.entity import Entity
from lifelessons.domain.common.exceptions import ValidationError
from lifelessons.domain.common.value_objects.ids import FavoriteId, LessonId


@dataclass
class Favorite(Entity[FavoriteId]):
    """
    A lesson pinned to a user's favorites.

    Business Rules:
    - One favorite per (user_email, lesson_id) pair (enforced at repository level)
    """

    id: FavoriteId
    user_email: str
    lesson_id: LessonId
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.user_email or not self.user_email.strip():
            raise ValidationError("userEmail is required", field="userEmail")

    @classmethod
    def create(cls, user_email: str, lesson_id: LessonId) -> "Favorite":
        return cls(id=FavoriteId.generate(), user_email=user_email.strip(), lesson_id=lesson_id)
