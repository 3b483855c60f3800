"""Comment entity."""

from dataclasses import dataclass
from datetime import datetime

from lifelessons.domain.common.entity import Entity
from lifelessons.domain.common.exceptions import ValidationError
from lifelessons.domain.common.value_objects.ids import CommentId, LessonId

MAX_COMMENT_LENGTH = 2000


@dataclass
class Comment(Entity[CommentId]):
    """Append-only comment left by a user on a lesson."""

    id: CommentId
    lesson_id: LessonId
    user_id: str
    text: str
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.user_id or not self.user_id.strip():
            raise ValidationError("userId is required", field="userId")
        if not self.text or not self.text.strip():
            raise ValidationError("Comment text cannot be empty", field="text")
        if len(self.text) > MAX_COMMENT_LENGTH:
            raise ValidationError(
                f"Comment text cannot exceed {MAX_COMMENT_LENGTH} characters", field="text"
            )

    @classmethod
    def create(cls, lesson_id: LessonId, user_id: str, text: str) -> "Comment":
        return cls(
            id=CommentId.generate(),
            lesson_id=lesson_id,
            user_id=user_id,
            text=text.strip(),
        )

    @classmethod
    def create_with_id(
        cls,
        id: CommentId,
        lesson_id: LessonId,
        user_id: str,
        text: str,
        created_at: datetime,
    ) -> "Comment":
        return cls(id=id, lesson_id=lesson_id, user_id=user_id, text=text, created_at=created_at)
