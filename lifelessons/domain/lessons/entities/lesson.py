"""Lesson aggregate with its engagement counters and membership sets."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from lifelessons.domain.common.entity import Entity
from lifelessons.domain.common.exceptions import ValidationError
from lifelessons.domain.common.value_objects.ids import LessonId


class Visibility(StrEnum):
    PUBLIC = "public"
    PRIVATE = "private"


class AccessLevel(StrEnum):
    FREE = "free"
    PREMIUM = "premium"


@dataclass
class Lesson(Entity[LessonId]):
    """
    Lesson entity as read from storage.

    Business Rules:
    - Counters (likes, save_count, views) are never negative
    - liked_by / saved_by hold each user at most once, in the order they joined
    - likes == len(liked_by) and save_count == len(saved_by) when every
      engagement goes through the engagement mutator (not enforced here)
    """

    id: LessonId
    title: str
    short_description: str = ""
    category: str | None = None
    emotional_tone: str | None = None
    visibility: Visibility = Visibility.PUBLIC
    access_level: AccessLevel = AccessLevel.FREE
    creator_email: str | None = None
    created_at: datetime | None = None
    likes: int = 0
    save_count: int = 0
    views: int = 0
    liked_by: list[str] = field(default_factory=list)
    saved_by: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants."""
        for name in ("likes", "save_count", "views"):
            value = getattr(self, name)
            if value < 0:
                raise ValidationError(f"{name} cannot be negative", field=name, value=value)
        if len(set(self.liked_by)) != len(self.liked_by):
            raise ValidationError("liked_by cannot contain duplicates", field="liked_by")
        if len(set(self.saved_by)) != len(self.saved_by):
            raise ValidationError("saved_by cannot contain duplicates", field="saved_by")

    def is_public(self) -> bool:
        return self.visibility == Visibility.PUBLIC

    def is_premium(self) -> bool:
        return self.access_level == AccessLevel.PREMIUM

    def counters_match_members(self) -> bool:
        """Check the counter/membership invariant."""
        return self.likes == len(self.liked_by) and self.save_count == len(self.saved_by)

    @classmethod
    def create_with_id(
        cls,
        id: LessonId,
        title: str,
        short_description: str,
        category: str | None,
        emotional_tone: str | None,
        visibility: str,
        access_level: str,
        creator_email: str | None,
        created_at: datetime,
        likes: int,
        save_count: int,
        views: int,
        liked_by: list[str],
        saved_by: list[str],
    ) -> "Lesson":
        """
        Reconstitute a lesson from persistence.

        Raises:
            ValueError: If visibility or access level is not a known value
        """
        return cls(
            id=id,
            title=title,
            short_description=short_description,
            category=category,
            emotional_tone=emotional_tone,
            visibility=Visibility(visibility),
            access_level=AccessLevel(access_level),
            creator_email=creator_email,
            created_at=created_at,
            likes=likes,
            save_count=save_count,
            views=views,
            liked_by=liked_by,
            saved_by=saved_by,
        )
