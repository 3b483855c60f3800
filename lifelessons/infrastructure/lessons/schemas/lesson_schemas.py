"""Pydantic schemas for Lesson API request/response validation."""

from datetime import datetime

from pydantic import Field

from lifelessons.domain.lessons.entities.lesson import Lesson
from lifelessons.infrastructure.common.schemas import CamelModel


class LessonResponse(CamelModel):
    """Schema for a lesson with its engagement counters and members."""

    id: int = Field(..., alias="_id")
    title: str
    short_description: str
    category: str | None = None
    emotional_tone: str | None = None
    visibility: str
    access_level: str
    creator_email: str | None = None
    created_at: datetime | None = None
    likes: int = Field(..., ge=0)
    save_count: int = Field(..., ge=0)
    views: int = Field(..., ge=0)
    likes_array: list[str] = Field(default_factory=list)
    saves_array: list[str] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, lesson: Lesson) -> "LessonResponse":
        return cls(
            id=lesson.id.value,
            title=lesson.title,
            short_description=lesson.short_description,
            category=lesson.category,
            emotional_tone=lesson.emotional_tone,
            visibility=lesson.visibility.value,
            access_level=lesson.access_level.value,
            creator_email=lesson.creator_email,
            created_at=lesson.created_at,
            likes=lesson.likes,
            save_count=lesson.save_count,
            views=lesson.views,
            likes_array=list(lesson.liked_by),
            saves_array=list(lesson.saved_by),
        )


class LessonsListResponse(CamelModel):
    """Schema for paginated lessons list response."""

    lessons: list[LessonResponse]
    total: int = Field(..., ge=0, description="Total number of matching lessons")
    page: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)


class LikeRequest(CamelModel):
    user_id: str | None = None
    action: str | None = Field(None, description="'like' or 'unlike'")


class SaveRequest(CamelModel):
    user_id: str | None = None
    action: str | None = Field(None, description="'save' or 'unsave'")


class LikeResponse(CamelModel):
    success: bool = True
    changed: bool
    likes: int


class SaveResponse(CamelModel):
    success: bool = True
    changed: bool
    save_count: int
