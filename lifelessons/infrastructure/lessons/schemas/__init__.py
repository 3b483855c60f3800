"""Lessons context schemas."""

from lifelessons.infrastructure.lessons.schemas.lesson_schemas import (
    LessonResponse,
    LessonsListResponse,
    LikeRequest,
    LikeResponse,
    SaveRequest,
    SaveResponse,
)
from lifelessons.infrastructure.lessons.schemas.record_schemas import (
    CommentCreateRequest,
    CommentResponse,
    FavoriteCreateRequest,
    ReportCreateRequest,
)

__all__ = [
    "CommentCreateRequest",
    "CommentResponse",
    "FavoriteCreateRequest",
    "LessonResponse",
    "LessonsListResponse",
    "LikeRequest",
    "LikeResponse",
    "ReportCreateRequest",
    "SaveRequest",
    "SaveResponse",
]
