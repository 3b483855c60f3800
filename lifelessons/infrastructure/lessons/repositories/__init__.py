from .lesson_repository import LessonRepository
from .record_repositories import CommentRepository, FavoriteRepository, ReportRepository

__all__ = [
    "CommentRepository",
    "FavoriteRepository",
    "LessonRepository",
    "ReportRepository",
]
