from .comment import Comment
from .favorite import Favorite
from .lesson import AccessLevel, Lesson, Visibility
from .report import Report

__all__ = [
    "AccessLevel",
    "Comment",
    "Favorite",
    "Lesson",
    "Report",
    "Visibility",
]
