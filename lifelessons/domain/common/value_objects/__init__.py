from .ids import CommentId, FavoriteId, LessonId, ReportId, UserId

__all__ = [
    "CommentId",
    "FavoriteId",
    "LessonId",
    "ReportId",
    "UserId",
]
