"""Use case for lesson comments."""

import structlog

from lifelessons.application.lessons.protocols.comment_repository import CommentRepositoryProtocol
from lifelessons.application.lessons.protocols.lesson_repository import LessonRepositoryProtocol
from lifelessons.domain.common.value_objects.ids import LessonId
from lifelessons.domain.lessons.entities.comment import Comment
from lifelessons.exceptions import LessonNotFoundError

logger = structlog.get_logger(__name__)


class CommentUseCase:
    def __init__(
        self,
        lesson_repository: LessonRepositoryProtocol,
        comment_repository: CommentRepositoryProtocol,
    ) -> None:
        self.lesson_repository = lesson_repository
        self.comment_repository = comment_repository

    def list_comments(self, lesson_id: int) -> list[Comment]:
        """Comments for a lesson, newest first."""
        return self.comment_repository.find_by_lesson(LessonId(lesson_id))

    def add_comment(self, lesson_id: int, user_id: str, text: str) -> Comment:
        """
        Append a comment to a lesson.

        Raises:
            ValidationError: If user_id or text is blank
            LessonNotFoundError: If the lesson does not exist
        """
        lesson_id_vo = LessonId(lesson_id)
        comment = Comment.create(lesson_id=lesson_id_vo, user_id=user_id, text=text)

        if not self.lesson_repository.exists(lesson_id_vo):
            raise LessonNotFoundError(lesson_id)

        comment = self.comment_repository.save(comment)
        logger.info("comment_created", comment_id=comment.id.value, lesson_id=lesson_id)
        return comment
