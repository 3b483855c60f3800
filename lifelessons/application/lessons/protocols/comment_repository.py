from typing import Protocol

from lifelessons.domain.common.value_objects.ids import LessonId
from lifelessons.domain.lessons.entities.comment import Comment


class CommentRepositoryProtocol(Protocol):
    def find_by_lesson(self, lesson_id: LessonId) -> list[Comment]: ...

    def save(self, comment: Comment) -> Comment: ...
