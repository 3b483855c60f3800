from typing import Protocol

from lifelessons.domain.common.value_objects.ids import LessonId
from lifelessons.domain.lessons.entities.favorite import Favorite


class FavoriteRepositoryProtocol(Protocol):
    def exists(self, user_email: str, lesson_id: LessonId) -> bool: ...

    def add(self, favorite: Favorite) -> Favorite: ...

    def rollback(self) -> None: ...
