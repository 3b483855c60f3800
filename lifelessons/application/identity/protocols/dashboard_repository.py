from typing import Protocol

from lifelessons.domain.lessons.entities.lesson import Lesson


class DashboardRepositoryProtocol(Protocol):
    def count_lessons_and_favorites(self, email: str) -> tuple[int, int]: ...

    def find_recent_lessons(self, email: str, limit: int) -> list[Lesson]: ...
