from typing import Protocol

from lifelessons.domain.common.value_objects.ids import LessonId
from lifelessons.domain.lessons.entities.lesson import Lesson
from lifelessons.domain.lessons.services.engagement_mutator import (
    EngagementIntent,
    EngagementMutator,
    EngagementOutcome,
)
from lifelessons.domain.lessons.value_objects.lesson_predicate import LessonPredicate, LessonSort


class LessonRepositoryProtocol(Protocol):
    def find_by_id(self, lesson_id: LessonId) -> Lesson | None: ...

    def exists(self, lesson_id: LessonId) -> bool: ...

    def find_page(
        self, predicate: LessonPredicate, sort: LessonSort, offset: int, limit: int
    ) -> list[Lesson]: ...

    def count(self, predicate: LessonPredicate) -> int: ...

    def find_matching(self, predicate: LessonPredicate, limit: int) -> list[Lesson]: ...

    def increment_views(self, lesson_id: LessonId) -> Lesson | None: ...

    def apply_engagement(
        self,
        lesson_id: LessonId,
        mutator: EngagementMutator,
        actor_id: str,
        intent: EngagementIntent,
    ) -> EngagementOutcome | None: ...
