"""Use case for like/unlike and save/unsave toggles."""

from dataclasses import dataclass

import structlog

from lifelessons.application.lessons.protocols.lesson_repository import LessonRepositoryProtocol
from lifelessons.domain.common.value_objects.ids import LessonId
from lifelessons.domain.lessons.services.engagement_mutator import (
    LIKE,
    SAVE,
    EngagementKind,
    EngagementMutator,
)
from lifelessons.exceptions import LessonNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class EngagementResult:
    kind: EngagementKind
    counter: int
    changed: bool


class EngagementUseCase:
    def __init__(self, lesson_repository: LessonRepositoryProtocol) -> None:
        self.lesson_repository = lesson_repository
        self.mutators = {kind.name: EngagementMutator(kind) for kind in (LIKE, SAVE)}

    def toggle(
        self,
        lesson_id: int,
        kind: EngagementKind,
        user_id: str | None,
        action: str | None,
    ) -> EngagementResult:
        """
        Apply or revoke an engagement for a user.

        Repeating an action is a no-op: the membership set is unchanged and the
        counter does not move.

        Args:
            lesson_id: ID of the lesson
            kind: LIKE or SAVE
            user_id: Identifier of the acting user
            action: Client verb ("like"/"unlike" or "save"/"unsave")

        Raises:
            ValidationError: If user_id is missing or the action is unknown
            LessonNotFoundError: If the lesson does not exist
        """
        mutator = self.mutators[kind.name]
        actor_id = mutator.require_actor(user_id)
        intent = kind.parse_action(action)

        outcome = self.lesson_repository.apply_engagement(
            LessonId(lesson_id), mutator, actor_id, intent
        )
        if outcome is None:
            raise LessonNotFoundError(lesson_id)

        logger.info(
            f"lesson_{kind.name}_{intent.value}",
            lesson_id=lesson_id,
            user_id=actor_id,
            changed=outcome.changed,
            counter=outcome.counter,
        )
        return EngagementResult(kind=kind, counter=outcome.counter, changed=outcome.changed)
