"""Use case for adding lessons to a user's favorites."""

import structlog

from lifelessons.application.lessons.protocols.favorite_repository import (
    FavoriteRepositoryProtocol,
)
from lifelessons.application.lessons.protocols.lesson_repository import LessonRepositoryProtocol
from lifelessons.domain.common.value_objects.ids import LessonId
from lifelessons.domain.lessons.entities.favorite import Favorite
from lifelessons.domain.lessons.services.engagement_mutator import (
    SAVE,
    EngagementIntent,
    EngagementMutator,
)
from lifelessons.exceptions import AlreadyExistsError, LessonNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


class FavoriteUseCase:
    def __init__(
        self,
        lesson_repository: LessonRepositoryProtocol,
        favorite_repository: FavoriteRepositoryProtocol,
    ) -> None:
        self.lesson_repository = lesson_repository
        self.favorite_repository = favorite_repository
        self.save_mutator = EngagementMutator(SAVE)

    def add_favorite(self, user_email: str | None, lesson_id: int | None) -> Favorite:
        """
        Add a lesson to a user's favorites and mark it saved.

        The favorite row, the save membership and the counter commit in one
        transaction; if any step fails, none of them is kept. If the user had
        already saved the lesson through the save toggle, the counter does not
        move again.

        Raises:
            ValidationError: If user_email or lesson_id is missing
            LessonNotFoundError: If the lesson does not exist
            AlreadyExistsError: If the favorite already exists
        """
        if not user_email or not user_email.strip():
            raise ValidationError("userEmail is required")
        if lesson_id is None:
            raise ValidationError("lessonId is required")

        lesson_id_vo = LessonId(lesson_id)
        user_email = user_email.strip()

        if not self.lesson_repository.exists(lesson_id_vo):
            raise LessonNotFoundError(lesson_id)

        if self.favorite_repository.exists(user_email, lesson_id_vo):
            raise AlreadyExistsError("Already in favorites")

        favorite = self.favorite_repository.add(Favorite.create(user_email, lesson_id_vo))
        try:
            outcome = self.lesson_repository.apply_engagement(
                lesson_id_vo, self.save_mutator, user_email, EngagementIntent.APPLY
            )
            if outcome is None:
                raise LessonNotFoundError(lesson_id)
        except Exception:
            self.favorite_repository.rollback()
            raise

        logger.info(
            "favorite_created",
            favorite_id=favorite.id.value,
            lesson_id=lesson_id,
            user_email=user_email,
            save_count=outcome.counter,
        )
        return favorite
