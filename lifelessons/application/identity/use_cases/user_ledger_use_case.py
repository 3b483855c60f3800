"""Use case for the user ledger: provisioning, profile upserts, dashboard stats."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

import structlog

from lifelessons.application.identity.protocols.dashboard_repository import (
    DashboardRepositoryProtocol,
)
from lifelessons.application.identity.protocols.user_repository import UserRepositoryProtocol
from lifelessons.domain.identity.entities.user import User
from lifelessons.domain.identity.exceptions import EmailAlreadyExistsError
from lifelessons.domain.lessons.entities.lesson import Lesson
from lifelessons.exceptions import ValidationError

logger = structlog.get_logger(__name__)

RECENT_LESSONS_LIMIT = 5


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class UserStats:
    total_lessons: int
    total_favorites: int
    recent_lessons: list[Lesson]


def _require_email(email: str | None) -> str:
    if email is None or not email.strip():
        raise ValidationError("Email is required")
    return email.strip()


class UserLedgerUseCase:
    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        dashboard_repository: DashboardRepositoryProtocol,
        recent_lessons_limit: int = RECENT_LESSONS_LIMIT,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.user_repository = user_repository
        self.dashboard_repository = dashboard_repository
        self.recent_lessons_limit = recent_lessons_limit
        self.clock = clock

    def get_or_create(self, email: str | None) -> tuple[User, bool]:
        """
        Look up a user by email, provisioning one on first contact.

        Args:
            email: The user's email address

        Returns:
            (user, created) where created is True if the account was just made

        Raises:
            ValidationError: If email is missing
        """
        email = _require_email(email)
        now = self.clock()

        existing = self.user_repository.find_by_email(email)
        if existing is not None:
            existing.record_login(now)
            return self.user_repository.save(existing), False

        try:
            user = self.user_repository.save(User.create(email, at=now))
        except EmailAlreadyExistsError:
            # Lost a race with a concurrent first lookup; use the winner's record
            winner = self.user_repository.find_by_email(email)
            if winner is None:
                raise
            winner.record_login(now)
            return self.user_repository.save(winner), False

        logger.info("user_created", user_id=user.id.value, email=email)
        return user, True

    def upsert(self, email: str | None, name: str | None, photo_url: str | None) -> bool:
        """
        Create or refresh a user's profile.

        Existing users only get name, photo_url and last_login_at updated;
        role, is_premium and created_at are left untouched.

        Returns:
            True if a new user was inserted, False if an existing one was updated

        Raises:
            ValidationError: If email is missing
        """
        email = _require_email(email)
        now = self.clock()

        existing = self.user_repository.find_by_email(email)
        if existing is not None:
            existing.update_profile(name, photo_url, at=now)
            self.user_repository.save(existing)
            logger.info("user_profile_updated", user_id=existing.id.value)
            return False

        user = self.user_repository.save(
            User.create(email, at=now, name=name, photo_url=photo_url)
        )
        logger.info("user_created", user_id=user.id.value, email=email)
        return True

    def is_admin(self, email: str | None) -> bool:
        """True only for an existing user with the admin role."""
        if email is None or not email.strip():
            return False
        user = self.user_repository.find_by_email(email.strip())
        return user is not None and user.is_admin()

    def get_stats(self, email: str | None) -> UserStats:
        """
        Dashboard numbers for a user.

        Both counts come from one statement and the recent-lesson projection
        from a second; an error in either fails the whole call.

        Raises:
            ValidationError: If email is missing
        """
        email = _require_email(email)
        total_lessons, total_favorites = self.dashboard_repository.count_lessons_and_favorites(
            email
        )
        recent = self.dashboard_repository.find_recent_lessons(email, self.recent_lessons_limit)
        return UserStats(
            total_lessons=total_lessons,
            total_favorites=total_favorites,
            recent_lessons=recent,
        )
