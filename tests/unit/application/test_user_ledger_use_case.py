"""Tests for UserLedgerUseCase with in-memory repositories."""

from dataclasses import replace
from datetime import UTC, datetime, timedelta

import pytest

from lifelessons.application.identity.use_cases.user_ledger_use_case import UserLedgerUseCase
from lifelessons.domain.common.value_objects.ids import UserId
from lifelessons.domain.identity.entities.user import Role, User
from lifelessons.domain.identity.exceptions import EmailAlreadyExistsError
from lifelessons.domain.lessons.entities.lesson import Lesson
from lifelessons.exceptions import ValidationError

START = datetime(2026, 3, 1, tzinfo=UTC)


class FakeUserRepository:
    def __init__(self) -> None:
        self.users: dict[str, User] = {}

    def find_by_email(self, email: str) -> User | None:
        user = self.users.get(email)
        return replace(user) if user else None

    def save(self, user: User) -> User:
        if user.id.value == 0:
            if user.email in self.users:
                raise EmailAlreadyExistsError(user.email)
            user = replace(user, id=UserId(len(self.users) + 1))
        self.users[user.email] = user
        return replace(user)


class RacingUserRepository(FakeUserRepository):
    """Another request provisions the same email between lookup and insert."""

    def find_by_email(self, email: str) -> User | None:
        found = super().find_by_email(email)
        if found is None and email not in self.users:
            self.users[email] = User.create_with_id(
                id=UserId(99),
                email=email,
                name="Winner",
                photo_url=None,
                role="user",
                is_premium=False,
                created_at=START,
                last_login_at=START,
            )
        return found


class FakeDashboardRepository:
    def count_lessons_and_favorites(self, email: str) -> tuple[int, int]:
        return 0, 0

    def find_recent_lessons(self, email: str, limit: int) -> list[Lesson]:
        return []


class Clock:
    def __init__(self) -> None:
        self.now = START

    def __call__(self) -> datetime:
        self.now += timedelta(minutes=1)
        return self.now


def _use_case(repository: FakeUserRepository | None = None) -> UserLedgerUseCase:
    return UserLedgerUseCase(
        user_repository=repository or FakeUserRepository(),
        dashboard_repository=FakeDashboardRepository(),
        clock=Clock(),
    )


class TestGetOrCreate:
    def test_second_lookup_only_refreshes_last_login(self) -> None:
        use_case = _use_case()

        first, created = use_case.get_or_create("a@example.com")
        second, created_again = use_case.get_or_create("a@example.com")

        assert created and not created_again
        assert second.id == first.id
        assert second.created_at == first.created_at
        assert second.role == first.role == Role.USER
        assert second.last_login_at > first.last_login_at

    def test_lost_race_returns_winner(self) -> None:
        user, created = _use_case(RacingUserRepository()).get_or_create("race@example.com")

        assert not created
        assert user.id == UserId(99)
        assert user.name == "Winner"

    @pytest.mark.parametrize("email", [None, "", "  "])
    def test_missing_email(self, email: str | None) -> None:
        with pytest.raises(ValidationError):
            _use_case().get_or_create(email)


class TestUpsert:
    def test_insert_then_update(self) -> None:
        repository = FakeUserRepository()
        use_case = _use_case(repository)

        assert use_case.upsert("p@example.com", "Pat", None) is True
        assert use_case.upsert("p@example.com", "Patricia", "https://img") is False

        stored = repository.users["p@example.com"]
        assert (stored.name, stored.photo_url) == ("Patricia", "https://img")


def test_is_admin_is_false_for_blank_or_unknown_email() -> None:
    use_case = _use_case()
    assert use_case.is_admin(None) is False
    assert use_case.is_admin("nobody@example.com") is False
