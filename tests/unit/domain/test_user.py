"""Tests for the User entity."""

from datetime import UTC, datetime, timedelta

import pytest

from lifelessons.domain.common.exceptions import ValidationError
from lifelessons.domain.identity.entities.user import Role, User

NOW = datetime(2026, 1, 1, tzinfo=UTC)


class TestUser:
    def test_create_defaults(self) -> None:
        user = User.create("  new@example.com ", at=NOW)
        assert user.email == "new@example.com"
        assert user.role == Role.USER
        assert user.is_premium is False
        assert user.created_at == user.last_login_at == NOW
        assert not user.is_admin()

    @pytest.mark.parametrize("email", ["", "   ", "x" * 256])
    def test_invalid_email_is_rejected(self, email: str) -> None:
        with pytest.raises(ValidationError):
            User.create(email, at=NOW)

    def test_update_profile_leaves_role_tier_and_creation_alone(self) -> None:
        user = User.create("pat@example.com", at=NOW)
        user.role = Role.ADMIN
        user.is_premium = True
        later = NOW + timedelta(days=1)

        user.update_profile("Pat", "https://img/p.png", at=later)

        assert (user.name, user.photo_url) == ("Pat", "https://img/p.png")
        assert user.last_login_at == later
        assert user.created_at == NOW
        assert user.role == Role.ADMIN
        assert user.is_premium is True
        assert user.is_admin()
