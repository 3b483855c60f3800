"""User entity for the user ledger."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from lifelessons.domain.common.entity import Entity
from lifelessons.domain.common.exceptions import ValidationError
from lifelessons.domain.common.value_objects.ids import UserId

# Domain constraints
MAX_EMAIL_LENGTH = 255


class Role(StrEnum):
    USER = "user"
    ADMIN = "admin"


def _validate_email(email: str | None) -> str:
    if email is None or not email.strip():
        raise ValidationError("Email cannot be empty", field="email", value=email)
    email = email.strip()
    if len(email) > MAX_EMAIL_LENGTH:
        raise ValidationError(
            f"Email cannot exceed {MAX_EMAIL_LENGTH} characters", field="email", value=email
        )
    return email


@dataclass
class User(Entity[UserId]):
    """
    User account identified by email.

    Business Rules:
    - Email is the natural key and must be unique (enforced at repository level)
    - New accounts start as role=user, is_premium=False
    - role, is_premium and created_at are set once; profile updates never touch them
    - Every successful lookup or upsert refreshes last_login_at
    """

    id: UserId
    email: str
    name: str | None = None
    photo_url: str | None = None
    role: Role = Role.USER
    is_premium: bool = False
    created_at: datetime | None = None
    last_login_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.email = _validate_email(self.email)

    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def record_login(self, at: datetime) -> None:
        """Refresh the last-login timestamp."""
        self.last_login_at = at

    def update_profile(self, name: str | None, photo_url: str | None, at: datetime) -> None:
        """
        Update display fields from the identity provider.

        Only name, photo_url and last_login_at change.
        """
        self.name = name
        self.photo_url = photo_url
        self.record_login(at)

    @classmethod
    def create(
        cls,
        email: str,
        at: datetime,
        name: str | None = None,
        photo_url: str | None = None,
    ) -> "User":
        """
        Create a new user with default role and tier.

        Raises:
            ValidationError: If email is invalid
        """
        return cls(
            id=UserId.generate(),
            email=email,
            name=name,
            photo_url=photo_url,
            role=Role.USER,
            is_premium=False,
            created_at=at,
            last_login_at=at,
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        email: str,
        name: str | None,
        photo_url: str | None,
        role: str,
        is_premium: bool,
        created_at: datetime,
        last_login_at: datetime,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            email=email,
            name=name,
            photo_url=photo_url,
            role=Role(role),
            is_premium=is_premium,
            created_at=created_at,
            last_login_at=last_login_at,
        )
