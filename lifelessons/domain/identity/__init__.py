"""Identity domain layer."""

from lifelessons.domain.identity.entities.user import Role, User
from lifelessons.domain.identity.exceptions import EmailAlreadyExistsError

__all__ = [
    "EmailAlreadyExistsError",
    "Role",
    "User",
]
