from typing import Protocol

from lifelessons.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    """Users keyed by email; ``save`` inserts unsaved users and updates the rest."""

    def find_by_email(self, email: str) -> User | None: ...

    def save(self, user: User) -> User:
        """Raises EmailAlreadyExistsError when a concurrent insert took the email."""
        ...
