"""Identity domain exceptions."""

from lifelessons.domain.common.exceptions import DomainError


class EmailAlreadyExistsError(DomainError):
    """Raised when inserting a user whose email is already registered."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email {email} is already registered", {"email": email})
        self.email = email
