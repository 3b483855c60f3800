"""FastAPI dependencies for caller identification."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from lifelessons.core import container
from lifelessons.database import DatabaseSession
from lifelessons.domain.lessons.services.access_policy import Caller
from lifelessons.exceptions import CredentialsException
from lifelessons.infrastructure.identity.auth.token_service import verify_access_token

# Credentials are issued by an external identity provider; tokenUrl is only
# used for the OpenAPI docs.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)


async def get_caller(
    token: Annotated[str | None, Depends(oauth2_scheme)], db: DatabaseSession
) -> Caller:
    """
    Resolve the caller attached to the request.

    No token means an anonymous, non-premium caller. A token that fails
    verification is rejected rather than downgraded. The premium flag comes
    from the user ledger, not from the token.

    Raises:
        CredentialsException: If a token is present but invalid
    """
    if token is None:
        return Caller.anonymous()

    email = verify_access_token(token)
    if email is None:
        raise CredentialsException

    with container.db.override(db):
        user = container.user_repository().find_by_email(email)

    return Caller(email=email, is_premium=user.is_premium if user else False)
