"""Bearer token creation and verification."""

from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError

from lifelessons.config import get_settings

ALGORITHM = "HS256"


def create_access_token(email: str, expires_minutes: int | None = None) -> str:
    """Create an access token whose subject is the caller's email."""
    settings = get_settings()
    minutes = expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
    expire = datetime.now(UTC) + timedelta(minutes=minutes)
    to_encode = {"sub": email, "exp": expire, "type": "access"}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)


def verify_access_token(token: str) -> str | None:
    """Verify an access token and return the email if valid."""
    try:
        payload = jwt.decode(token, get_settings().SECRET_KEY, algorithms=[ALGORITHM])
        if payload.get("type") != "access":
            return None
        email = payload.get("sub")
        if not isinstance(email, str) or not email:
            return None
        return email
    except InvalidTokenError:
        return None
