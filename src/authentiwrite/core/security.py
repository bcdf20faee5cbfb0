"""Token issuance/verification and identity format predicates."""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from authentiwrite.core.settings import settings

GOV_ID_PATTERN = re.compile(r"^GOV\d{6}$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class TokenPayload:
    """Claims carried by an access token."""

    user_id: str
    email: str


def create_access_token(user_id: str, email: str) -> str:
    """Create a JWT access token for the given user."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode: dict[str, object] = {"sub": user_id, "email": email, "exp": expire}
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def verify_token(token: str) -> TokenPayload | None:
    """Decode an access token.

    Args:
        token: Raw bearer token.

    Returns:
        The token claims, or None if the token is malformed, expired, or
        signed with another key.
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None

    subject = payload.get("sub")
    email = payload.get("email")
    if not isinstance(subject, str) or not isinstance(email, str):
        return None
    return TokenPayload(user_id=subject, email=email)


def validate_gov_id(gov_id: str) -> bool:
    """Return True if the government ID looks like ``GOV`` plus six digits."""
    return bool(GOV_ID_PATTERN.match(gov_id))


def validate_email(email: str) -> bool:
    """Return True for a plausible email address."""
    return bool(EMAIL_PATTERN.match(email))
