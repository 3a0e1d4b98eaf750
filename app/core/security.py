"""
Security utilities for the cookie-borne JWT.

Tokens are signed with a shared secret (HS256 by default) and carry the
caller's identity claims (at minimum an email) plus a 1-hour expiry.
There is no refresh token and no revocation list; clients re-issue.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from jose import JWTError, jwt
from app.core.config import settings

# Registered timing claims stripped from the decoded identity
TIMING_CLAIMS = ("exp", "iat", "nbf")


def create_access_token(identity: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed JWT for an identity.

    Args:
        identity: Claims describing the caller (typically {"email": ...})
        expires_delta: Optional lifetime (default: ACCESS_TOKEN_EXPIRE_MINUTES)

    Returns:
        Encoded JWT token as a string
    """
    to_encode = dict(identity)

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})
    return jwt.encode(to_encode, settings.ACCESS_TOKEN_SECRET, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT token.

    Args:
        token: The JWT token to decode

    Returns:
        The identity claims the token was issued for

    Raises:
        JWTError: If the token is malformed, badly signed or expired
    """
    payload = jwt.decode(token, settings.ACCESS_TOKEN_SECRET, algorithms=[settings.ALGORITHM])
    if not isinstance(payload, dict):
        raise JWTError("Token payload is not an object")

    return {key: value for key, value in payload.items() if key not in TIMING_CLAIMS}
