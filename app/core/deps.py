"""
FastAPI dependencies for authentication and request validation.

These dependencies are used to protect endpoints and extract caller identity.
"""

from typing import Any, Dict, Optional

from fastapi import Cookie, HTTPException, Path, status
from jose import JWTError

from app.core.config import settings
from app.core.database import is_valid_object_id
from app.core.security import decode_token


async def get_current_identity(
    token: Optional[str] = Cookie(None, alias=settings.TOKEN_COOKIE_NAME),
) -> Dict[str, Any]:
    """
    Extract and validate the caller's identity from the token cookie.

    Raises:
        HTTPException 401: If the cookie is missing or the token is invalid/expired
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="unauthorized access",
    )

    if not token:
        raise credentials_exception

    try:
        return decode_token(token)
    except JWTError:
        raise credentials_exception


def require_same_email(email: Optional[str], identity: Dict[str, Any]) -> None:
    """
    Raise HTTPException unless email belongs to the caller.

    Raises:
        HTTPException: 403 Forbidden if email differs from the token's email
    """
    if email != identity.get("email"):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="forbidden access",
        )


def valid_job_id(job_id: str = Path(...)) -> str:
    """Return the raw path id once it is known to be a well-formed ObjectId."""
    if not is_valid_object_id(job_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="invalid id",
        )
    return job_id
