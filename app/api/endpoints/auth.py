"""
Authentication endpoints for the cookie-borne JWT.

- POST /jwt: Issue a token for the posted identity and set it as a cookie
- POST /logout: Clear the token cookie
"""

import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, Response

from app.core.config import settings
from app.core.security import create_access_token
from app.schemas.results import SuccessResponse

router = APIRouter(tags=["Authentication"])
logger = logging.getLogger(__name__)

# The site is served from another origin, so the cookie must be cross-site capable
COOKIE_OPTIONS = {"httponly": True, "secure": True, "samesite": "none"}


@router.post("/jwt", response_model=SuccessResponse)
def issue_token(response: Response, identity: Dict[str, Any] = Body(...)):
    """
    Issue a 1-hour token for the posted identity.

    The token is set as a session cookie (no Max-Age) and never returned
    in the body.
    """
    token = create_access_token(identity)
    response.set_cookie(settings.TOKEN_COOKIE_NAME, token, **COOKIE_OPTIONS)

    logger.info(f"Issued token for {identity.get('email')}")
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse)
def logout(response: Response, user: Any = Body(None)):
    """Expire the token cookie immediately."""
    response.delete_cookie(settings.TOKEN_COOKIE_NAME, **COOKIE_OPTIONS)

    logger.info(f"Logged out {user.get('email') if isinstance(user, dict) else None}")
    return SuccessResponse()
