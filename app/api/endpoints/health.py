"""
Health check endpoints.

Provides a plain-text liveness probe and the status of the document store.
"""

import logging
from typing import Dict, Any
from fastapi import APIRouter, Request, status
from fastapi.responses import PlainTextResponse
from datetime import datetime, timezone

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Liveness string for uptime checks."""
    return "job-seeker is running"


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> Dict[str, str]:
    """
    Basic health check endpoint.

    Returns 200 OK if the service is running.
    """
    return {
        "status": "healthy",
        "timestamp": _utc_timestamp()
    }


@router.get("/health/detailed", status_code=status.HTTP_200_OK)
async def detailed_health_check(request: Request) -> Dict[str, Any]:
    """
    Detailed health check with document store status.

    Always returns 200; the overall status turns "unhealthy" when the
    store cannot be pinged.
    """
    health_status = {
        "status": "healthy",
        "timestamp": _utc_timestamp(),
        "checks": {}
    }

    try:
        await request.app.state.store.ping()
        health_status["checks"]["database"] = {
            "status": "healthy",
            "message": "MongoDB ping successful"
        }
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = {
            "status": "unhealthy",
            "message": f"Database error: {str(e)}"
        }

    return health_status
