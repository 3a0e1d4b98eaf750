"""
API endpoints for job-seeker applications.
"""

import logging
from typing import Any, Dict, List, Optional, Union
from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.database import get_db
from app.crud import application as application_crud
from app.schemas.application import AlreadyAppliedResponse, ApplicationCreate
from app.schemas.results import InsertResult

router = APIRouter(prefix="/seekers", tags=["Seekers"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[Dict[str, Any]])
async def list_applications(
    email: Optional[str] = None,
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """
    List a seeker's applications with the applied-for job under ``jobInfo``.

    Without an email the list is empty.
    """
    return await application_crud.get_for_seeker(db, email)


@router.post("", response_model=Union[InsertResult, AlreadyAppliedResponse])
async def apply_for_job(
    request: ApplicationCreate,
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """
    Apply for a job.

    A repeated application from the same seeker gets an "already applied"
    message instead of a second record.
    """
    result = await application_crud.apply(db, request.model_dump())

    if isinstance(result, AlreadyAppliedResponse):
        logger.info(f"{request.seekerEmail} already applied for job {request.jobId}")
    else:
        logger.info(f"{request.seekerEmail} applied for job {request.jobId} (application {result.insertedId})")

    return result
