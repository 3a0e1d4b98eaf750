import logging
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.database import get_db
from app.core.deps import get_current_identity, require_same_email, valid_job_id
from app.crud import job as job_crud
from app.schemas.job import JobCreateRequest, JobUpdateRequest
from app.schemas.results import DeleteResult, InsertResult, UpdateResult

router = APIRouter(tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.get("/jobs", response_model=List[Dict[str, Any]])
async def list_jobs(db: AsyncIOMotorDatabase = Depends(get_db)):
    """List every job posting (no pagination)."""
    return await job_crud.get_all(db)


@router.get("/jobs/{job_id}", response_model=Optional[Dict[str, Any]])
async def get_job(
    job_id: str = Depends(valid_job_id),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """
    Retrieve a job by id.

    Responds with null rather than 404 when no job has that id.
    """
    return await job_crud.get_by_id(db, job_id)


@router.get("/jobFilter", response_model=List[Dict[str, Any]])
async def list_own_jobs(
    email: Optional[str] = None,
    identity: Dict[str, Any] = Depends(get_current_identity),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """
    List the jobs posted by the caller.

    The email query parameter must match the email in the caller's token.
    """
    require_same_email(email, identity)
    return await job_crud.get_by_owner_email(db, email)


@router.post("/jobs", response_model=InsertResult)
async def create_job(
    request: JobCreateRequest,
    identity: Dict[str, Any] = Depends(get_current_identity),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """
    Post a new job owned by the caller.

    The job's userEmail must match the email in the caller's token.
    """
    require_same_email(request.userEmail, identity)

    result = await job_crud.create(db, request.model_dump(exclude_unset=True))
    logger.info(f"Created job {result.insertedId} for {request.userEmail}")
    return result


@router.delete("/deleteJob/{job_id}", response_model=DeleteResult)
async def delete_job(
    job_id: str = Depends(valid_job_id),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """
    Delete a job and every application made to it.

    Deleting a job that is already gone reports deletedCount 0.
    """
    result = await job_crud.delete(db, job_id)
    logger.info(f"Deleted job {job_id} (deletedCount={result.deletedCount})")
    return result


@router.patch("/updatePost/{job_id}", response_model=UpdateResult)
async def update_job(
    request: JobUpdateRequest,
    job_id: str = Depends(valid_job_id),
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """Replace every editable field of a job, applicant count included."""
    result = await job_crud.replace_fields(db, job_id, request.model_dump())
    logger.info(f"Updated job {job_id} (matched={result.matchedCount}, modified={result.modifiedCount})")
    return result
