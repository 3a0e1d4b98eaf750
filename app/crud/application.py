"""
CRUD operations for seeker applications (the ``seekers`` collection).
"""

from typing import Any, Dict, List, Optional, Union
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.core.config import settings
from app.core.database import is_valid_object_id, serialize_document
from app.crud import job as job_crud
from app.schemas.application import AlreadyAppliedResponse
from app.schemas.results import InsertResult


async def get_for_seeker(db: AsyncIOMotorDatabase, email: Optional[str]) -> List[Dict[str, Any]]:
    """
    Retrieve a seeker's applications, each joined with the job it targets.

    Jobs are fetched in one batched lookup. An application whose job no
    longer exists carries no ``jobInfo`` key.

    Args:
        db: Database handle
        email: Seeker email; a missing email yields no applications

    Returns:
        List of application documents
    """
    if not email:
        return []

    applications = await db[settings.SEEKERS_COLLECTION].find({"seekerEmail": email}).to_list(length=None)

    job_ids = list({
        ObjectId(application["jobId"])
        for application in applications
        if is_valid_object_id(application.get("jobId"))
    })
    jobs_by_id = {}
    if job_ids:
        jobs = await db[settings.JOBS_COLLECTION].find({"_id": {"$in": job_ids}}).to_list(length=None)
        jobs_by_id = {str(job["_id"]): serialize_document(job) for job in jobs}

    combined = []
    for application in applications:
        entry = serialize_document(application)
        job_info = jobs_by_id.get(application.get("jobId"))
        if job_info is not None:
            entry["jobInfo"] = job_info
        combined.append(entry)

    return combined


async def apply(
    db: AsyncIOMotorDatabase,
    application: Dict[str, Any]
) -> Union[InsertResult, AlreadyAppliedResponse]:
    """
    Record an application unless the seeker already applied to the job.

    On insert the job's applicant counter goes up by one. A duplicate,
    whether caught by the lookup or by the unique index, is reported as
    a notice rather than an error.

    Args:
        db: Database handle
        application: Application fields including jobId and seekerEmail

    Returns:
        Insert acknowledgement, or the already-applied notice
    """
    seekers = db[settings.SEEKERS_COLLECTION]

    already_applied = await seekers.find_one({
        "jobId": application["jobId"],
        "seekerEmail": application["seekerEmail"],
    })
    if already_applied:
        return AlreadyAppliedResponse()

    try:
        result = await seekers.insert_one(dict(application))
    except DuplicateKeyError:
        return AlreadyAppliedResponse()

    await job_crud.increment_applicants(db, application["jobId"])

    return InsertResult(acknowledged=result.acknowledged, insertedId=str(result.inserted_id))
