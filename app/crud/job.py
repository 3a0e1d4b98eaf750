"""
CRUD operations for job postings.

Implements the Repository pattern over the ``jobs`` collection. Ids are
the raw 24-hex strings from the request path; callers validate their
shape before they get here.
"""

from typing import Any, Dict, List, Optional
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

from app.core.config import settings
from app.core.database import serialize_document
from app.schemas.results import DeleteResult, InsertResult, UpdateResult


def _jobs(db: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    return db[settings.JOBS_COLLECTION]


async def get_all(db: AsyncIOMotorDatabase) -> List[Dict[str, Any]]:
    """
    Retrieve every job posting, unfiltered and unpaginated.

    Args:
        db: Database handle

    Returns:
        List of job documents
    """
    jobs = await _jobs(db).find({}).to_list(length=None)
    return [serialize_document(job) for job in jobs]


async def get_by_id(db: AsyncIOMotorDatabase, job_id: str) -> Optional[Dict[str, Any]]:
    """
    Retrieve a job by its id.

    Args:
        db: Database handle
        job_id: Job id as a 24-hex string

    Returns:
        Job document if found, None otherwise
    """
    job = await _jobs(db).find_one({"_id": ObjectId(job_id)})
    return serialize_document(job) if job else None


async def get_by_owner_email(db: AsyncIOMotorDatabase, email: Optional[str]) -> List[Dict[str, Any]]:
    """
    Retrieve the jobs posted by an owner.

    A missing email leaves the query unfiltered.
    """
    query = {"userEmail": email} if email else {}
    jobs = await _jobs(db).find(query).to_list(length=None)
    return [serialize_document(job) for job in jobs]


async def create(db: AsyncIOMotorDatabase, job_data: Dict[str, Any]) -> InsertResult:
    """
    Insert a new job posting as sent by the owner.

    Args:
        db: Database handle
        job_data: Job fields, stored verbatim

    Returns:
        Insert acknowledgement with the new job id
    """
    result = await _jobs(db).insert_one(dict(job_data))
    return InsertResult(acknowledged=result.acknowledged, insertedId=str(result.inserted_id))


async def delete(db: AsyncIOMotorDatabase, job_id: str) -> DeleteResult:
    """
    Delete a job and every application made to it.

    The two deletes are independent writes. Applications reference the
    job by the same raw id string.

    Returns:
        Acknowledgement for the job delete (deletedCount is 0 when the
        job was already gone)
    """
    result = await _jobs(db).delete_one({"_id": ObjectId(job_id)})
    await db[settings.SEEKERS_COLLECTION].delete_many({"jobId": job_id})
    return DeleteResult(acknowledged=result.acknowledged, deletedCount=result.deleted_count)


async def replace_fields(db: AsyncIOMotorDatabase, job_id: str, fields: Dict[str, Any]) -> UpdateResult:
    """
    Overwrite a job's editable fields with the given values.

    Args:
        db: Database handle
        job_id: Job id as a 24-hex string
        fields: Field values to $set, applicant count included

    Returns:
        Update acknowledgement
    """
    result = await _jobs(db).update_one({"_id": ObjectId(job_id)}, {"$set": fields})
    return _update_result(result)


async def increment_applicants(db: AsyncIOMotorDatabase, job_id: str) -> UpdateResult:
    """Add one to a job's jobApplicantsNumber."""
    result = await _jobs(db).update_one(
        {"_id": ObjectId(job_id)},
        {"$inc": {"jobApplicantsNumber": 1}},
    )
    return _update_result(result)


def _update_result(result) -> UpdateResult:
    upserted_id = result.upserted_id
    return UpdateResult(
        acknowledged=result.acknowledged,
        matchedCount=result.matched_count,
        modifiedCount=result.modified_count,
        upsertedCount=1 if upserted_id is not None else 0,
        upsertedId=str(upserted_id) if upserted_id is not None else None,
    )
