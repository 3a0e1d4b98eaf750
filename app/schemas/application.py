"""
Pydantic schemas for seeker applications.
"""

from pydantic import BaseModel, ConfigDict, field_validator

from app.core.database import is_valid_object_id

ALREADY_APPLIED_MESSAGE = "Already applied for this job."


class ApplicationCreate(BaseModel):
    """
    Request to apply for a job.

    Seeker-supplied extras (resume link, cover note, ...) pass through as-is.
    """
    model_config = ConfigDict(extra="allow")

    jobId: str
    seekerEmail: str

    @field_validator('jobId')
    @classmethod
    def validate_job_id(cls, v: str) -> str:
        """Ensure jobId is the string form of a job's ObjectId"""
        if not is_valid_object_id(v):
            raise ValueError('jobId must be a 24 character hex string')
        return v


class AlreadyAppliedResponse(BaseModel):
    """Returned instead of an insert result for a repeated application"""
    message: str = ALREADY_APPLIED_MESSAGE
