from pydantic import BaseModel, ConfigDict
from typing import Any, Optional


class JobCreateRequest(BaseModel):
    """
    Schema for posting a new job.

    Only userEmail takes part in the ownership check; every other field,
    listed or not, is stored as sent.
    """
    model_config = ConfigDict(extra="allow")

    userEmail: Optional[str] = None


class JobUpdateRequest(BaseModel):
    """Full job field set; values are stored as sent and missing fields become null"""
    model_config = ConfigDict(extra="ignore")

    jobBanner: Any = None
    companyName: Any = None
    companyLogo: Any = None
    jobTitle: Any = None
    loggedInUser: Any = None
    jobCategory: Any = None
    salaryRange: Any = None
    jobDescription: Any = None
    jobPostingDate: Any = None
    applicationDeadline: Any = None
    vacancy: Any = None
    jobApplicantsNumber: Any = None
    userEmail: Any = None
