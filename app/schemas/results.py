"""
Write acknowledgements, shaped like the MongoDB driver's result documents.
"""

from pydantic import BaseModel
from typing import Optional


class InsertResult(BaseModel):
    acknowledged: bool
    insertedId: str


class DeleteResult(BaseModel):
    acknowledged: bool
    deletedCount: int


class UpdateResult(BaseModel):
    acknowledged: bool
    matchedCount: int
    modifiedCount: int
    upsertedCount: int = 0
    upsertedId: Optional[str] = None


class SuccessResponse(BaseModel):
    success: bool = True
