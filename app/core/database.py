"""
MongoDB connection context.

The store is opened once by the application lifespan and handed to
request handlers through the ``get_db`` dependency.
"""

import logging
from typing import Any, Optional

from bson import ObjectId
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import OperationFailure
from pymongo.server_api import ServerApi

from app.core.config import settings

logger = logging.getLogger(__name__)


class MongoStore:
    """Owns the motor client for the lifetime of the process."""

    def __init__(self, uri: str, db_name: str, client: Optional[Any] = None):
        self.uri = uri
        self.db_name = db_name
        self._client = client
        self._db: Optional[AsyncIOMotorDatabase] = None

    async def open(self, ensure: bool = True) -> "MongoStore":
        if self._client is None:
            self._client = AsyncIOMotorClient(
                self.uri,
                server_api=ServerApi("1", strict=True, deprecation_errors=True),
            )
        self._db = self._client[self.db_name]
        logger.info(f"Opened MongoDB store (database: {self.db_name})")

        if ensure:
            try:
                await ensure_indexes(self._db)
            except OperationFailure as e:
                # Existing duplicate applications block the unique index
                logger.warning(f"Could not create application index, duplicates stay possible: {e}")

        return self

    async def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("Closed MongoDB store")
        self._client = None
        self._db = None

    @property
    def db(self) -> AsyncIOMotorDatabase:
        if self._db is None:
            raise RuntimeError("MongoStore is not open")
        return self._db

    async def ping(self) -> dict:
        return await self.db.command("ping")


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    """
    Create the indexes the repositories rely on.

    The compound unique index on seekers makes the (jobId, seekerEmail)
    pair unique even when two applications race past the duplicate check.
    """
    await db[settings.SEEKERS_COLLECTION].create_index(
        [("jobId", ASCENDING), ("seekerEmail", ASCENDING)],
        unique=True,
        name="jobId_seekerEmail_unique",
    )


def is_valid_object_id(value: Any) -> bool:
    """True when value is a 24-hex string (or 12-byte id) ObjectId accepts."""
    return isinstance(value, (str, ObjectId)) and ObjectId.is_valid(value)


def serialize_document(value: Any) -> Any:
    """Replace ObjectIds in a stored document with their hex strings."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: serialize_document(item) for key, item in value.items()}
    if isinstance(value, list):
        return [serialize_document(item) for item in value]
    return value


def get_db(request: Request) -> AsyncIOMotorDatabase:
    """
    Dependency function to get the database handle.
    Used in FastAPI endpoints with Depends(get_db)
    """
    return request.app.state.store.db
