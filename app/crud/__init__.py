"""
CRUD operations (Create, Read, Update, Delete) for the document collections.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern.
"""

from app.crud import application, job

__all__ = ["application", "job"]
