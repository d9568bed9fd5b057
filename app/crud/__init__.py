"""
CRUD operations (Create, Read, Update, Delete) for the jobly tables.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern.
"""

from app.crud import company, job, user

__all__ = ["company", "job", "user"]
