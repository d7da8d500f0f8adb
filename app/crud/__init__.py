"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between API routes and database operations.
rest_api holds the generic operations every resource router uses.
"""

from app.crud import rest_api

__all__ = ["rest_api"]
