"""
Reusable column sets for models.
"""

from sqlalchemy import Column, DateTime, func


class TimestampMixin:
    """created_at / updated_at maintained by the database."""

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class SoftDeleteMixin:
    """
    Marks a model as "paranoid": rows are never removed, only stamped.

    The generic CRUD helper checks for the deleted_at column and hides stamped
    rows from every read, update and delete.
    """

    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
