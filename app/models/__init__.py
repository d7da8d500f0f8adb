"""
Database models package.
"""

from app.models.job_update import JobUpdate, UpdateCategory

__all__ = ["JobUpdate", "UpdateCategory"]
