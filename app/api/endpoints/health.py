"""
Health check and monitoring endpoints.
"""

import logging
from typing import Dict, Any
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from sqlalchemy import func, text

from app.core.database import get_db
from app.models.job_update import JobUpdate, UpdateCategory

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> Dict[str, str]:
    """
    Basic health check endpoint.

    Returns 200 OK if the service is running.
    Use this for simple uptime monitoring and load balancer health checks.
    """
    return {
        "status": "healthy",
        "timestamp": _utc_timestamp()
    }


@router.get("/health/detailed", status_code=status.HTTP_200_OK)
def detailed_health_check(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Detailed health check with dependency status.

    Checks database connectivity. The response is always 200; inspect
    "status" for the overall result.
    """
    health_status = {
        "status": "healthy",
        "timestamp": _utc_timestamp(),
        "checks": {}
    }

    try:
        db.execute(text("SELECT 1"))
        health_status["checks"]["database"] = {
            "status": "healthy",
            "message": "Database connection successful"
        }
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = {
            "status": "unhealthy",
            "message": f"Database error: {str(e)}"
        }

    return health_status


@router.get("/metrics", status_code=status.HTTP_200_OK)
def get_metrics(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Counts of live (not soft-deleted) job updates, overall and per section.
    """
    live = JobUpdate.deleted_at.is_(None)
    per_category = dict(
        db.query(JobUpdate.category, func.count(JobUpdate.id))
        .filter(live)
        .group_by(JobUpdate.category)
        .all()
    )

    return {
        "timestamp": _utc_timestamp(),
        "metrics": {
            "total_job_updates": sum(per_category.values()),
            "active_job_updates": db.query(func.count(JobUpdate.id)).filter(
                live, JobUpdate.is_active.is_(True)
            ).scalar() or 0,
            "by_category": {
                category.value: per_category.get(category, 0) for category in UpdateCategory
            },
        }
    }
