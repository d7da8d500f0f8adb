import logging
from typing import Annotated
from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_list_query
from app.core.exceptions import InvalidFieldError
from app.crud import rest_api
from app.models.job_update import JobUpdate, UpdateCategory
from app.schemas.job_update import JobUpdateCreate, JobUpdatePage, JobUpdateResponse, JobUpdateUpdate
from app.schemas.query import ListQuery

router = APIRouter(tags=["Job Updates"])
logger = logging.getLogger(__name__)

# Section listings show the newest notices first unless the caller sorts
SECTION_DEFAULT_SORT = "created_at:desc"

# ids are 32-bit INTEGER columns; anything outside is rejected before it reaches the driver
JobUpdateId = Annotated[int, Path(ge=1, le=2**31 - 1, description="Job update id")]


def _list_section(db: Session, query: ListQuery, category: UpdateCategory) -> dict:
    filters = dict(query.filters or {})
    filters["category"] = category
    section_query = query.model_copy(update={
        "filters": filters,
        "sort": query.sort or SECTION_DEFAULT_SORT,
    })
    return rest_api.get_all(db, JobUpdate, section_query)


@router.get("/job-updates", response_model=JobUpdatePage)
def list_job_updates(
    query: ListQuery = Depends(get_list_query),
    db: Session = Depends(get_db)
):
    """
    List job updates with pagination, search, filtering and sorting.

    Query params:
        page, limit: Paging (limit capped at MAX_PAGE_SIZE)
        search: Substring matched against title, organization, post name, etc.
        filter[<field>]: Exact match on any field, e.g. filter[category]=RESULT
        sort: field:direction, e.g. last_date:desc
    """
    return rest_api.get_all(db, JobUpdate, query)


@router.get("/job-updates/{job_update_id}", response_model=JobUpdateResponse)
def get_job_update(job_update_id: JobUpdateId, db: Session = Depends(get_db)):
    """Retrieve a single job update. Soft-deleted updates are reported as not found."""
    return rest_api.get_data_list_by_field(db, JobUpdate, "id", job_update_id)[0]


@router.post("/job-updates", status_code=201, response_model=JobUpdateResponse)
def create_job_update(
    request: JobUpdateCreate,
    db: Session = Depends(get_db)
):
    """Create a job update. category defaults to LATEST_JOB."""
    job_update = rest_api.create(db, JobUpdate, request.model_dump(exclude_none=True))
    logger.info(f"Created job update {job_update.id}: {job_update.title}")
    return job_update


@router.put("/job-updates/{job_update_id}", response_model=JobUpdateResponse)
def update_job_update(
    job_update_id: JobUpdateId,
    request: JobUpdateUpdate,
    db: Session = Depends(get_db)
):
    """
    Update a job update. Only the fields sent in the body are changed;
    an empty body is rejected with 400.

    When only one of start_date / last_date is sent it is checked against the
    stored value of the other, so the range can never end before it starts.
    """
    values = request.model_dump(exclude_unset=True)

    if "start_date" in values or "last_date" in values:
        current = rest_api.get_data_list_by_field(db, JobUpdate, "id", job_update_id)[0]
        start_date = values.get("start_date", current.start_date)
        last_date = values.get("last_date", current.last_date)
        if start_date and last_date and last_date < start_date:
            raise InvalidFieldError(
                "last_date cannot be before start_date",
                details={"start_date": str(start_date), "last_date": str(last_date)}
            )

    return rest_api.update(db, JobUpdate, job_update_id, values)


@router.delete("/job-updates/{job_update_id}", status_code=204)
def delete_job_update(job_update_id: JobUpdateId, db: Session = Depends(get_db)):
    """
    Soft delete a job update. The row is kept with deleted_at set and
    disappears from every listing.
    """
    rest_api.delete(db, JobUpdate, job_update_id)
    logger.info(f"Deleted job update {job_update_id}")
    return None


@router.get("/latest-jobs", response_model=JobUpdatePage)
def list_latest_jobs(
    query: ListQuery = Depends(get_list_query),
    db: Session = Depends(get_db)
):
    """Latest recruitment notifications, newest first."""
    return _list_section(db, query, UpdateCategory.LATEST_JOB)


@router.get("/admit-cards", response_model=JobUpdatePage)
def list_admit_cards(
    query: ListQuery = Depends(get_list_query),
    db: Session = Depends(get_db)
):
    """Admit card releases, newest first."""
    return _list_section(db, query, UpdateCategory.ADMIT_CARD)


@router.get("/answer-keys", response_model=JobUpdatePage)
def list_answer_keys(
    query: ListQuery = Depends(get_list_query),
    db: Session = Depends(get_db)
):
    """Answer keys, newest first."""
    return _list_section(db, query, UpdateCategory.ANSWER_KEY)


@router.get("/results", response_model=JobUpdatePage)
def list_results(
    query: ListQuery = Depends(get_list_query),
    db: Session = Depends(get_db)
):
    """Exam results, newest first."""
    return _list_section(db, query, UpdateCategory.RESULT)
