"""
FastAPI dependencies shared by resource routers.
"""

import re
from typing import Optional

from fastapi import Query, Request

from app.core.config import settings
from app.schemas.query import ListQuery

# filter[<field>]=<value>, the bracket form used by the web frontend
FILTER_PARAM = re.compile(r"filter\[(\w+)\]")


def get_list_query(
    request: Request,
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int = Query(
        settings.DEFAULT_PAGE_SIZE,
        ge=1,
        le=settings.MAX_PAGE_SIZE,
        description="Records per page"
    ),
    search: Optional[str] = Query(None, description="Substring matched against every text field"),
    sort: Optional[str] = Query(None, description="field:direction, e.g. title:asc"),
) -> ListQuery:
    """
    Collect paging, search, sort and filter[...] query parameters.

    Usage:
        GET /job-updates?page=2&limit=20&search=clerk&filter[category]=RESULT&sort=title:asc
    """
    filters = {}
    for key, value in request.query_params.multi_items():
        match = FILTER_PARAM.fullmatch(key)
        if match:
            filters[match.group(1)] = value

    return ListQuery(
        page=page,
        limit=limit,
        search=search or None,
        filters=filters or None,
        sort=sort or None,
    )
