from pydantic import BaseModel, Field
from typing import Any, Dict, Optional


class ListQuery(BaseModel):
    """
    Options accepted by the generic get_all helper.

    sort takes the form "field:direction", e.g. "title:asc" or "created_at:DESC".
    """
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)
    search: Optional[str] = None
    filters: Optional[Dict[str, Any]] = None
    sort: Optional[str] = None
