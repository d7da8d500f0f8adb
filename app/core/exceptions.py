"""
Exceptions raised by the CRUD layer.

Each exception carries the HTTP status it maps to, so the API layer can
translate it without knowing which operation failed.
"""

from typing import Any, Dict, Optional


class CrudError(Exception):
    """Base exception for all data-access errors."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class RecordNotFoundError(CrudError):
    """
    Raised when no live record matches the lookup.

    Examples:
    - Unknown id on update or delete
    - Record already soft-deleted
    - Field lookup returning no rows

    HTTP Status: 404 Not Found
    """

    status_code = 404


class EmptyPayloadError(CrudError):
    """
    Raised when create or update receives no data.

    HTTP Status: 400 Bad Request
    """

    status_code = 400


class InvalidFieldError(CrudError):
    """
    Raised when a query or payload names something the model cannot take.

    Examples:
    - Filter or sort on a column the model does not have
    - Sort direction other than asc/desc
    - Filter value that cannot be converted to the column type
    - Payload writing the primary key or the soft-delete marker

    HTTP Status: 400 Bad Request
    """

    status_code = 400
