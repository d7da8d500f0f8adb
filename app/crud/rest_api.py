"""
Generic CRUD operations shared by every resource.

Each function takes a database session and a mapped model class, so a
resource router only has to pick its model and schemas. Models that carry a
``deleted_at`` column (see SoftDeleteMixin) are treated as soft-delete models:
stamped rows are invisible to every operation here and delete only stamps them.
"""

import logging
import math
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy import Boolean, Enum, String, Text, false, or_
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Query, Session

from app.core.exceptions import EmptyPayloadError, InvalidFieldError, RecordNotFoundError
from app.schemas.query import ListQuery

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")

SOFT_DELETE_COLUMN = "deleted_at"
SORT_DIRECTIONS = ("asc", "desc")
TRUE_STRINGS = {"true", "1", "yes"}
FALSE_STRINGS = {"false", "0", "no"}

LIKE_ESCAPE = "\\"


def _escape_like(term: str) -> str:
    """Search terms are literal text, so LIKE wildcards in them are escaped."""
    for char in (LIKE_ESCAPE, "%", "_"):
        term = term.replace(char, LIKE_ESCAPE + char)
    return term


def _columns(model: Type[ModelType]):
    return sa_inspect(model).columns


def _column(model: Type[ModelType], name: str):
    columns = _columns(model)
    if name not in columns:
        raise InvalidFieldError(
            f"{model.__name__} has no field '{name}'",
            details={"field": name}
        )
    return columns[name]


def _primary_key(model: Type[ModelType]):
    return sa_inspect(model).primary_key[0]


def _is_soft_delete(model: Type[ModelType]) -> bool:
    return SOFT_DELETE_COLUMN in _columns(model)


def _live_query(db: Session, model: Type[ModelType]) -> Query:
    """Base query that hides soft-deleted rows where the model supports it."""
    query = db.query(model)
    if _is_soft_delete(model):
        query = query.filter(_columns(model)[SOFT_DELETE_COLUMN].is_(None))
    return query


def _searchable_columns(model: Type[ModelType]) -> list:
    """Plain string columns; enum and long-text columns are left out."""
    return [
        column for column in _columns(model)
        if isinstance(column.type, String) and not isinstance(column.type, (Text, Enum))
    ]


def _coerce(column, value: Any) -> Any:
    """
    Convert a raw (usually query-string) value to the column's Python type.

    Non-string values are assumed to already have the right type.
    """
    if not isinstance(value, str):
        return value

    column_type = column.type
    try:
        if isinstance(column_type, Boolean):
            lowered = value.strip().lower()
            if lowered in TRUE_STRINGS:
                return True
            if lowered in FALSE_STRINGS:
                return False
            raise ValueError(f"'{value}' is not a boolean")

        try:
            python_type = column_type.python_type
        except NotImplementedError:
            return value

        if python_type in (datetime, date):
            return python_type.fromisoformat(value)
        return python_type(value)
    except ValueError as e:
        raise InvalidFieldError(
            f"Invalid value '{value}' for field '{column.key}': {e}",
            details={"field": column.key, "value": value}
        ) from e


def _order_by(model: Type[ModelType], sort: Optional[str]) -> list:
    """Parse "field:direction"; the primary key breaks ties so pages never overlap."""
    primary_key = _primary_key(model)
    if not sort:
        return [primary_key.asc()]

    field, _, direction = sort.partition(":")
    direction = (direction or "asc").strip().lower()
    if direction not in SORT_DIRECTIONS:
        raise InvalidFieldError(
            f"Invalid sort direction '{direction}', expected asc or desc",
            details={"sort": sort}
        )

    column = _column(model, field.strip())
    order_by = [column, primary_key] if column.key != primary_key.key else [column]
    return [c.asc() if direction == "asc" else c.desc() for c in order_by]


def _as_values(data: Union[Dict[str, Any], BaseModel, None]) -> Dict[str, Any]:
    if data is None:
        return {}
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=True)
    return dict(data)


def _check_fields(model: Type[ModelType], values: Dict[str, Any], protected: tuple = ()) -> None:
    for key in values:
        _column(model, key)
        if key in protected:
            raise InvalidFieldError(
                f"Field '{key}' of {model.__name__} cannot be modified",
                details={"field": key}
            )


def get_all(
    db: Session,
    model: Type[ModelType],
    query: Union[ListQuery, Dict[str, Any], None] = None
) -> Dict[str, Any]:
    """
    Retrieve one page of records with search, filtering and sorting.

    Args:
        db: Database session
        model: SQLAlchemy model class
        query: Paging, search, filter and sort options (ListQuery or dict)

    Returns:
        Dict with rows, count (total matches), total_pages and current_page

    Raises:
        InvalidFieldError: Unknown filter/sort field, bad sort direction or
            a filter value that does not fit its column
    """
    try:
        if not isinstance(query, ListQuery):
            query = ListQuery(**(query or {}))

        offset = (query.page - 1) * query.limit
        db_query = _live_query(db, model)

        if query.search:
            columns = _searchable_columns(model)
            if columns:
                pattern = f"%{_escape_like(query.search)}%"
                db_query = db_query.filter(or_(*[column.like(pattern, escape=LIKE_ESCAPE) for column in columns]))
            else:
                db_query = db_query.filter(false())

        if query.filters:
            for key, value in query.filters.items():
                column = _column(model, key)
                db_query = db_query.filter(column == _coerce(column, value))

        order_by = _order_by(model, query.sort)

        count = db_query.count()
        rows = db_query.order_by(*order_by).offset(offset).limit(query.limit).all()

        logger.info(f"Read records from {model.__name__} with query {query.model_dump(exclude_none=True)}")
        return {
            "rows": rows,
            "count": count,
            "total_pages": math.ceil(count / query.limit),
            "current_page": query.page,
        }
    except Exception as e:
        logger.error(f"Error reading records from {model.__name__}: {e}")
        raise


def get_data_list_by_field(
    db: Session,
    model: Type[ModelType],
    field_name: str,
    field_value: Any
) -> List[ModelType]:
    """
    Retrieve every live record whose field equals the given value.

    Args:
        db: Database session
        model: SQLAlchemy model class
        field_name: Column to match on (e.g. "id", "category")
        field_value: Value to match

    Returns:
        Non-empty list of matching records

    Raises:
        RecordNotFoundError: Nothing matched
        InvalidFieldError: Unknown field or value of the wrong type
    """
    try:
        column = _column(model, field_name)
        result = _live_query(db, model).filter(column == _coerce(column, field_value)).all()

        if not result:
            raise RecordNotFoundError(
                f"{model.__name__} with {field_name} {field_value} not found",
                details={"field": field_name, "value": field_value}
            )

        logger.info(f"Read record(s) from {model.__name__} with {field_name} {field_value}")
        return result
    except Exception as e:
        logger.error(f"Error reading {model.__name__}: {e}")
        raise


def create(
    db: Session,
    model: Type[ModelType],
    data: Union[Dict[str, Any], BaseModel]
) -> ModelType:
    """
    Insert a new record in its own transaction.

    Args:
        db: Database session
        model: SQLAlchemy model class
        data: Column values (dict, or a Pydantic model whose set fields are used)

    Returns:
        Created record, refreshed so server defaults are populated

    Raises:
        EmptyPayloadError: No data given
        InvalidFieldError: Data names a column the model does not have
    """
    values = _as_values(data)
    try:
        if not values:
            raise EmptyPayloadError("Data cannot be empty")
        _check_fields(model, values)

        record = model(**values)
        db.add(record)
        db.commit()
        db.refresh(record)

        new_id = getattr(record, _primary_key(model).key)
        logger.info(f"Created record in {model.__name__} with id {new_id}")
        return record
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating record in {model.__name__}: {e}")
        raise


def update(
    db: Session,
    model: Type[ModelType],
    record_id: Any,
    data: Union[Dict[str, Any], BaseModel]
) -> ModelType:
    """
    Update a live record by primary key in its own transaction.

    Args:
        db: Database session
        model: SQLAlchemy model class
        record_id: Primary key of the record
        data: Columns to change

    Returns:
        Updated record

    Raises:
        EmptyPayloadError: No data given
        InvalidFieldError: Unknown column, or an attempt to write the primary
            key or the soft-delete marker
        RecordNotFoundError: No live record with that id
    """
    values = _as_values(data)
    primary_key = _primary_key(model)
    try:
        if not values:
            raise EmptyPayloadError("Update data cannot be empty")
        _check_fields(model, values, protected=(primary_key.key, SOFT_DELETE_COLUMN))

        record = _live_query(db, model).filter(primary_key == record_id).first()
        if record is None:
            raise RecordNotFoundError(
                f"{model.__name__} with id {record_id} not found or no changes applied",
                details={"id": record_id}
            )

        for key, value in values.items():
            setattr(record, key, value)

        db.commit()
        db.refresh(record)

        logger.info(f"Updated record in {model.__name__} with id {record_id}")
        return record
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating record in {model.__name__}: {e}")
        raise


def delete(db: Session, model: Type[ModelType], record_id: Any) -> bool:
    """
    Delete a record by primary key.

    Soft-delete models get deleted_at stamped; other models are removed.

    Args:
        db: Database session
        model: SQLAlchemy model class
        record_id: Primary key of the record

    Returns:
        True once the record is deleted

    Raises:
        RecordNotFoundError: No live record with that id
    """
    try:
        record = _live_query(db, model).filter(_primary_key(model) == record_id).first()
        if record is None:
            raise RecordNotFoundError(
                f"{model.__name__} with id {record_id} not found or already deleted",
                details={"id": record_id}
            )

        if _is_soft_delete(model):
            setattr(record, SOFT_DELETE_COLUMN, datetime.now(timezone.utc))
            action = "Soft deleted"
        else:
            db.delete(record)
            action = "Deleted"

        db.commit()
        logger.info(f"{action} record from {model.__name__} with id {record_id}")
        return True
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting record from {model.__name__}: {e}")
        raise
