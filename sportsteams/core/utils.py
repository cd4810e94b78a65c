from sqlalchemy.orm import Session
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sportsteams.core.errors import (
    StoreError,
    UniquenessViolation,
    ReferentialViolation,
    ValidationError,
    NotFoundError,
)


def translate_integrity_error(error: IntegrityError) -> StoreError:
    """Map a database constraint failure onto the store error taxonomy."""
    message = str(error.orig).lower()
    if "unique" in message or "duplicate key" in message:
        return UniquenessViolation("Name already exists", {"reason": str(error.orig)})
    if "foreign key" in message:
        return ReferentialViolation("Referenced row does not exist or is still in use", {"reason": str(error.orig)})
    if "check" in message:
        return ValidationError("Row rejected by a check constraint", {"reason": str(error.orig)})
    return StoreError("Integrity error", {"reason": str(error.orig)})


def get_or_raise(db: Session, model, row_id: int):
    """
    Fetch a row by primary key.

    :param db: SQLAlchemy session
    :param model: SQLAlchemy model class
    :param row_id: integer surrogate identifier
    :return: the model instance
    :raises NotFoundError: when no such row exists
    """
    row = db.get(model, row_id)
    if row is None:
        raise NotFoundError(f"{model.__name__} {row_id} not found", {"id": row_id})
    return row


def ensure_reference(db: Session, model, row_id, field: str):
    """Reject a reference that does not resolve; an unset (None) reference is allowed."""
    if row_id is None:
        return
    if db.get(model, row_id) is None:
        raise ReferentialViolation(
            f"{field}={row_id} does not reference an existing {model.__name__}",
            {"field": field, "value": row_id},
        )


def ensure_unique(db: Session, model, field: str, value, exclude_id=None):
    """Reject a value already held by another row of the same table."""
    column = getattr(model, field)
    query = db.query(model).filter(column == value)
    if exclude_id is not None:
        pk = model.__mapper__.primary_key[0]
        query = query.filter(pk != exclude_id)
    if query.first():
        raise UniquenessViolation(
            f"{model.__name__} with {field}='{value}' already exists",
            {"field": field, "value": value},
        )


def select_rows(db: Session, model, filters: dict = None):
    """Build a query selecting the rows whose columns equal every value in `filters`."""
    query = db.query(model)
    columns = model.__table__.columns
    for field, value in (filters or {}).items():
        if field not in columns:
            raise ValidationError(f"Unknown field '{field}' for {model.__tablename__}", {"field": field})
        column = getattr(model, field)
        query = query.filter(column.is_(None) if value is None else column == value)
    return query


def assignable_values(model, values: dict) -> dict:
    """Keep only real, non-identifier columns; reject anything else."""
    columns = model.__table__.columns
    if not values:
        raise ValidationError("No fields to update")
    primary_keys = {c.name for c in model.__table__.primary_key.columns}
    for field in values:
        if field not in columns:
            raise ValidationError(f"Unknown field '{field}' for {model.__tablename__}", {"field": field})
        if field in primary_keys:
            raise ValidationError(f"Identifier '{field}' cannot be reassigned", {"field": field})
    return dict(values)


def ensure_no_dependents(db: Session, ids: list, dependents: list, label: str):
    """
    Refuse a delete while any row still references one of `ids`.

    :param dependents: list of (model, foreign key field) pairs pointing at the table being deleted from
    """
    if not ids:
        return
    for model, field in dependents:
        column = getattr(model, field)
        count = db.query(func.count()).select_from(model).filter(column.in_(ids)).scalar()
        if count:
            raise ReferentialViolation(
                f"Cannot delete {label}: {count} row(s) in {model.__tablename__}.{field} still reference it",
                {"table": model.__tablename__, "field": field, "count": count},
            )
