from typing import Any, Type
from sqlalchemy.orm import Session

from shared.core.errors import InvalidReferenceError


def ensure_reference(db: Session, model: Type[Any], record_id: Any, label: str):
    """Return the referenced row or raise InvalidReferenceError naming it."""
    if record_id is None:
        raise InvalidReferenceError(f"{label} is required")

    obj = db.get(model, record_id)
    if obj is None:
        raise InvalidReferenceError(
            f"Referenced {label} {record_id} does not exist")
    return obj


def first_dependency(db: Session, dependencies):
    """Return the label of the first (model, column, value, label) that still has rows."""
    for model, column, value, label in dependencies:
        exists = db.query(model.id).filter(column == value).first()
        if exists:
            return label
    return None
