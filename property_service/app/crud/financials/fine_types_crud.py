# app/crud/financials/fine_types_crud.py
from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from shared.core.schemas import CommonQueryParams, Lookup
from shared.helpers.json_response_helper import not_found_response, duplicate_response, dependency_response, success_response
from shared.helpers.payload_helper import reject_cleared_fields
from shared.helpers.reference_helper import first_dependency
from shared.utils.app_status_code import AppStatusCode
from ...models.financials.fine_types import FineType
from ...models.financials.fines import Fine
from ...schemas.financials.fine_types_schemas import (
    FineTypeCreate, FineTypeOut, FineTypeUpdate
)


def get_list(db: Session, params: CommonQueryParams):
    query = db.query(FineType)
    if params.search:
        query = query.filter(FineType.fine_type.ilike(f"%{params.search}%"))

    total = query.with_entities(func.count(FineType.id)).scalar()
    rows = (
        query.order_by(FineType.fine_type.asc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return {"items": [FineTypeOut.model_validate(r) for r in rows], "total": total}


def get_by_id(db: Session, type_id: int) -> Optional[FineType]:
    return db.query(FineType).filter(FineType.id == type_id).first()


def _check_duplicate(db: Session, fine_type: str, exclude_id: Optional[int] = None):
    query = db.query(FineType).filter(
        func.lower(FineType.fine_type) == fine_type.lower())
    if exclude_id is not None:
        query = query.filter(FineType.id != exclude_id)

    if query.first():
        return duplicate_response(f"Fine type '{fine_type}' already exists")


def create(db: Session, payload: FineTypeCreate):
    _check_duplicate(db, payload.fine_type)

    obj = FineType(fine_type=payload.fine_type)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return success_response(
        data=FineTypeOut.model_validate(obj),
        message=f"Fine type '{obj.fine_type}' created",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY
    )


def update(db: Session, payload: FineTypeUpdate):
    obj = get_by_id(db, payload.id)
    if not obj:
        return None

    update_data = payload.model_dump(exclude_unset=True, exclude={"id"})
    reject_cleared_fields(update_data, ("fine_type",))
    if "fine_type" in update_data:
        _check_duplicate(db, update_data["fine_type"], exclude_id=obj.id)
        obj.fine_type = update_data["fine_type"]

    db.commit()
    db.refresh(obj)
    return success_response(
        data=FineTypeOut.model_validate(obj),
        message=f"Fine type '{obj.fine_type}' updated",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY
    )


def delete(db: Session, type_id: int):
    obj = get_by_id(db, type_id)
    if not obj:
        return not_found_response("Fine type", type_id)

    blocking = first_dependency(db, [
        (Fine, Fine.fine_type_id, type_id, "fines"),
    ])
    if blocking:
        return dependency_response(f"Fine type is used by {blocking}")

    db.delete(obj)
    db.commit()
    return success_response(
        data=None,
        message=f"Fine type with ID {type_id} deleted",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY
    )


def fine_type_lookup(db: Session):
    rows = db.query(FineType.id, FineType.fine_type).order_by(
        FineType.fine_type.asc()).all()
    return [Lookup(id=r.id, name=r.fine_type) for r in rows]
