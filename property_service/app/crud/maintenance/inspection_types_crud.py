# app/crud/maintenance/inspection_types_crud.py
from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from shared.core.schemas import CommonQueryParams, Lookup
from shared.helpers.json_response_helper import not_found_response, duplicate_response, dependency_response, success_response
from shared.helpers.payload_helper import reject_cleared_fields
from shared.helpers.reference_helper import first_dependency
from shared.utils.app_status_code import AppStatusCode
from ...models.maintenance.inspection_types import InspectionType
from ...models.maintenance.inspections import Inspection
from ...schemas.maintenance.inspection_types_schemas import (
    InspectionTypeCreate, InspectionTypeOut, InspectionTypeUpdate
)


def get_list(db: Session, params: CommonQueryParams):
    query = db.query(InspectionType)
    if params.search:
        query = query.filter(InspectionType.inspection_type.ilike(f"%{params.search}%"))

    total = query.with_entities(func.count(InspectionType.id)).scalar()
    rows = (
        query.order_by(InspectionType.inspection_type.asc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return {"items": [InspectionTypeOut.model_validate(r) for r in rows], "total": total}


def get_by_id(db: Session, type_id: int) -> Optional[InspectionType]:
    return db.query(InspectionType).filter(InspectionType.id == type_id).first()


def _check_duplicate(db: Session, name: str, exclude_id: Optional[int] = None):
    query = db.query(InspectionType).filter(
        func.lower(InspectionType.inspection_type) == name.lower())
    if exclude_id is not None:
        query = query.filter(InspectionType.id != exclude_id)

    if query.first():
        return duplicate_response(f"Inspection type '{name}' already exists")


def create(db: Session, payload: InspectionTypeCreate):
    _check_duplicate(db, payload.inspection_type)

    obj = InspectionType(inspection_type=payload.inspection_type)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return success_response(
        data=InspectionTypeOut.model_validate(obj),
        message=f"Inspection type '{obj.inspection_type}' created",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY
    )


def update(db: Session, payload: InspectionTypeUpdate):
    obj = get_by_id(db, payload.id)
    if not obj:
        return None

    update_data = payload.model_dump(exclude_unset=True, exclude={"id"})
    reject_cleared_fields(update_data, ("inspection_type",))
    if "inspection_type" in update_data:
        _check_duplicate(db, update_data["inspection_type"], exclude_id=obj.id)
        obj.inspection_type = update_data["inspection_type"]

    db.commit()
    db.refresh(obj)
    return success_response(
        data=InspectionTypeOut.model_validate(obj),
        message=f"Inspection type '{obj.inspection_type}' updated",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY
    )


def delete(db: Session, type_id: int):
    obj = get_by_id(db, type_id)
    if not obj:
        return not_found_response("Inspection type", type_id)

    blocking = first_dependency(db, [
        (Inspection, Inspection.inspection_type_id, type_id, "inspections"),
    ])
    if blocking:
        return dependency_response(f"Inspection type is used by {blocking}")

    db.delete(obj)
    db.commit()
    return success_response(
        data=None,
        message=f"Inspection type with ID {type_id} deleted",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY
    )


def inspection_type_lookup(db: Session):
    rows = db.query(InspectionType.id, InspectionType.inspection_type).order_by(
        InspectionType.inspection_type.asc()).all()
    return [Lookup(id=r.id, name=r.inspection_type) for r in rows]
