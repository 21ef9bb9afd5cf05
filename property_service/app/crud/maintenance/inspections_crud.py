# app/crud/maintenance/inspections_crud.py
from typing import Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from shared.helpers.json_response_helper import not_found_response, success_response
from shared.helpers.payload_helper import reject_cleared_fields
from shared.helpers.reference_helper import ensure_reference
from shared.utils.app_status_code import AppStatusCode
from ...models.financials.payment_types import PaymentType
from ...models.maintenance.inspection_types import InspectionType
from ...models.maintenance.inspections import Inspection
from ...models.properties.properties import Property
from ...schemas.maintenance.inspections_schemas import (
    InspectionCreate, InspectionOut, InspectionRequest, InspectionUpdate
)


def to_out(inspection: Inspection) -> InspectionOut:
    return InspectionOut(
        id=inspection.id,
        property_id=inspection.property_id,
        property_name=inspection.property.name if inspection.property else None,
        inspection_type_id=inspection.inspection_type_id,
        inspection_type=(inspection.inspection_type.inspection_type
                         if inspection.inspection_type else None),
        payment_type_id=inspection.payment_type_id,
        inspection_date=inspection.inspection_date,
        inspected_by=inspection.inspected_by,
        inspection_amount=inspection.inspection_amount,
        check_number=inspection.check_number,
        notes=inspection.notes,
        created_at=inspection.created_at,
    )


def build_filters(params: InspectionRequest):
    filters = []

    if params.property_id is not None:
        filters.append(Inspection.property_id == params.property_id)

    if params.inspection_type_id is not None:
        filters.append(Inspection.inspection_type_id == params.inspection_type_id)

    if params.search:
        filters.append(or_(
            Inspection.inspected_by.ilike(f"%{params.search}%"),
            Inspection.notes.ilike(f"%{params.search}%"),
            Property.name.ilike(f"%{params.search}%"),
        ))

    return filters


def get_list(db: Session, params: InspectionRequest):
    query = (
        db.query(Inspection)
        .join(Property, Property.id == Inspection.property_id)
        .filter(*build_filters(params))
    )
    total = query.with_entities(func.count(Inspection.id)).scalar()

    rows = (
        query.options(joinedload(Inspection.property), joinedload(Inspection.inspection_type))
        .order_by(Inspection.inspection_date.desc(), Inspection.id.desc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return {"items": [to_out(r) for r in rows], "total": total}


def get_by_id(db: Session, inspection_id: int) -> Optional[Inspection]:
    return db.query(Inspection).filter(Inspection.id == inspection_id).first()


def _check_references(db: Session, data: dict):
    if "property_id" in data:
        ensure_reference(db, Property, data["property_id"], "Property")
    if "inspection_type_id" in data:
        ensure_reference(db, InspectionType, data["inspection_type_id"], "Inspection type")
    if "payment_type_id" in data:
        ensure_reference(db, PaymentType, data["payment_type_id"], "Payment type")


def create(db: Session, payload: InspectionCreate):
    data = payload.model_dump()
    _check_references(db, data)

    obj = Inspection(**data)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return success_response(
        data=to_out(obj),
        message=f"Inspection {obj.id} created",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY
    )


def update(db: Session, payload: InspectionUpdate):
    obj = get_by_id(db, payload.id)
    if not obj:
        return None

    update_data = payload.model_dump(exclude_unset=True, exclude={"id"})
    reject_cleared_fields(update_data, (
        "property_id", "inspection_type_id", "payment_type_id",
        "inspection_date", "inspected_by", "inspection_amount"))
    _check_references(db, update_data)

    for key, value in update_data.items():
        setattr(obj, key, value)

    db.commit()
    db.refresh(obj)
    return success_response(
        data=to_out(obj),
        message=f"Inspection {obj.id} updated",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY
    )


def delete(db: Session, inspection_id: int):
    obj = get_by_id(db, inspection_id)
    if not obj:
        return not_found_response("Inspection", inspection_id)

    db.delete(obj)
    db.commit()
    return success_response(
        data=None,
        message=f"Inspection {inspection_id} deleted",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY
    )
