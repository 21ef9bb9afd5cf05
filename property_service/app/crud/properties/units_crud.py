# app/crud/properties/units_crud.py
from typing import Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import not_found_response, duplicate_response, dependency_response, success_response
from shared.helpers.payload_helper import reject_cleared_fields
from shared.helpers.reference_helper import ensure_reference, first_dependency
from shared.utils.app_status_code import AppStatusCode
from ...models.properties.properties import Property
from ...models.properties.units import Unit
from ...models.leasing_tenants.leases import Lease
from ...schemas.properties.units_schemas import UnitCreate, UnitOut, UnitRequest, UnitUpdate


def to_out(unit: Unit) -> UnitOut:
    return UnitOut(
        id=unit.id,
        property_id=unit.property_id,
        property_name=unit.property.name if unit.property else None,
        unit_number=unit.unit_number,
        bedrooms=unit.bedrooms,
        bathrooms=unit.bathrooms,
        notes=unit.notes,
        rented=unit.rented,
        created_at=unit.created_at,
    )


def get_list(db: Session, params: UnitRequest):
    filters = []
    if params.property_id is not None:
        filters.append(Unit.property_id == params.property_id)
    if params.rented is not None:
        filters.append(Unit.rented == params.rented)
    if params.search:
        like = f"%{params.search}%"
        filters.append(or_(Unit.unit_number.ilike(like), Property.name.ilike(like)))

    query = (
        db.query(Unit)
        .join(Property, Property.id == Unit.property_id)
        .filter(*filters)
    )
    total = query.with_entities(func.count(Unit.id)).scalar()

    rows = (
        query.options(joinedload(Unit.property))
        .order_by(Property.name.asc(), Unit.unit_number.asc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return {"items": [to_out(r) for r in rows], "total": total}


def get_by_id(db: Session, unit_id: int) -> Optional[Unit]:
    return db.query(Unit).filter(Unit.id == unit_id).first()


def _check_duplicate(db: Session, property_id: int, unit_number: str, exclude_id: Optional[int] = None):
    query = db.query(Unit).filter(
        Unit.property_id == property_id,
        func.lower(Unit.unit_number) == unit_number.lower()
    )
    if exclude_id is not None:
        query = query.filter(Unit.id != exclude_id)

    duplicate = query.first()
    if duplicate:
        return duplicate_response(f"Unit '{duplicate.unit_number}' with ID {duplicate.id} already exists")


def create(db: Session, payload: UnitCreate):
    ensure_reference(db, Property, payload.property_id, "Property")
    _check_duplicate(db, payload.property_id, payload.unit_number)

    obj = Unit(**payload.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return success_response(
        data=to_out(obj),
        message=f"Unit {obj.unit_number} created",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY
    )


def update(db: Session, payload: UnitUpdate):
    obj = get_by_id(db, payload.id)
    if not obj:
        return None

    update_data = payload.model_dump(exclude_unset=True, exclude={"id"})
    reject_cleared_fields(update_data, ("property_id", "unit_number", "rented"))
    property_id = update_data.get("property_id", obj.property_id)
    unit_number = update_data.get("unit_number") or obj.unit_number

    if "property_id" in update_data:
        ensure_reference(db, Property, property_id, "Property")
    _check_duplicate(db, property_id, unit_number, exclude_id=obj.id)

    for key, value in update_data.items():
        setattr(obj, key, value)

    db.commit()
    db.refresh(obj)
    return success_response(
        data=to_out(obj),
        message=f"Unit {obj.unit_number} updated",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY
    )


def delete(db: Session, unit_id: int):
    obj = get_by_id(db, unit_id)
    if not obj:
        return not_found_response("Unit", unit_id)

    if first_dependency(db, [(Lease, Lease.unit_id, unit_id, "leases")]):
        return dependency_response("Unit has assigned leases")

    unit_number = obj.unit_number
    db.delete(obj)
    db.commit()
    return success_response(
        data=None,
        message=f"Unit {unit_number} with ID {unit_id} deleted",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY
    )


def unit_lookup(db: Session, property_id: Optional[int] = None):
    query = db.query(Unit.id, Unit.unit_number)
    if property_id is not None:
        query = query.filter(Unit.property_id == property_id)
    return [Lookup(id=r.id, name=r.unit_number) for r in query.order_by(Unit.unit_number).all()]
