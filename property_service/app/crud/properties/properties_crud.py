# app/crud/properties/properties_crud.py
from typing import Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import not_found_response, duplicate_response, dependency_response, success_response
from shared.helpers.payload_helper import reject_cleared_fields
from shared.helpers.reference_helper import first_dependency
from shared.utils.app_status_code import AppStatusCode
from ...models.properties.properties import Property
from ...models.properties.units import Unit
from ...models.leasing_tenants.leases import Lease
from ...models.financials.expenses import Expense
from ...models.financials.fines import Fine
from ...models.financials.utilities import Utility
from ...models.maintenance.inspections import Inspection
from ...schemas.properties.properties_schemas import (
    PropertyCreate, PropertyOut, PropertyRequest, PropertyUpdate
)


def build_filters(params: PropertyRequest):
    filters = []

    if params.city:
        filters.append(func.lower(Property.city) == params.city.lower())

    if params.state:
        filters.append(Property.state == params.state.upper())

    if params.search:
        like = f"%{params.search}%"
        filters.append(or_(
            Property.name.ilike(like),
            Property.address.ilike(like),
            Property.city.ilike(like),
        ))

    return filters


def get_list(db: Session, params: PropertyRequest):
    query = db.query(Property).filter(*build_filters(params))
    total = query.with_entities(func.count(Property.id)).scalar()

    rows = (
        query.order_by(Property.name.asc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return {"items": [PropertyOut.model_validate(r) for r in rows], "total": total}


def get_by_id(db: Session, property_id: int) -> Optional[Property]:
    return db.query(Property).filter(Property.id == property_id).first()


def _check_duplicates(db: Session, name: Optional[str], address: Optional[str], exclude_id: Optional[int] = None):
    checks = [
        (Property.name, name, "name"),
        (Property.address, address, "address"),
    ]
    for column, value, label in checks:
        if value is None:
            continue
        query = db.query(Property).filter(func.lower(column) == value.lower())
        if exclude_id is not None:
            query = query.filter(Property.id != exclude_id)
        if query.first():
            return duplicate_response(f"Property with {label} '{value}' already exists")


def create(db: Session, payload: PropertyCreate):
    _check_duplicates(db, payload.name, payload.address)

    obj = Property(**payload.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return success_response(
        data=PropertyOut.model_validate(obj),
        message=f"Property '{obj.name}' created",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY
    )


def update(db: Session, payload: PropertyUpdate):
    obj = get_by_id(db, payload.id)
    if not obj:
        return None

    update_data = payload.model_dump(exclude_unset=True, exclude={"id"})
    reject_cleared_fields(update_data, ("name", "address", "city", "state"))
    _check_duplicates(db, update_data.get("name"),
                      update_data.get("address"), exclude_id=obj.id)

    for key, value in update_data.items():
        setattr(obj, key, value)

    db.commit()
    db.refresh(obj)
    return success_response(
        data=PropertyOut.model_validate(obj),
        message=f"Property '{obj.name}' updated",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY
    )


def delete(db: Session, property_id: int):
    obj = get_by_id(db, property_id)
    if not obj:
        return not_found_response("Property", property_id)

    blocking = first_dependency(db, [
        (Unit, Unit.property_id, property_id, "units"),
        (Lease, Lease.property_id, property_id, "leases"),
        (Expense, Expense.property_id, property_id, "expenses"),
        (Fine, Fine.property_id, property_id, "fines"),
        (Inspection, Inspection.property_id, property_id, "inspections"),
        (Utility, Utility.property_id, property_id, "utilities"),
    ])
    if blocking:
        return dependency_response(f"Property has assigned {blocking}")

    name = obj.name
    db.delete(obj)
    db.commit()
    return success_response(
        data=None,
        message=f"Property '{name}' with ID {property_id} deleted",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY
    )


def property_lookup(db: Session):
    rows = db.query(Property.id, Property.name).order_by(Property.name.asc()).all()
    return [Lookup(id=r.id, name=r.name) for r in rows]
