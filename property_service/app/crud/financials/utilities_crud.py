# app/crud/financials/utilities_crud.py
from typing import Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from shared.core.errors import LedgerValidationError
from shared.helpers.date_helper import ensure_on_or_after
from shared.helpers.json_response_helper import not_found_response, success_response
from shared.helpers.payload_helper import reject_cleared_fields
from shared.helpers.reference_helper import ensure_reference
from shared.utils.app_status_code import AppStatusCode
from ...models.financials.payment_categories import PaymentCategory
from ...models.financials.payment_types import PaymentType
from ...models.financials.utilities import Utility
from ...models.financials.utility_types import UtilityType
from ...models.properties.properties import Property
from ...schemas.financials.utilities_schemas import (
    UtilityCreate, UtilityOut, UtilityRequest, UtilityUpdate
)


def to_out(utility: Utility) -> UtilityOut:
    return UtilityOut(
        id=utility.id,
        property_id=utility.property_id,
        property_name=utility.property.name if utility.property else None,
        utility_type_id=utility.utility_type_id,
        utility_name=utility.utility_type.utility_name if utility.utility_type else None,
        payment_type_id=utility.payment_type_id,
        payment_category_id=utility.payment_category_id,
        reading_date=utility.reading_date,
        meter_reading=utility.meter_reading,
        amount=utility.amount,
        payment_date=utility.payment_date,
        check_number=utility.check_number,
        created_at=utility.created_at,
    )


def build_filters(params: UtilityRequest):
    filters = []

    if params.property_id is not None:
        filters.append(Utility.property_id == params.property_id)

    if params.utility_type_id is not None:
        filters.append(Utility.utility_type_id == params.utility_type_id)

    if params.search:
        filters.append(or_(
            Property.name.ilike(f"%{params.search}%"),
            UtilityType.utility_name.ilike(f"%{params.search}%"),
            UtilityType.utility_provider.ilike(f"%{params.search}%"),
        ))

    return filters


def get_list(db: Session, params: UtilityRequest):
    query = (
        db.query(Utility)
        .join(Property, Property.id == Utility.property_id)
        .join(UtilityType, UtilityType.id == Utility.utility_type_id)
        .filter(*build_filters(params))
    )
    total = query.with_entities(func.count(Utility.id)).scalar()

    rows = (
        query.options(joinedload(Utility.property), joinedload(Utility.utility_type))
        .order_by(Utility.payment_date.desc(), Utility.id.desc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return {"items": [to_out(r) for r in rows], "total": total}


def get_by_id(db: Session, utility_id: int) -> Optional[Utility]:
    return db.query(Utility).filter(Utility.id == utility_id).first()


def _check_references(db: Session, data: dict):
    if "property_id" in data:
        ensure_reference(db, Property, data["property_id"], "Property")
    if "utility_type_id" in data:
        ensure_reference(db, UtilityType, data["utility_type_id"], "Utility type")
    if "payment_type_id" in data:
        ensure_reference(db, PaymentType, data["payment_type_id"], "Payment type")
    if "payment_category_id" in data:
        ensure_reference(db, PaymentCategory, data["payment_category_id"], "Payment category")


def create(db: Session, payload: UtilityCreate):
    data = payload.model_dump()
    _check_references(db, data)

    obj = Utility(**data)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return success_response(
        data=to_out(obj),
        message=f"Utility bill {obj.id} created",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY
    )


def update(db: Session, payload: UtilityUpdate):
    obj = get_by_id(db, payload.id)
    if not obj:
        return None

    update_data = payload.model_dump(exclude_unset=True, exclude={"id"})
    reject_cleared_fields(update_data, (
        "property_id", "utility_type_id", "payment_type_id", "payment_category_id",
        "amount", "payment_date"))
    _check_references(db, update_data)

    try:
        ensure_on_or_after(
            update_data.get("payment_date", obj.payment_date),
            update_data.get("reading_date", obj.reading_date),
            "Reading date cannot be after payment date")
    except ValueError as e:
        raise LedgerValidationError(str(e))

    for key, value in update_data.items():
        setattr(obj, key, value)

    db.commit()
    db.refresh(obj)
    return success_response(
        data=to_out(obj),
        message=f"Utility bill {obj.id} updated",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY
    )


def delete(db: Session, utility_id: int):
    obj = get_by_id(db, utility_id)
    if not obj:
        return not_found_response("Utility bill", utility_id)

    db.delete(obj)
    db.commit()
    return success_response(
        data=None,
        message=f"Utility bill {utility_id} deleted",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY
    )
