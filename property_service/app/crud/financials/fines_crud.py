# app/crud/financials/fines_crud.py
from typing import Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from shared.core.errors import LedgerValidationError
from shared.helpers.date_helper import ensure_on_or_after
from shared.helpers.json_response_helper import not_found_response, duplicate_response, success_response
from shared.helpers.payload_helper import reject_cleared_fields
from shared.helpers.reference_helper import ensure_reference
from shared.utils.app_status_code import AppStatusCode
from ...models.financials.fine_types import FineType
from ...models.financials.fines import Fine
from ...models.financials.payment_categories import PaymentCategory
from ...models.financials.payment_types import PaymentType
from ...models.properties.properties import Property
from ...schemas.financials.fines_schemas import (
    FineCreate, FineOut, FineRequest, FineUpdate
)


def to_out(fine: Fine) -> FineOut:
    return FineOut(
        id=fine.id,
        fine_id=fine.fine_id,
        property_id=fine.property_id,
        property_name=fine.property.name if fine.property else None,
        fine_type_id=fine.fine_type_id,
        fine_type=fine.fine_type.fine_type if fine.fine_type else None,
        payment_type_id=fine.payment_type_id,
        payment_category_id=fine.payment_category_id,
        fine_date=fine.fine_date,
        fine_due_date=fine.fine_due_date,
        fine_amount=fine.fine_amount,
        check_number=fine.check_number,
        notes=fine.notes,
        created_at=fine.created_at,
    )


def build_filters(params: FineRequest):
    filters = []

    if params.property_id is not None:
        filters.append(Fine.property_id == params.property_id)

    if params.fine_type_id is not None:
        filters.append(Fine.fine_type_id == params.fine_type_id)

    if params.search:
        filters.append(or_(
            Fine.fine_id.ilike(f"%{params.search}%"),
            Fine.notes.ilike(f"%{params.search}%"),
            Property.name.ilike(f"%{params.search}%"),
        ))

    return filters


def get_list(db: Session, params: FineRequest):
    query = (
        db.query(Fine)
        .join(Property, Property.id == Fine.property_id)
        .filter(*build_filters(params))
    )
    total = query.with_entities(func.count(Fine.id)).scalar()

    rows = (
        query.options(joinedload(Fine.property), joinedload(Fine.fine_type))
        .order_by(Fine.fine_date.desc(), Fine.id.desc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return {"items": [to_out(r) for r in rows], "total": total}


def get_by_id(db: Session, fine_pk: int) -> Optional[Fine]:
    return db.query(Fine).filter(Fine.id == fine_pk).first()


def _check_duplicate(db: Session, fine_id: str, exclude_id: Optional[int] = None):
    query = db.query(Fine).filter(Fine.fine_id == fine_id)
    if exclude_id is not None:
        query = query.filter(Fine.id != exclude_id)

    if query.first():
        return duplicate_response(f"Fine with ID {fine_id} already exists")


def _check_references(db: Session, data: dict):
    if "property_id" in data:
        ensure_reference(db, Property, data["property_id"], "Property")
    if "fine_type_id" in data:
        ensure_reference(db, FineType, data["fine_type_id"], "Fine type")
    if "payment_category_id" in data:
        ensure_reference(db, PaymentCategory, data["payment_category_id"], "Payment category")
    if "payment_type_id" in data:
        ensure_reference(db, PaymentType, data["payment_type_id"], "Payment type")


def create(db: Session, payload: FineCreate):
    data = payload.model_dump()
    _check_duplicate(db, payload.fine_id)
    _check_references(db, data)

    obj = Fine(**data)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return success_response(
        data=to_out(obj),
        message=f"Fine {obj.fine_id} created",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY
    )


def update(db: Session, payload: FineUpdate):
    obj = get_by_id(db, payload.id)
    if not obj:
        return None

    update_data = payload.model_dump(exclude_unset=True, exclude={"id"})
    reject_cleared_fields(update_data, (
        "fine_id", "property_id", "fine_type_id", "payment_type_id",
        "payment_category_id", "fine_date", "fine_due_date", "fine_amount"))
    if "fine_id" in update_data:
        _check_duplicate(db, update_data["fine_id"], exclude_id=obj.id)
    _check_references(db, update_data)

    try:
        ensure_on_or_after(
            update_data.get("fine_due_date", obj.fine_due_date),
            update_data.get("fine_date", obj.fine_date),
            "Fine due date must be on or after fine date")
    except ValueError as e:
        raise LedgerValidationError(str(e))

    for key, value in update_data.items():
        setattr(obj, key, value)

    db.commit()
    db.refresh(obj)
    return success_response(
        data=to_out(obj),
        message=f"Fine {obj.fine_id} updated",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY
    )


def delete(db: Session, fine_pk: int):
    obj = get_by_id(db, fine_pk)
    if not obj:
        return not_found_response("Fine", fine_pk)

    fine_id = obj.fine_id
    db.delete(obj)
    db.commit()
    return success_response(
        data=None,
        message=f"Fine {fine_id} deleted",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY
    )
