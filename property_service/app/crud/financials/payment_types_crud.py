# app/crud/financials/payment_types_crud.py
from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from shared.core.schemas import CommonQueryParams, Lookup
from shared.helpers.json_response_helper import not_found_response, duplicate_response, dependency_response, success_response
from shared.helpers.payload_helper import reject_cleared_fields
from shared.helpers.reference_helper import first_dependency
from shared.utils.app_status_code import AppStatusCode
from ...models.financials.expenses import Expense
from ...models.financials.fines import Fine
from ...models.financials.payment_types import PaymentType
from ...models.leasing_tenants.lease_payments import LeasePayment
from ...models.financials.utilities import Utility
from ...models.maintenance.inspections import Inspection
from ...schemas.financials.payment_types_schemas import (
    PaymentTypeCreate, PaymentTypeOut, PaymentTypeUpdate
)


def get_list(db: Session, params: CommonQueryParams):
    query = db.query(PaymentType)
    if params.search:
        query = query.filter(PaymentType.payment_type.ilike(f"%{params.search}%"))

    total = query.with_entities(func.count(PaymentType.id)).scalar()
    rows = (
        query.order_by(PaymentType.payment_type.asc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return {"items": [PaymentTypeOut.model_validate(r) for r in rows], "total": total}


def get_by_id(db: Session, type_id: int) -> Optional[PaymentType]:
    return db.query(PaymentType).filter(PaymentType.id == type_id).first()


def _check_duplicate(db: Session, payment_type: str, exclude_id: Optional[int] = None):
    query = db.query(PaymentType).filter(
        func.lower(PaymentType.payment_type) == payment_type.lower())
    if exclude_id is not None:
        query = query.filter(PaymentType.id != exclude_id)

    if query.first():
        return duplicate_response(f"Payment type '{payment_type}' already exists")


def create(db: Session, payload: PaymentTypeCreate):
    _check_duplicate(db, payload.payment_type)

    obj = PaymentType(payment_type=payload.payment_type)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return success_response(
        data=PaymentTypeOut.model_validate(obj),
        message=f"Payment type '{obj.payment_type}' created",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY
    )


def update(db: Session, payload: PaymentTypeUpdate):
    obj = get_by_id(db, payload.id)
    if not obj:
        return None

    update_data = payload.model_dump(exclude_unset=True, exclude={"id"})
    reject_cleared_fields(update_data, ("payment_type",))
    if "payment_type" in update_data:
        _check_duplicate(db, update_data["payment_type"], exclude_id=obj.id)
        obj.payment_type = update_data["payment_type"]

    db.commit()
    db.refresh(obj)
    return success_response(
        data=PaymentTypeOut.model_validate(obj),
        message=f"Payment type '{obj.payment_type}' updated",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY
    )


def delete(db: Session, type_id: int):
    obj = get_by_id(db, type_id)
    if not obj:
        return not_found_response("Payment type", type_id)

    blocking = first_dependency(db, [
        (LeasePayment, LeasePayment.payment_type_id, type_id, "lease payments"),
        (Expense, Expense.payment_type_id, type_id, "expenses"),
        (Fine, Fine.payment_type_id, type_id, "fines"),
        (Inspection, Inspection.payment_type_id, type_id, "inspections"),
        (Utility, Utility.payment_type_id, type_id, "utilities"),
    ])
    if blocking:
        return dependency_response(f"Payment type is used by {blocking}")

    db.delete(obj)
    db.commit()
    return success_response(
        data=None,
        message=f"Payment type with ID {type_id} deleted",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY
    )


def payment_type_lookup(db: Session):
    rows = db.query(PaymentType.id, PaymentType.payment_type).order_by(
        PaymentType.payment_type.asc()).all()
    return [Lookup(id=r.id, name=r.payment_type) for r in rows]
