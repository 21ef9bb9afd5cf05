# app/crud/leasing_tenants/lease_payments_crud.py
from typing import Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from shared.core.errors import LedgerValidationError, NotFoundError
from shared.helpers.date_helper import ensure_on_or_after
from shared.helpers.json_response_helper import not_found_response, success_response
from shared.helpers.payload_helper import reject_cleared_fields
from shared.helpers.reference_helper import ensure_reference
from shared.utils.app_status_code import AppStatusCode
from .lease_ledger import LedgerRecalculator
from ...models.financials.payment_categories import PaymentCategory
from ...models.financials.payment_types import PaymentType
from ...models.leasing_tenants.leases import Lease
from ...models.leasing_tenants.lease_payments import LeasePayment
from ...schemas.leasing_tenants.lease_payments_schemas import (
    LeasePaymentCreate, LeasePaymentOut, LeasePaymentRequest, LeasePaymentUpdate, LedgerSummaryOut
)


def to_out(payment: LeasePayment) -> LeasePaymentOut:
    return LeasePaymentOut(
        id=payment.id,
        lease_id=payment.lease_id,
        payment_type_id=payment.payment_type_id,
        payment_category_id=payment.payment_category_id,
        payment_type=payment.payment_type.payment_type if payment.payment_type else None,
        payment_category=(payment.payment_category.payment_category
                          if payment.payment_category else None),
        payment_date=payment.payment_date,
        payment_amount=payment.payment_amount,
        payment_due_date=payment.payment_due_date,
        notes=payment.notes,
        monthly_rent=payment.monthly_rent,
        total_paid=payment.total_paid,
        balance=payment.balance,
        created_at=payment.created_at,
        updated_at=payment.updated_at,
    )


def build_filters(params: LeasePaymentRequest):
    filters = []

    if params.lease_id:
        filters.append(LeasePayment.lease_id == params.lease_id)

    if params.date_from:
        filters.append(LeasePayment.payment_date >= params.date_from)

    if params.date_to:
        filters.append(LeasePayment.payment_date <= params.date_to)

    if params.search:
        like = f"%{params.search}%"
        filters.append(or_(
            LeasePayment.lease_id.ilike(like),
            LeasePayment.notes.ilike(like),
        ))

    return filters


def get_list(db: Session, params: LeasePaymentRequest):
    query = db.query(LeasePayment).filter(*build_filters(params))
    total = query.with_entities(func.count(LeasePayment.id)).scalar()

    rows = (
        query.options(joinedload(LeasePayment.payment_type),
                      joinedload(LeasePayment.payment_category))
        .order_by(LeasePayment.payment_date.desc(), LeasePayment.id.desc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return {"items": [to_out(r) for r in rows], "total": total}


def get_by_id(db: Session, payment_id: int) -> Optional[LeasePayment]:
    return db.query(LeasePayment).filter(LeasePayment.id == payment_id).first()


def _ensure_lease(db: Session, lease_id: str):
    if not db.query(Lease.id).filter(Lease.lease_id == lease_id).first():
        raise NotFoundError(f"Lease with ID {lease_id} not found")


def create(db: Session, payload: LeasePaymentCreate, ledger: LedgerRecalculator):
    _ensure_lease(db, payload.lease_id)
    ensure_reference(db, PaymentType, payload.payment_type_id, "Payment type")
    ensure_reference(db, PaymentCategory, payload.payment_category_id, "Payment category")

    record = ledger.record_payment(
        payload.lease_id,
        payload.payment_date,
        payload.payment_amount,
        payment_type_id=payload.payment_type_id,
        payment_category_id=payload.payment_category_id,
        payment_due_date=payload.payment_due_date,
        notes=payload.notes,
    )
    return success_response(
        data=to_out(record),
        message=f"Lease payment {record.id} created",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY
    )


def update(db: Session, payload: LeasePaymentUpdate, ledger: LedgerRecalculator):
    obj = get_by_id(db, payload.id)
    if not obj:
        return None

    update_data = payload.model_dump(exclude_unset=True, exclude={"id"})
    reject_cleared_fields(update_data, (
        "lease_id", "payment_type_id", "payment_category_id", "payment_date", "payment_amount"))

    previous_lease_id = obj.lease_id
    if "lease_id" in update_data and update_data["lease_id"] != previous_lease_id:
        _ensure_lease(db, update_data["lease_id"])
    if "payment_type_id" in update_data:
        ensure_reference(db, PaymentType, update_data["payment_type_id"], "Payment type")
    if "payment_category_id" in update_data:
        ensure_reference(db, PaymentCategory,
                         update_data["payment_category_id"], "Payment category")

    try:
        ensure_on_or_after(
            update_data.get("payment_due_date", obj.payment_due_date),
            update_data.get("payment_date", obj.payment_date),
            "Payment due date must be on or after payment date")
    except ValueError as e:
        raise LedgerValidationError(str(e))

    for key, value in update_data.items():
        setattr(obj, key, value)
    db.commit()

    # amount, date or lease moved: both ledgers need fresh running totals
    if obj.lease_id != previous_lease_id:
        ledger.recalculate(previous_lease_id)
    ledger.recalculate(obj.lease_id)

    db.refresh(obj)
    return success_response(
        data=to_out(obj),
        message=f"Lease payment {obj.id} updated",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY
    )


def delete(db: Session, payment_id: int, ledger: LedgerRecalculator):
    obj = get_by_id(db, payment_id)
    if not obj:
        return not_found_response("Lease payment", payment_id)

    lease_id = obj.lease_id
    db.delete(obj)
    db.commit()

    ledger.on_payment_deleted(lease_id)
    return success_response(
        data=None,
        message=f"Lease payment {payment_id} deleted",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY
    )


def ledger_summary(ledger: LedgerRecalculator, lease_id: str) -> LedgerSummaryOut:
    summary = ledger.summarize(lease_id)
    return LedgerSummaryOut(
        lease_id=summary.lease_id,
        monthly_rent=summary.monthly_rent,
        lease_start=summary.lease_start,
        as_of=summary.as_of,
        months_elapsed=summary.months_elapsed,
        expected_total_rent=summary.expected_total_rent,
        total_paid=summary.total_paid,
        balance=summary.balance,
        standing=summary.standing,
        payments=[to_out(p) for p in summary.payments],
    )
