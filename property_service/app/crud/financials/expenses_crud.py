# app/crud/financials/expenses_crud.py
from datetime import date, datetime
from typing import Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from shared.core.errors import LedgerValidationError
from shared.helpers.json_response_helper import not_found_response, success_response
from shared.helpers.payload_helper import reject_cleared_fields
from shared.helpers.reference_helper import ensure_reference
from shared.utils.app_status_code import AppStatusCode
from ...models.financials.expenses import Expense
from ...models.financials.payment_categories import PaymentCategory
from ...models.financials.payment_types import PaymentType
from ...models.properties.properties import Property
from ...schemas.financials.expenses_schemas import (
    ExpenseCreate, ExpenseOut, ExpenseRequest, ExpenseUpdate
)


def to_out(expense: Expense) -> ExpenseOut:
    return ExpenseOut(
        id=expense.id,
        property_id=expense.property_id,
        property_name=expense.property.name if expense.property else None,
        payment_type_id=expense.payment_type_id,
        payment_category_id=expense.payment_category_id,
        expense_date=expense.expense_date,
        expense_amount=expense.expense_amount,
        check_number=expense.check_number,
        notes=expense.notes,
        created_at=expense.created_at,
    )


def month_bounds(month: str):
    """'2024-03' -> (2024-03-01, 2024-04-01)."""
    try:
        start = datetime.strptime(month, "%Y-%m").date()
    except ValueError:
        raise LedgerValidationError(f"Month '{month}' must be in YYYY-MM format")

    if start.month == 12:
        end = date(start.year + 1, 1, 1)
    else:
        end = date(start.year, start.month + 1, 1)
    return start, end


def build_filters(params: ExpenseRequest):
    filters = []

    if params.property_id is not None:
        filters.append(Expense.property_id == params.property_id)

    if params.month:
        start, end = month_bounds(params.month)
        filters.append(Expense.expense_date >= start)
        filters.append(Expense.expense_date < end)

    if params.search:
        filters.append(or_(
            Expense.notes.ilike(f"%{params.search}%"),
            Property.name.ilike(f"%{params.search}%"),
        ))

    return filters


def get_list(db: Session, params: ExpenseRequest):
    query = (
        db.query(Expense)
        .join(Property, Property.id == Expense.property_id)
        .filter(*build_filters(params))
    )
    total = query.with_entities(func.count(Expense.id)).scalar()

    rows = (
        query.options(joinedload(Expense.property))
        .order_by(Expense.expense_date.desc(), Expense.id.desc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return {"items": [to_out(r) for r in rows], "total": total}


def get_by_id(db: Session, expense_id: int) -> Optional[Expense]:
    return db.query(Expense).filter(Expense.id == expense_id).first()


def _check_references(db: Session, data: dict):
    if "property_id" in data:
        ensure_reference(db, Property, data["property_id"], "Property")
    if "payment_type_id" in data:
        ensure_reference(db, PaymentType, data["payment_type_id"], "Payment type")
    if "payment_category_id" in data:
        ensure_reference(db, PaymentCategory, data["payment_category_id"], "Payment category")


def create(db: Session, payload: ExpenseCreate):
    data = payload.model_dump()
    _check_references(db, data)

    obj = Expense(**data)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return success_response(
        data=to_out(obj),
        message=f"Expense {obj.id} created",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY
    )


def update(db: Session, payload: ExpenseUpdate):
    obj = get_by_id(db, payload.id)
    if not obj:
        return None

    update_data = payload.model_dump(exclude_unset=True, exclude={"id"})
    reject_cleared_fields(update_data, (
        "property_id", "payment_type_id", "payment_category_id", "expense_date", "expense_amount"))
    _check_references(db, update_data)

    for key, value in update_data.items():
        setattr(obj, key, value)

    db.commit()
    db.refresh(obj)
    return success_response(
        data=to_out(obj),
        message=f"Expense {obj.id} updated",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY
    )


def delete(db: Session, expense_id: int):
    obj = get_by_id(db, expense_id)
    if not obj:
        return not_found_response("Expense", expense_id)

    db.delete(obj)
    db.commit()
    return success_response(
        data=None,
        message=f"Expense {expense_id} deleted",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY
    )
