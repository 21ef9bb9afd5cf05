# app/crud/financials/payment_categories_crud.py
from typing import Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from shared.core.schemas import CommonQueryParams, Lookup
from shared.helpers.json_response_helper import not_found_response, duplicate_response, dependency_response, success_response
from shared.helpers.payload_helper import reject_cleared_fields
from shared.helpers.reference_helper import first_dependency
from shared.utils.app_status_code import AppStatusCode
from ...models.financials.expenses import Expense
from ...models.financials.fines import Fine
from ...models.financials.payment_categories import PaymentCategory
from ...models.leasing_tenants.lease_payments import LeasePayment
from ...models.financials.utilities import Utility
from ...schemas.financials.payment_categories_schemas import (
    PaymentCategoryCreate, PaymentCategoryOut, PaymentCategoryUpdate
)


def get_list(db: Session, params: CommonQueryParams):
    query = db.query(PaymentCategory)
    if params.search:
        like = f"%{params.search}%"
        query = query.filter(or_(
            PaymentCategory.payment_category.ilike(like),
            PaymentCategory.description.ilike(like),
        ))

    total = query.with_entities(func.count(PaymentCategory.id)).scalar()
    rows = (
        query.order_by(PaymentCategory.payment_category.asc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return {"items": [PaymentCategoryOut.model_validate(r) for r in rows], "total": total}


def get_by_id(db: Session, category_id: int) -> Optional[PaymentCategory]:
    return db.query(PaymentCategory).filter(PaymentCategory.id == category_id).first()


def _check_duplicate(db: Session, name: str, exclude_id: Optional[int] = None):
    query = db.query(PaymentCategory).filter(
        func.lower(PaymentCategory.payment_category) == name.lower())
    if exclude_id is not None:
        query = query.filter(PaymentCategory.id != exclude_id)

    if query.first():
        return duplicate_response(f"Payment category '{name}' already exists")


def create(db: Session, payload: PaymentCategoryCreate):
    _check_duplicate(db, payload.payment_category)

    obj = PaymentCategory(
        payment_category=payload.payment_category,
        description=payload.description or "",
    )
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return success_response(
        data=PaymentCategoryOut.model_validate(obj),
        message=f"Payment category '{obj.payment_category}' created",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY
    )


def update(db: Session, payload: PaymentCategoryUpdate):
    obj = get_by_id(db, payload.id)
    if not obj:
        return None

    update_data = payload.model_dump(exclude_unset=True, exclude={"id"})
    reject_cleared_fields(update_data, ("payment_category",))
    if "payment_category" in update_data:
        _check_duplicate(db, update_data["payment_category"], exclude_id=obj.id)
        obj.payment_category = update_data["payment_category"]
    if "description" in update_data:
        obj.description = update_data["description"] or ""

    db.commit()
    db.refresh(obj)
    return success_response(
        data=PaymentCategoryOut.model_validate(obj),
        message=f"Payment category '{obj.payment_category}' updated",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY
    )


def delete(db: Session, category_id: int):
    obj = get_by_id(db, category_id)
    if not obj:
        return not_found_response("Payment category", category_id)

    blocking = first_dependency(db, [
        (LeasePayment, LeasePayment.payment_category_id, category_id, "lease payments"),
        (Expense, Expense.payment_category_id, category_id, "expenses"),
        (Fine, Fine.payment_category_id, category_id, "fines"),
        (Utility, Utility.payment_category_id, category_id, "utilities"),
    ])
    if blocking:
        return dependency_response(f"Payment category is used by {blocking}")

    db.delete(obj)
    db.commit()
    return success_response(
        data=None,
        message=f"Payment category with ID {category_id} deleted",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY
    )


def payment_category_lookup(db: Session):
    rows = db.query(PaymentCategory.id, PaymentCategory.payment_category).order_by(
        PaymentCategory.payment_category.asc()).all()
    return [Lookup(id=r.id, name=r.payment_category) for r in rows]
