# app/crud/financials/expense_types_crud.py
from typing import Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from shared.core.schemas import CommonQueryParams, Lookup
from shared.helpers.json_response_helper import not_found_response, duplicate_response, success_response
from shared.helpers.payload_helper import reject_cleared_fields
from shared.utils.app_status_code import AppStatusCode
from ...models.financials.expense_types import ExpenseType
from ...schemas.financials.expense_types_schemas import (
    ExpenseTypeCreate, ExpenseTypeOut, ExpenseTypeUpdate
)


def get_list(db: Session, params: CommonQueryParams):
    query = db.query(ExpenseType)
    if params.search:
        like = f"%{params.search}%"
        query = query.filter(or_(
            ExpenseType.expense_type.ilike(like),
            ExpenseType.description.ilike(like),
        ))

    total = query.with_entities(func.count(ExpenseType.id)).scalar()
    rows = (
        query.order_by(ExpenseType.expense_type.asc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return {"items": [ExpenseTypeOut.model_validate(r) for r in rows], "total": total}


def get_by_id(db: Session, type_id: int) -> Optional[ExpenseType]:
    return db.query(ExpenseType).filter(ExpenseType.id == type_id).first()


def _check_duplicate(db: Session, name: str, exclude_id: Optional[int] = None):
    query = db.query(ExpenseType).filter(
        func.lower(ExpenseType.expense_type) == name.lower())
    if exclude_id is not None:
        query = query.filter(ExpenseType.id != exclude_id)

    if query.first():
        return duplicate_response(f"Expense type '{name}' already exists")


def create(db: Session, payload: ExpenseTypeCreate):
    _check_duplicate(db, payload.expense_type)

    obj = ExpenseType(
        expense_type=payload.expense_type,
        description=payload.description or "",
    )
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return success_response(
        data=ExpenseTypeOut.model_validate(obj),
        message=f"Expense type '{obj.expense_type}' created",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY
    )


def update(db: Session, payload: ExpenseTypeUpdate):
    obj = get_by_id(db, payload.id)
    if not obj:
        return None

    update_data = payload.model_dump(exclude_unset=True, exclude={"id"})
    reject_cleared_fields(update_data, ("expense_type",))
    if "expense_type" in update_data:
        _check_duplicate(db, update_data["expense_type"], exclude_id=obj.id)
        obj.expense_type = update_data["expense_type"]
    if "description" in update_data:
        obj.description = update_data["description"] or ""

    db.commit()
    db.refresh(obj)
    return success_response(
        data=ExpenseTypeOut.model_validate(obj),
        message=f"Expense type '{obj.expense_type}' updated",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY
    )


def delete(db: Session, type_id: int):
    # nothing references expense types, so a delete is never blocked
    obj = get_by_id(db, type_id)
    if not obj:
        return not_found_response("Expense type", type_id)

    db.delete(obj)
    db.commit()
    return success_response(
        data=None,
        message=f"Expense type with ID {type_id} deleted",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY
    )


def expense_type_lookup(db: Session):
    rows = db.query(ExpenseType.id, ExpenseType.expense_type).order_by(
        ExpenseType.expense_type.asc()).all()
    return [Lookup(id=r.id, name=r.expense_type) for r in rows]
