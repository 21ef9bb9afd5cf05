from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shared.core.database import get_property_db as get_db
from ...schemas.financials.expenses_schemas import (
    ExpenseCreate, ExpenseListResponse, ExpenseOut, ExpenseRequest, ExpenseUpdate
)
from ...crud.financials import expenses_crud as crud

router = APIRouter(prefix="/api/expenses", tags=["expenses"])


@router.get("/all", response_model=ExpenseListResponse)
def get_expenses(
    params: ExpenseRequest = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_list(db, params)


@router.get("/{expense_id}", response_model=ExpenseOut)
def get_expense(expense_id: int, db: Session = Depends(get_db)):
    obj = crud.get_by_id(db, expense_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Expense not found")
    return crud.to_out(obj)


@router.post("/", response_model=None)
def create_expense(payload: ExpenseCreate, db: Session = Depends(get_db)):
    return crud.create(db, payload)


@router.put("/", response_model=None)
def update_expense(payload: ExpenseUpdate, db: Session = Depends(get_db)):
    obj = crud.update(db, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Expense not found")
    return obj


@router.delete("/{expense_id}", response_model=None)
def delete_expense(expense_id: int, db: Session = Depends(get_db)):
    return crud.delete(db, expense_id)
