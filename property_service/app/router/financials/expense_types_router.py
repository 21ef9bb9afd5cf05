from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shared.core.database import get_property_db as get_db
from shared.core.schemas import CommonQueryParams, Lookup
from ...schemas.financials.expense_types_schemas import (
    ExpenseTypeCreate, ExpenseTypeListResponse, ExpenseTypeOut, ExpenseTypeUpdate
)
from ...crud.financials import expense_types_crud as crud

router = APIRouter(prefix="/api/expense-types", tags=["expense-types"])


@router.get("/all", response_model=ExpenseTypeListResponse)
def get_expense_types(
    params: CommonQueryParams = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_list(db, params)


@router.get("/lookup", response_model=List[Lookup])
def expense_type_lookup(db: Session = Depends(get_db)):
    return crud.expense_type_lookup(db)


@router.get("/{type_id}", response_model=ExpenseTypeOut)
def get_expense_type(type_id: int, db: Session = Depends(get_db)):
    obj = crud.get_by_id(db, type_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Expense type not found")
    return obj


@router.post("/", response_model=None)
def create_expense_type(payload: ExpenseTypeCreate, db: Session = Depends(get_db)):
    return crud.create(db, payload)


@router.put("/", response_model=None)
def update_expense_type(payload: ExpenseTypeUpdate, db: Session = Depends(get_db)):
    obj = crud.update(db, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Expense type not found")
    return obj


@router.delete("/{type_id}", response_model=None)
def delete_expense_type(type_id: int, db: Session = Depends(get_db)):
    return crud.delete(db, type_id)
