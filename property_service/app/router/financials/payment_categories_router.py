from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shared.core.database import get_property_db as get_db
from shared.core.schemas import CommonQueryParams, Lookup
from ...schemas.financials.payment_categories_schemas import (
    PaymentCategoryCreate, PaymentCategoryListResponse, PaymentCategoryOut, PaymentCategoryUpdate
)
from ...crud.financials import payment_categories_crud as crud

router = APIRouter(prefix="/api/payment-categories", tags=["payment-categories"])


@router.get("/all", response_model=PaymentCategoryListResponse)
def get_payment_categories(
    params: CommonQueryParams = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_list(db, params)


@router.get("/lookup", response_model=List[Lookup])
def payment_category_lookup(db: Session = Depends(get_db)):
    return crud.payment_category_lookup(db)


@router.get("/{category_id}", response_model=PaymentCategoryOut)
def get_payment_category(category_id: int, db: Session = Depends(get_db)):
    obj = crud.get_by_id(db, category_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Payment category not found")
    return obj


@router.post("/", response_model=None)
def create_payment_category(payload: PaymentCategoryCreate, db: Session = Depends(get_db)):
    return crud.create(db, payload)


@router.put("/", response_model=None)
def update_payment_category(payload: PaymentCategoryUpdate, db: Session = Depends(get_db)):
    obj = crud.update(db, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Payment category not found")
    return obj


@router.delete("/{category_id}", response_model=None)
def delete_payment_category(category_id: int, db: Session = Depends(get_db)):
    return crud.delete(db, category_id)
