from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shared.core.database import get_property_db as get_db
from shared.core.schemas import CommonQueryParams, Lookup
from ...schemas.financials.payment_types_schemas import (
    PaymentTypeCreate, PaymentTypeListResponse, PaymentTypeOut, PaymentTypeUpdate
)
from ...crud.financials import payment_types_crud as crud

router = APIRouter(prefix="/api/payment-types", tags=["payment-types"])


@router.get("/all", response_model=PaymentTypeListResponse)
def get_payment_types(
    params: CommonQueryParams = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_list(db, params)


@router.get("/lookup", response_model=List[Lookup])
def payment_type_lookup(db: Session = Depends(get_db)):
    return crud.payment_type_lookup(db)


@router.get("/{type_id}", response_model=PaymentTypeOut)
def get_payment_type(type_id: int, db: Session = Depends(get_db)):
    obj = crud.get_by_id(db, type_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Payment type not found")
    return obj


@router.post("/", response_model=None)
def create_payment_type(payload: PaymentTypeCreate, db: Session = Depends(get_db)):
    return crud.create(db, payload)


@router.put("/", response_model=None)
def update_payment_type(payload: PaymentTypeUpdate, db: Session = Depends(get_db)):
    obj = crud.update(db, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Payment type not found")
    return obj


@router.delete("/{type_id}", response_model=None)
def delete_payment_type(type_id: int, db: Session = Depends(get_db)):
    return crud.delete(db, type_id)
