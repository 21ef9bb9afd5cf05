from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shared.core.database import get_property_db as get_db
from ...core.dependencies import get_lease_ledger
from ...crud.leasing_tenants.lease_ledger import LedgerRecalculator
from ...schemas.leasing_tenants.lease_payments_schemas import (
    LeasePaymentCreate, LeasePaymentListResponse, LeasePaymentOut, LeasePaymentRequest,
    LeasePaymentUpdate, LedgerSummaryOut
)
from ...crud.leasing_tenants import lease_payments_crud as crud

router = APIRouter(prefix="/api/lease-payments", tags=["lease-payments"])


@router.get("/all", response_model=LeasePaymentListResponse)
def get_lease_payments(
    params: LeasePaymentRequest = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_list(db, params)


@router.get("/ledger/{lease_id}", response_model=LedgerSummaryOut)
def get_lease_ledger_summary(
    lease_id: str,
    ledger: LedgerRecalculator = Depends(get_lease_ledger)
):
    return crud.ledger_summary(ledger, lease_id)


@router.get("/{payment_id}", response_model=LeasePaymentOut)
def get_lease_payment(payment_id: int, db: Session = Depends(get_db)):
    obj = crud.get_by_id(db, payment_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Lease payment not found")
    return crud.to_out(obj)


@router.post("/", response_model=None)
def create_lease_payment(
    payload: LeasePaymentCreate,
    db: Session = Depends(get_db),
    ledger: LedgerRecalculator = Depends(get_lease_ledger)
):
    return crud.create(db, payload, ledger)


@router.put("/", response_model=None)
def update_lease_payment(
    payload: LeasePaymentUpdate,
    db: Session = Depends(get_db),
    ledger: LedgerRecalculator = Depends(get_lease_ledger)
):
    obj = crud.update(db, payload, ledger)
    if not obj:
        raise HTTPException(status_code=404, detail="Lease payment not found")
    return obj


@router.delete("/{payment_id}", response_model=None)
def delete_lease_payment(
    payment_id: int,
    db: Session = Depends(get_db),
    ledger: LedgerRecalculator = Depends(get_lease_ledger)
):
    return crud.delete(db, payment_id, ledger)
