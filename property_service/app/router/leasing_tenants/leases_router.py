from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from shared.core.database import get_property_db as get_db
from shared.core.schemas import Lookup
from ...core.dependencies import get_lease_ledger
from ...crud.leasing_tenants.lease_ledger import LedgerRecalculator
from ...schemas.leasing_tenants.leases_schemas import (
    LeaseCreate, LeaseListResponse, LeaseOut, LeaseRequest, LeaseUpdate
)
from ...crud.leasing_tenants import leases_crud as crud

router = APIRouter(prefix="/api/leases", tags=["leases"])


@router.get("/all", response_model=LeaseListResponse)
def get_leases(
    params: LeaseRequest = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_list(db, params)


@router.get("/lookup", response_model=List[Lookup])
def lease_lookup(
    active_only: bool = Query(True),
    db: Session = Depends(get_db)
):
    return crud.lease_lookup(db, active_only)


@router.get("/{lease_pk}", response_model=LeaseOut)
def get_lease(lease_pk: int, db: Session = Depends(get_db)):
    obj = crud.get_by_id(db, lease_pk)
    if not obj:
        raise HTTPException(status_code=404, detail="Lease not found")
    return crud.to_out(obj)


@router.post("/", response_model=None)
def create_lease(payload: LeaseCreate, db: Session = Depends(get_db)):
    return crud.create(db, payload)


@router.put("/", response_model=None)
def update_lease(
    payload: LeaseUpdate,
    db: Session = Depends(get_db),
    ledger: LedgerRecalculator = Depends(get_lease_ledger)
):
    obj = crud.update(db, payload, ledger)
    if not obj:
        raise HTTPException(status_code=404, detail="Lease not found")
    return obj


@router.delete("/{lease_pk}", response_model=None)
def delete_lease(lease_pk: int, db: Session = Depends(get_db)):
    return crud.delete(db, lease_pk)
