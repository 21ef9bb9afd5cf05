from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shared.core.database import get_property_db as get_db
from ...schemas.leasing_tenants.residents_schemas import (
    ResidentCreate, ResidentListResponse, ResidentOut, ResidentRequest, ResidentUpdate
)
from ...crud.leasing_tenants import residents_crud as crud

router = APIRouter(prefix="/api/residents", tags=["residents"])


@router.get("/all", response_model=ResidentListResponse)
def get_residents(
    params: ResidentRequest = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_list(db, params)


@router.get("/{resident_id}", response_model=ResidentOut)
def get_resident(resident_id: int, db: Session = Depends(get_db)):
    obj = crud.get_by_id(db, resident_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Resident not found")
    return obj


@router.post("/", response_model=None)
def create_resident(payload: ResidentCreate, db: Session = Depends(get_db)):
    return crud.create(db, payload)


@router.put("/", response_model=None)
def update_resident(payload: ResidentUpdate, db: Session = Depends(get_db)):
    obj = crud.update(db, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Resident not found")
    return obj


@router.delete("/{resident_id}", response_model=None)
def delete_resident(resident_id: int, db: Session = Depends(get_db)):
    return crud.delete(db, resident_id)
