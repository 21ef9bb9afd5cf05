from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from shared.core.database import get_property_db as get_db
from shared.core.schemas import Lookup
from ...schemas.properties.units_schemas import (
    UnitCreate, UnitListResponse, UnitOut, UnitRequest, UnitUpdate
)
from ...crud.properties import units_crud as crud

router = APIRouter(prefix="/api/units", tags=["units"])


@router.get("/all", response_model=UnitListResponse)
def get_units(
    params: UnitRequest = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_list(db, params)


@router.get("/lookup", response_model=List[Lookup])
def unit_lookup(
    property_id: Optional[int] = Query(None),
    db: Session = Depends(get_db)
):
    return crud.unit_lookup(db, property_id)


@router.get("/{unit_id}", response_model=UnitOut)
def get_unit(unit_id: int, db: Session = Depends(get_db)):
    obj = crud.get_by_id(db, unit_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Unit not found")
    return crud.to_out(obj)


@router.post("/", response_model=None)
def create_unit(payload: UnitCreate, db: Session = Depends(get_db)):
    return crud.create(db, payload)


@router.put("/", response_model=None)
def update_unit(payload: UnitUpdate, db: Session = Depends(get_db)):
    obj = crud.update(db, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Unit not found")
    return obj


@router.delete("/{unit_id}", response_model=None)
def delete_unit(unit_id: int, db: Session = Depends(get_db)):
    return crud.delete(db, unit_id)
