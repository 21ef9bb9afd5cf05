from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shared.core.database import get_property_db as get_db
from shared.core.schemas import Lookup
from ...schemas.financials.utility_types_schemas import (
    UtilityTypeCreate, UtilityTypeListResponse, UtilityTypeOut, UtilityTypeRequest, UtilityTypeUpdate
)
from ...crud.financials import utility_types_crud as crud

router = APIRouter(prefix="/api/utility-types", tags=["utility-types"])


@router.get("/all", response_model=UtilityTypeListResponse)
def get_utility_types(
    params: UtilityTypeRequest = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_list(db, params)


@router.get("/lookup", response_model=List[Lookup])
def utility_type_lookup(db: Session = Depends(get_db)):
    return crud.utility_type_lookup(db)


@router.get("/{type_id}", response_model=UtilityTypeOut)
def get_utility_type(type_id: int, db: Session = Depends(get_db)):
    obj = crud.get_by_id(db, type_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Utility type not found")
    return obj


@router.post("/", response_model=None)
def create_utility_type(payload: UtilityTypeCreate, db: Session = Depends(get_db)):
    return crud.create(db, payload)


@router.put("/", response_model=None)
def update_utility_type(payload: UtilityTypeUpdate, db: Session = Depends(get_db)):
    obj = crud.update(db, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Utility type not found")
    return obj


@router.delete("/{type_id}", response_model=None)
def delete_utility_type(type_id: int, db: Session = Depends(get_db)):
    return crud.delete(db, type_id)
