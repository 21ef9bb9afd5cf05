from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shared.core.database import get_property_db as get_db
from shared.core.schemas import CommonQueryParams, Lookup
from ...schemas.financials.fine_types_schemas import (
    FineTypeCreate, FineTypeListResponse, FineTypeOut, FineTypeUpdate
)
from ...crud.financials import fine_types_crud as crud

router = APIRouter(prefix="/api/fine-types", tags=["fine-types"])


@router.get("/all", response_model=FineTypeListResponse)
def get_fine_types(
    params: CommonQueryParams = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_list(db, params)


@router.get("/lookup", response_model=List[Lookup])
def fine_type_lookup(db: Session = Depends(get_db)):
    return crud.fine_type_lookup(db)


@router.get("/{type_id}", response_model=FineTypeOut)
def get_fine_type(type_id: int, db: Session = Depends(get_db)):
    obj = crud.get_by_id(db, type_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Fine type not found")
    return obj


@router.post("/", response_model=None)
def create_fine_type(payload: FineTypeCreate, db: Session = Depends(get_db)):
    return crud.create(db, payload)


@router.put("/", response_model=None)
def update_fine_type(payload: FineTypeUpdate, db: Session = Depends(get_db)):
    obj = crud.update(db, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Fine type not found")
    return obj


@router.delete("/{type_id}", response_model=None)
def delete_fine_type(type_id: int, db: Session = Depends(get_db)):
    return crud.delete(db, type_id)
