from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shared.core.database import get_property_db as get_db
from shared.core.schemas import CommonQueryParams, Lookup
from ...schemas.maintenance.inspection_types_schemas import (
    InspectionTypeCreate, InspectionTypeListResponse, InspectionTypeOut, InspectionTypeUpdate
)
from ...crud.maintenance import inspection_types_crud as crud

router = APIRouter(prefix="/api/inspection-types", tags=["inspection-types"])


@router.get("/all", response_model=InspectionTypeListResponse)
def get_inspection_types(
    params: CommonQueryParams = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_list(db, params)


@router.get("/lookup", response_model=List[Lookup])
def inspection_type_lookup(db: Session = Depends(get_db)):
    return crud.inspection_type_lookup(db)


@router.get("/{type_id}", response_model=InspectionTypeOut)
def get_inspection_type(type_id: int, db: Session = Depends(get_db)):
    obj = crud.get_by_id(db, type_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Inspection type not found")
    return obj


@router.post("/", response_model=None)
def create_inspection_type(payload: InspectionTypeCreate, db: Session = Depends(get_db)):
    return crud.create(db, payload)


@router.put("/", response_model=None)
def update_inspection_type(payload: InspectionTypeUpdate, db: Session = Depends(get_db)):
    obj = crud.update(db, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Inspection type not found")
    return obj


@router.delete("/{type_id}", response_model=None)
def delete_inspection_type(type_id: int, db: Session = Depends(get_db)):
    return crud.delete(db, type_id)
