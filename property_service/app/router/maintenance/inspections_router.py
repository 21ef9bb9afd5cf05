from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shared.core.database import get_property_db as get_db
from ...schemas.maintenance.inspections_schemas import (
    InspectionCreate, InspectionListResponse, InspectionOut, InspectionRequest, InspectionUpdate
)
from ...crud.maintenance import inspections_crud as crud

router = APIRouter(prefix="/api/inspections", tags=["inspections"])


@router.get("/all", response_model=InspectionListResponse)
def get_inspections(
    params: InspectionRequest = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_list(db, params)


@router.get("/{inspection_id}", response_model=InspectionOut)
def get_inspection(inspection_id: int, db: Session = Depends(get_db)):
    obj = crud.get_by_id(db, inspection_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Inspection not found")
    return crud.to_out(obj)


@router.post("/", response_model=None)
def create_inspection(payload: InspectionCreate, db: Session = Depends(get_db)):
    return crud.create(db, payload)


@router.put("/", response_model=None)
def update_inspection(payload: InspectionUpdate, db: Session = Depends(get_db)):
    obj = crud.update(db, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Inspection not found")
    return obj


@router.delete("/{inspection_id}", response_model=None)
def delete_inspection(inspection_id: int, db: Session = Depends(get_db)):
    return crud.delete(db, inspection_id)
