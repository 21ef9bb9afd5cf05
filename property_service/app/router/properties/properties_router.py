from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shared.core.database import get_property_db as get_db
from shared.core.schemas import Lookup
from ...schemas.properties.properties_schemas import (
    PropertyCreate, PropertyListResponse, PropertyOut, PropertyRequest, PropertyUpdate
)
from ...crud.properties import properties_crud as crud

router = APIRouter(prefix="/api/properties", tags=["properties"])


@router.get("/all", response_model=PropertyListResponse)
def get_properties(
    params: PropertyRequest = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_list(db, params)


@router.get("/lookup", response_model=List[Lookup])
def property_lookup(db: Session = Depends(get_db)):
    return crud.property_lookup(db)


@router.get("/{property_id}", response_model=PropertyOut)
def get_property(property_id: int, db: Session = Depends(get_db)):
    obj = crud.get_by_id(db, property_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Property not found")
    return obj


@router.post("/", response_model=None)
def create_property(payload: PropertyCreate, db: Session = Depends(get_db)):
    return crud.create(db, payload)


@router.put("/", response_model=None)
def update_property(payload: PropertyUpdate, db: Session = Depends(get_db)):
    obj = crud.update(db, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Property not found")
    return obj


@router.delete("/{property_id}", response_model=None)
def delete_property(property_id: int, db: Session = Depends(get_db)):
    return crud.delete(db, property_id)
