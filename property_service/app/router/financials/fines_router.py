from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shared.core.database import get_property_db as get_db
from ...schemas.financials.fines_schemas import (
    FineCreate, FineListResponse, FineOut, FineRequest, FineUpdate
)
from ...crud.financials import fines_crud as crud

router = APIRouter(prefix="/api/fines", tags=["fines"])


@router.get("/all", response_model=FineListResponse)
def get_fines(
    params: FineRequest = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_list(db, params)


@router.get("/{fine_pk}", response_model=FineOut)
def get_fine(fine_pk: int, db: Session = Depends(get_db)):
    obj = crud.get_by_id(db, fine_pk)
    if not obj:
        raise HTTPException(status_code=404, detail="Fine not found")
    return crud.to_out(obj)


@router.post("/", response_model=None)
def create_fine(payload: FineCreate, db: Session = Depends(get_db)):
    return crud.create(db, payload)


@router.put("/", response_model=None)
def update_fine(payload: FineUpdate, db: Session = Depends(get_db)):
    obj = crud.update(db, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Fine not found")
    return obj


@router.delete("/{fine_pk}", response_model=None)
def delete_fine(fine_pk: int, db: Session = Depends(get_db)):
    return crud.delete(db, fine_pk)
