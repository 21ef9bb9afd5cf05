from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shared.core.database import get_property_db as get_db
from ...schemas.financials.utilities_schemas import (
    UtilityCreate, UtilityListResponse, UtilityOut, UtilityRequest, UtilityUpdate
)
from ...crud.financials import utilities_crud as crud

router = APIRouter(prefix="/api/utilities", tags=["utilities"])


@router.get("/all", response_model=UtilityListResponse)
def get_utilities(
    params: UtilityRequest = Depends(),
    db: Session = Depends(get_db)
):
    return crud.get_list(db, params)


@router.get("/{utility_id}", response_model=UtilityOut)
def get_utility(utility_id: int, db: Session = Depends(get_db)):
    obj = crud.get_by_id(db, utility_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Utility bill not found")
    return crud.to_out(obj)


@router.post("/", response_model=None)
def create_utility(payload: UtilityCreate, db: Session = Depends(get_db)):
    return crud.create(db, payload)


@router.put("/", response_model=None)
def update_utility(payload: UtilityUpdate, db: Session = Depends(get_db)):
    obj = crud.update(db, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Utility bill not found")
    return obj


@router.delete("/{utility_id}", response_model=None)
def delete_utility(utility_id: int, db: Session = Depends(get_db)):
    return crud.delete(db, utility_id)
