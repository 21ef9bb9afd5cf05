# app/crud/leasing_tenants/residents_crud.py
from typing import Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from shared.helpers.json_response_helper import not_found_response, duplicate_response, success_response
from shared.helpers.payload_helper import reject_cleared_fields
from shared.utils.app_status_code import AppStatusCode
from ...models.leasing_tenants.residents import Resident
from ...schemas.leasing_tenants.residents_schemas import (
    ResidentCreate, ResidentOut, ResidentRequest, ResidentUpdate
)


def get_list(db: Session, params: ResidentRequest):
    filters = []
    if params.active is not None:
        filters.append(Resident.active == params.active)
    if params.search:
        like = f"%{params.search}%"
        filters.append(or_(
            Resident.first_name.ilike(like),
            Resident.last_name.ilike(like),
            Resident.email.ilike(like),
        ))

    query = db.query(Resident).filter(*filters)
    total = query.with_entities(func.count(Resident.id)).scalar()
    rows = (
        query.order_by(Resident.last_name.asc(), Resident.first_name.asc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return {"items": [ResidentOut.model_validate(r) for r in rows], "total": total}


def get_by_id(db: Session, resident_id: int) -> Optional[Resident]:
    return db.query(Resident).filter(Resident.id == resident_id).first()


def _check_email(db: Session, email: Optional[str], exclude_id: Optional[int] = None):
    if not email:
        return
    query = db.query(Resident).filter(Resident.email == email)
    if exclude_id is not None:
        query = query.filter(Resident.id != exclude_id)
    if query.first():
        return duplicate_response(f"Resident with email '{email}' already exists")


def create(db: Session, payload: ResidentCreate):
    _check_email(db, payload.email)

    obj = Resident(**payload.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return success_response(
        data=ResidentOut.model_validate(obj),
        message=f"Resident {obj.full_name} created",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY
    )


def update(db: Session, payload: ResidentUpdate):
    obj = get_by_id(db, payload.id)
    if not obj:
        return None

    update_data = payload.model_dump(exclude_unset=True, exclude={"id"})
    reject_cleared_fields(update_data, ("first_name", "last_name", "active"))
    _check_email(db, update_data.get("email"), exclude_id=obj.id)

    for key, value in update_data.items():
        setattr(obj, key, value)

    db.commit()
    db.refresh(obj)
    return success_response(
        data=ResidentOut.model_validate(obj),
        message=f"Resident {obj.full_name} updated",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY
    )


def delete(db: Session, resident_id: int):
    obj = get_by_id(db, resident_id)
    if not obj:
        return not_found_response("Resident", resident_id)

    full_name = obj.full_name
    db.delete(obj)
    db.commit()
    return success_response(
        data=None,
        message=f"Resident {full_name} with ID {resident_id} deleted",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY
    )
