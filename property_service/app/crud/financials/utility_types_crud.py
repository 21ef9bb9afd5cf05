# app/crud/financials/utility_types_crud.py
from typing import Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import not_found_response, duplicate_response, dependency_response, success_response
from shared.helpers.payload_helper import reject_cleared_fields
from shared.helpers.reference_helper import first_dependency
from shared.utils.app_status_code import AppStatusCode
from ...models.financials.utilities import Utility
from ...models.financials.utility_types import UtilityType
from ...schemas.financials.utility_types_schemas import (
    UtilityTypeCreate, UtilityTypeOut, UtilityTypeRequest, UtilityTypeUpdate
)


def get_list(db: Session, params: UtilityTypeRequest):
    query = db.query(UtilityType)
    if params.active is not None:
        query = query.filter(UtilityType.active == params.active)
    if params.search:
        like = f"%{params.search}%"
        query = query.filter(or_(
            UtilityType.utility_name.ilike(like),
            UtilityType.utility_provider.ilike(like),
        ))

    total = query.with_entities(func.count(UtilityType.id)).scalar()
    rows = (
        query.order_by(UtilityType.utility_name.asc(), UtilityType.utility_provider.asc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return {"items": [UtilityTypeOut.model_validate(r) for r in rows], "total": total}


def get_by_id(db: Session, type_id: int) -> Optional[UtilityType]:
    return db.query(UtilityType).filter(UtilityType.id == type_id).first()


def _check_duplicate(db: Session, name: str, provider: str, exclude_id: Optional[int] = None):
    query = db.query(UtilityType).filter(
        func.lower(UtilityType.utility_name) == name.lower(),
        func.lower(UtilityType.utility_provider) == provider.lower(),
    )
    if exclude_id is not None:
        query = query.filter(UtilityType.id != exclude_id)

    if query.first():
        return duplicate_response(
            f"Utility type '{name}' from '{provider}' already exists")


def create(db: Session, payload: UtilityTypeCreate):
    _check_duplicate(db, payload.utility_name, payload.utility_provider)

    obj = UtilityType(**payload.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return success_response(
        data=UtilityTypeOut.model_validate(obj),
        message=f"Utility type '{obj.utility_name}' created",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY
    )


def update(db: Session, payload: UtilityTypeUpdate):
    obj = get_by_id(db, payload.id)
    if not obj:
        return None

    update_data = payload.model_dump(exclude_unset=True, exclude={"id"})
    reject_cleared_fields(update_data, ("utility_name", "utility_provider", "active"))
    if "utility_name" in update_data or "utility_provider" in update_data:
        _check_duplicate(
            db,
            update_data.get("utility_name", obj.utility_name),
            update_data.get("utility_provider", obj.utility_provider),
            exclude_id=obj.id,
        )

    for key, value in update_data.items():
        setattr(obj, key, value)

    db.commit()
    db.refresh(obj)
    return success_response(
        data=UtilityTypeOut.model_validate(obj),
        message=f"Utility type '{obj.utility_name}' updated",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY
    )


def delete(db: Session, type_id: int):
    obj = get_by_id(db, type_id)
    if not obj:
        return not_found_response("Utility type", type_id)

    blocking = first_dependency(db, [
        (Utility, Utility.utility_type_id, type_id, "utilities"),
    ])
    if blocking:
        return dependency_response(f"Utility type is used by {blocking}")

    db.delete(obj)
    db.commit()
    return success_response(
        data=None,
        message=f"Utility type with ID {type_id} deleted",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY
    )


def utility_type_lookup(db: Session):
    rows = (
        db.query(UtilityType.id, UtilityType.utility_name, UtilityType.utility_provider)
        .filter(UtilityType.active.is_(True))
        .order_by(UtilityType.utility_name.asc())
        .all()
    )
    return [Lookup(id=r.id, name=f"{r.utility_name} ({r.utility_provider})") for r in rows]
