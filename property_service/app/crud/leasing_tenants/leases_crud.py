# app/crud/leasing_tenants/leases_crud.py
from typing import Optional
from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from shared.core.errors import DuplicateRecordError, LedgerValidationError
from shared.core.schemas import Lookup
from shared.helpers.date_helper import ensure_on_or_after
from shared.helpers.json_response_helper import not_found_response, duplicate_response, dependency_response, success_response
from shared.helpers.payload_helper import reject_cleared_fields
from shared.helpers.reference_helper import ensure_reference
from shared.utils.app_status_code import AppStatusCode
from .lease_ledger import LedgerRecalculator
from ...models.properties.properties import Property
from ...models.properties.units import Unit
from ...models.leasing_tenants.leases import Lease
from ...models.leasing_tenants.lease_payments import LeasePayment
from ...schemas.leasing_tenants.leases_schemas import (
    LeaseCreate, LeaseOut, LeaseRequest, LeaseUpdate
)

# changing any of these moves the accrued rent of every payment on the lease
LEDGER_FIELDS = ("monthly_rent", "lease_date", "lease_start_date")


def to_out(lease: Lease) -> LeaseOut:
    return LeaseOut(
        id=lease.id,
        lease_id=lease.lease_id,
        property_id=lease.property_id,
        unit_id=lease.unit_id,
        property_name=lease.property.name if lease.property else None,
        unit_number=lease.unit.unit_number if lease.unit else None,
        lease_date=lease.lease_date,
        lease_start_date=lease.lease_start_date,
        lease_end_date=lease.lease_end_date,
        lease_term=lease.lease_term,
        monthly_rent=lease.monthly_rent,
        security_deposit=lease.security_deposit,
        active=lease.active,
        created_at=lease.created_at,
        updated_at=lease.updated_at,
    )


def build_filters(params: LeaseRequest):
    filters = []

    if params.property_id is not None:
        filters.append(Lease.property_id == params.property_id)

    if params.active is not None:
        filters.append(Lease.active == params.active)

    if params.search:
        like = f"%{params.search}%"
        filters.append(or_(
            Lease.lease_id.ilike(like),
            Property.name.ilike(like),
            Unit.unit_number.ilike(like),
        ))

    return filters


def get_list(db: Session, params: LeaseRequest):
    query = (
        db.query(Lease)
        .join(Property, Property.id == Lease.property_id)
        .join(Unit, Unit.id == Lease.unit_id)
        .filter(*build_filters(params))
    )
    total = query.with_entities(func.count(Lease.id)).scalar()

    rows = (
        query.options(joinedload(Lease.property), joinedload(Lease.unit))
        .order_by(Lease.lease_date.desc(), Lease.id.desc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return {"items": [to_out(r) for r in rows], "total": total}


def get_by_id(db: Session, lease_pk: int) -> Optional[Lease]:
    return db.query(Lease).filter(Lease.id == lease_pk).first()


def _has_payments(db: Session, lease_id: str) -> bool:
    return db.query(LeasePayment.id).filter(
        LeasePayment.lease_id == lease_id).first() is not None


def _check_duplicate(db: Session, lease_id: str, exclude_id: Optional[int] = None):
    query = db.query(Lease).filter(Lease.lease_id == lease_id)
    if exclude_id is not None:
        query = query.filter(Lease.id != exclude_id)
    if query.first():
        return duplicate_response(f"Lease '{lease_id}' already exists")


def _check_unit(db: Session, property_id: int, unit_id: int):
    ensure_reference(db, Property, property_id, "Property")
    unit = ensure_reference(db, Unit, unit_id, "Unit")
    if unit.property_id != property_id:
        raise LedgerValidationError(
            f"Unit {unit.unit_number} does not belong to property {property_id}")


def create(db: Session, payload: LeaseCreate):
    _check_duplicate(db, payload.lease_id)
    _check_unit(db, payload.property_id, payload.unit_id)

    obj = Lease(**payload.model_dump())
    db.add(obj)
    try:
        db.commit()
    except IntegrityError:
        # a concurrent create won the unique lease_id
        db.rollback()
        raise DuplicateRecordError(f"Lease '{payload.lease_id}' already exists")
    db.refresh(obj)
    return success_response(
        data=to_out(obj),
        message=f"Lease '{obj.lease_id}' created",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY
    )


def update(db: Session, payload: LeaseUpdate, ledger: LedgerRecalculator):
    obj = get_by_id(db, payload.id)
    if not obj:
        return None

    update_data = payload.model_dump(exclude_unset=True, exclude={"id"})
    reject_cleared_fields(update_data, (
        "lease_id", "property_id", "unit_id", "lease_date", "monthly_rent", "active"))

    new_lease_id = update_data.get("lease_id", obj.lease_id)
    if new_lease_id != obj.lease_id:
        if _has_payments(db, obj.lease_id):
            raise LedgerValidationError(
                f"Lease '{obj.lease_id}' has payments, its lease ID cannot change")
        _check_duplicate(db, new_lease_id, exclude_id=obj.id)

    if "property_id" in update_data or "unit_id" in update_data:
        _check_unit(db,
                    update_data.get("property_id", obj.property_id),
                    update_data.get("unit_id", obj.unit_id))

    try:
        ensure_on_or_after(
            update_data.get("lease_end_date", obj.lease_end_date),
            update_data.get("lease_start_date", obj.lease_start_date),
            "Lease start date must be on or before lease end date")
    except ValueError as e:
        raise LedgerValidationError(str(e))

    ledger_changed = any(
        name in update_data and update_data[name] != getattr(obj, name)
        for name in LEDGER_FIELDS
    )

    for key, value in update_data.items():
        setattr(obj, key, value)

    db.commit()

    if ledger_changed:
        ledger.recalculate(obj.lease_id)

    db.refresh(obj)
    return success_response(
        data=to_out(obj),
        message=f"Lease '{obj.lease_id}' updated",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY
    )


def delete(db: Session, lease_pk: int):
    obj = get_by_id(db, lease_pk)
    if not obj:
        return not_found_response("Lease", lease_pk)

    if _has_payments(db, obj.lease_id):
        return dependency_response("Lease has assigned lease payments")

    lease_id = obj.lease_id
    db.delete(obj)
    db.commit()
    return success_response(
        data=None,
        message=f"Lease '{lease_id}' deleted",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY
    )


def lease_lookup(db: Session, active_only: bool = True):
    query = db.query(Lease.lease_id)
    if active_only:
        query = query.filter(Lease.active == True)
    return [Lookup(id=r.lease_id, name=r.lease_id) for r in query.order_by(Lease.lease_id).all()]
