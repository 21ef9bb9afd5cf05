from datetime import date
from typing import Callable
from fastapi import Depends
from sqlalchemy.orm import Session

from shared.core.database import get_property_db as get_db
from ..crud.leasing_tenants.lease_ledger import LedgerRecalculator, get_ledger


def get_ledger_clock() -> Callable[[], date]:
    return date.today


def get_lease_ledger(
    db: Session = Depends(get_db),
    today: Callable[[], date] = Depends(get_ledger_clock),
) -> LedgerRecalculator:
    return get_ledger(db, today=today)
