from datetime import date
from typing import Optional


def ensure_not_future(value: Optional[date], label: str) -> Optional[date]:
    if value is not None and value > date.today():
        raise ValueError(f"{label} cannot be in the future")
    return value


def ensure_on_or_after(later: Optional[date], earlier: Optional[date], message: str):
    if later is not None and earlier is not None and later < earlier:
        raise ValueError(message)
