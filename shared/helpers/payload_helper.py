from typing import Dict, Iterable

from shared.core.errors import LedgerValidationError


def reject_cleared_fields(update_data: Dict, required: Iterable[str]):
    """Partial updates may skip a required column but never blank it out."""
    for name in required:
        if name in update_data and update_data[name] is None:
            raise LedgerValidationError(
                f"{name.replace('_', ' ').capitalize()} is required")
