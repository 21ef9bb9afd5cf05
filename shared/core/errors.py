from shared.utils.app_status_code import AppStatusCode


class LedgerError(Exception):
    """Base class for the business errors raised by the property service."""

    http_status = 400
    status_code = AppStatusCode.OPERATION_FAILED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LedgerValidationError(LedgerError):
    """Input passed schema validation but breaks a business rule."""

    status_code = AppStatusCode.INVALID_INPUT


class NotFoundError(LedgerError):
    http_status = 404
    status_code = AppStatusCode.RECORD_NOT_FOUND


class InvalidReferenceError(LedgerError):
    """A record points at a dependent entity (type, category, property...) that does not exist."""

    status_code = AppStatusCode.INVALID_REFERENCE


class DuplicateRecordError(LedgerError):
    http_status = 409
    status_code = AppStatusCode.DUPLICATE_ADD_ERROR


class RecalculationWarning(LedgerError):
    """Raised inside the post-delete recompute when the owning lease is gone.

    Never leaves the ledger: it is caught and logged so the delete still succeeds.
    """
