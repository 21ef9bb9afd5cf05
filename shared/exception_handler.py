import logging
from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from shared.core.errors import LedgerError
from shared.core.schemas import JsonOutResult
from shared.utils.app_status_code import AppStatusCode

logger = logging.getLogger(__name__)


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        # error_response() already packs a JsonOutResult into the detail
        if isinstance(exc.detail, dict) and "message" in exc.detail:
            return JSONResponse(content=exc.detail, status_code=exc.status_code)

        wrapped = JsonOutResult(
            data=None,
            status="Failure",
            status_code=AppStatusCode.OPERATION_FAILED,
            message=str(exc.detail)
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=exc.status_code or 400)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        messages = []
        for error in exc.errors():
            field = ".".join(str(part) for part in error.get("loc", ())[1:])
            messages.append(f"{field}: {error.get('msg')}" if field else error.get("msg"))

        wrapped = JsonOutResult(
            data=None,
            status="Failure",
            status_code=AppStatusCode.INVALID_INPUT,
            message="; ".join(messages)
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=422)

    @app.exception_handler(LedgerError)
    async def ledger_exception_handler(request: Request, exc: LedgerError):
        logger.info("%s on %s %s: %s", type(exc).__name__,
                    request.method, request.url.path, exc.message)
        wrapped = JsonOutResult(
            data=None,
            status="Failure",
            status_code=exc.status_code,
            message=exc.message
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=exc.http_status)

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s",
                         request.method, request.url.path)

        wrapped = JsonOutResult(
            data=None,
            status="Failure",
            status_code=AppStatusCode.OPERATION_FAILED,
            message="Internal server error"
        ).model_dump()
        return JSONResponse(content=wrapped, status_code=500)
