# shared/helpers/json_response_helper.py
from typing import Any
from fastapi import HTTPException

from shared.core.schemas import JsonOutResult
from shared.utils.app_status_code import AppStatusCode


def success_response(data: Any, message: str = "Success", status_code: str = AppStatusCode.DATA_RETRIEVED_SUCCESSFULLY):
    return JsonOutResult(
        data=data,
        status="Success",
        status_code=status_code,
        message=message
    )


def error_response(message: str, status_code: str = AppStatusCode.OPERATION_FAILED, http_status: int = 400):
    """Abort the request with a Failure envelope; the exception handler passes it through."""
    raise HTTPException(
        status_code=http_status,
        detail=JsonOutResult(
            data=None,
            status="Failure",
            status_code=status_code,
            message=message
        ).model_dump()
    )


def not_found_response(entity: str, record_id: Any):
    return error_response(
        message=f"{entity} with ID {record_id} not found",
        status_code=AppStatusCode.RECORD_NOT_FOUND,
        http_status=404
    )


def duplicate_response(message: str):
    return error_response(
        message=message,
        status_code=AppStatusCode.DUPLICATE_ADD_ERROR,
        http_status=409
    )


def dependency_response(message: str):
    # delete refused while child rows still point at the record
    return error_response(
        message=message,
        status_code=AppStatusCode.DEPENDENCY_EXISTS
    )
