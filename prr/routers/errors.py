"""
Error helpers - PRR Platform
prr/routers/errors.py

HTTPException helpers with ErrorResponse bodies, plus the
RequestValidationError handler registered in main.py.
"""

from datetime import datetime, timezone

from fastapi import Request, status
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.responses import JSONResponse

from prr.models.errors import ErrorResponse


FIELD_MESSAGES = {
    "service_id": {
        "missing": "Service ID is required",
        "value_error": "Service ID cannot be empty",
    },
    "user_id": {
        "missing": "User ID is required",
        "value_error": "User ID cannot be empty",
    },
    "answers": {
        "missing": "Answers are required",
        "too_short": "Answers cannot be empty",
    },
    "name": {
        "missing": "Name is required",
        "value_error": "Name cannot be empty",
    },
}

DEFAULT_MESSAGES = {
    "missing": "Field '{field}' is required",
    "string_too_short": "Field '{field}' is too short",
    "string_too_long": "Field '{field}' is too long",
    "too_short": "Field '{field}' must not be empty",
    "string_type": "Field '{field}' must be a string",
    "int_type": "Field '{field}' must be an integer",
    "int_parsing": "Field '{field}' must be a valid integer",
    "bool_type": "Field '{field}' must be a boolean",
    "value_error": "Field '{field}' has an invalid value",
    "json_invalid": "Malformed JSON request body",
    "extra_forbidden": "Unknown field '{field}' is not allowed",
}


def get_validation_message(field: str, error_type: str) -> str:
    if field in FIELD_MESSAGES:
        for key, message in FIELD_MESSAGES[field].items():
            if key in error_type:
                return message

    for key, template in DEFAULT_MESSAGES.items():
        if key in error_type:
            return template.format(field=field)

    return f"Invalid value for field '{field}'"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()

    if not errors:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error_code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": None,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )

    err = errors[0]
    error_type = err.get("type", "")
    loc = err.get("loc", [])

    if "json_invalid" in error_type:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error_code": "INVALID_REQUEST",
                "message": "Malformed JSON request body",
                "details": None,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )

    field = ".".join(str(l) for l in loc if l not in ("body", "query", "path"))
    message = get_validation_message(field, error_type)

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error_code": "VALIDATION_ERROR",
            "message": message,
            "details": {"field": field, "type": error_type} if field else None,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


def raise_error(status_code: int, error_code: str, message: str):
    raise HTTPException(
        status_code=status_code,
        detail=ErrorResponse(
            error_code=error_code,
            message=message,
            timestamp=datetime.now(timezone.utc),
        ).model_dump(mode="json"),
    )


def raise_bad_request(msg: str = "Malformed request"):
    raise_error(status.HTTP_400_BAD_REQUEST, "INVALID_REQUEST", msg)


def raise_not_found(error_code: str, msg: str):
    raise_error(status.HTTP_404_NOT_FOUND, error_code, msg)
