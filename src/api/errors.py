"""
Exception handlers - map request failures to the uniform response body.

Every failure reaching the client is reduced to {"success": false,
"message": ...} with a generic message. Field-level validation details,
storage errors and addresses are logged at most, never returned.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.models import ApiResponse
from src.domain.exceptions import (
    DispatchError,
    EmailAlreadyExists,
    PersistenceError,
    RegistrationError,
)

logger = logging.getLogger(__name__)

INVALID_DATA_MESSAGE = "Invalid registration data"

# Checked in order; the first matching class wins.
REGISTRATION_ERROR_RESPONSES: list[tuple[type[RegistrationError], int, str]] = [
    (EmailAlreadyExists, status.HTTP_409_CONFLICT, "Email already exists"),
    (PersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error"),
    (DispatchError, status.HTTP_502_BAD_GATEWAY, "Failed to send verification email"),
    (RegistrationError, status.HTTP_500_INTERNAL_SERVER_ERROR, "Registration failed"),
]


def failure_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSONResponse carrying a failed ApiResponse."""
    body = ApiResponse(success=False, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def registration_error_response(error: RegistrationError) -> JSONResponse:
    """Translate a domain error into its status code and generic message."""
    for error_type, status_code, message in REGISTRATION_ERROR_RESPONSES:
        if isinstance(error, error_type):
            return failure_response(status_code, message)
    raise TypeError(f"Unmapped registration error: {type(error).__name__}")


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with the uniform body instead of FastAPI's detail list."""
    fields = sorted({".".join(str(part) for part in err["loc"][1:]) for err in exc.errors()})
    logger.info("Rejected %s: invalid fields %s", request.url.path, fields)
    return failure_response(422, INVALID_DATA_MESSAGE)


def install_exception_handlers(app: FastAPI) -> None:
    """Register the handlers on an application instance."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
