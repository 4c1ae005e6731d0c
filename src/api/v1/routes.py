"""
API v1 routes.

Defines the registration endpoint. The handler is a plain function so the
blocking database and SMTP calls run in FastAPI's threadpool.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_registration_service
from src.api.errors import registration_error_response
from src.api.models import ApiResponse, RegisterRequest
from src.domain.exceptions import RegistrationError
from src.domain.registration import RegistrationService

router = APIRouter(tags=["v1"])

SUCCESS_MESSAGE = "Check your email for verification code"


@router.post(
    "/register",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": ApiResponse, "description": "Email already exists"},
        422: {"model": ApiResponse, "description": "Validation error"},
        500: {"model": ApiResponse, "description": "Database error"},
        502: {"model": ApiResponse, "description": "Verification email could not be sent"},
    },
    summary="Register a new account",
    description="Submit registration details. A 6-character verification code "
    "will be sent to the provided email.",
)
def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> ApiResponse | JSONResponse:
    """
    Register a new account and send verification code.

    - **email**: Valid email address to register
    - **password**: Password
    - **fullname**: Full name
    - **discord**: Discord handle
    - **age**: Age in years
    """
    try:
        service.register(
            request_data.email,
            request_data.password,
            request_data.fullname,
            request_data.discord,
            request_data.age,
        )
    except RegistrationError as e:
        return registration_error_response(e)
    return ApiResponse(success=True, message=SUCCESS_MESSAGE)
