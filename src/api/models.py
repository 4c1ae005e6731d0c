"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Bounds mirror the users table so that storage never rejects accepted input.
"""

from pydantic import BaseModel, EmailStr, Field

# PostgreSQL INTEGER upper bound (age column)
MAX_AGE = 2_147_483_647

# PostgreSQL text cannot hold NUL; bcrypt rejects it in passwords.
# EmailStr already refuses control characters.
NO_NUL_PATTERN = r"^[^\x00]*$"


class RegisterRequest(BaseModel):
    """Request model for account registration."""

    email: EmailStr
    password: str = Field(..., min_length=1, pattern=NO_NUL_PATTERN, description="Account password")
    fullname: str = Field(
        ...,
        min_length=1,
        pattern=NO_NUL_PATTERN,
        description="Full name shown in the verification email",
    )
    discord: str = Field(..., min_length=1, pattern=NO_NUL_PATTERN, description="Discord handle")
    age: int = Field(..., ge=0, le=MAX_AGE, description="Age in years")


class ApiResponse(BaseModel):
    """Uniform response body for every registration outcome."""

    success: bool
    message: str
