"""Authentication schemas for request/response models."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from authsrv.presentation.api.schemas.users import UserResponse


class LoginRequest(BaseModel):
    """Request schema for login."""

    email: EmailStr
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "alice@example.com",
                "password": "securepassword123",
            },
        },
    )


class LoginResponse(BaseModel):
    """Response schema for a successful login."""

    message: str = "Login successful"
    token: str = Field(..., description="Bearer token, valid for the configured hours")
    user: UserResponse


class ChangePasswordRequest(BaseModel):
    """Request schema for changing the current account's password."""

    current_password: str
    new_password: str


class ForgotPasswordRequest(BaseModel):
    """Request schema for requesting a password reset email."""

    email: EmailStr


class ResetPasswordRequest(BaseModel):
    """Request schema for resetting a password with a token."""

    token: str
    new_password: str


class MessageResponse(BaseModel):
    message: str
