"""Request and response schemas."""

from authsrv.presentation.api.schemas.auth import (
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    ResetPasswordRequest,
)
from authsrv.presentation.api.schemas.users import (
    ChangeLevelRequest,
    DeleteUserResponse,
    EmailAvailabilityResponse,
    ProfilePictureMessageResponse,
    ProfilePictureRequest,
    ProfilePictureResponse,
    RegisterRequest,
    UpdateUserRequest,
    UserMessageResponse,
    UserResponse,
)

__all__ = [
    "ChangeLevelRequest",
    "ChangePasswordRequest",
    "DeleteUserResponse",
    "EmailAvailabilityResponse",
    "ForgotPasswordRequest",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "ProfilePictureMessageResponse",
    "ProfilePictureRequest",
    "ProfilePictureResponse",
    "RegisterRequest",
    "ResetPasswordRequest",
    "UpdateUserRequest",
    "UserMessageResponse",
    "UserResponse",
]
