"""Authentication router for login, password change and password reset."""

from fastapi import APIRouter, status

from authsrv.application.queries import GetAccountQuery
from authsrv.presentation.api.dependencies import (
    AccountRepo,
    AuthService,
    CurrentUser,
    ResetService,
)
from authsrv.presentation.api.schemas.auth import (
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    ResetPasswordRequest,
)
from authsrv.presentation.api.schemas.users import UserResponse


router = APIRouter()


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        400: {"description": "Invalid email or password"},
        500: {"description": "Token signing is not configured"},
    },
)
async def login(request: LoginRequest, auth_service: AuthService) -> LoginResponse:
    """
    Authenticate with email and password.

    Unknown email and wrong password produce the same response.
    """
    account, token = await auth_service.login(
        email=request.email,
        password=request.password,
    )
    return LoginResponse(token=token, user=UserResponse.from_account(account))


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user data"},
        401: {"description": "Not authenticated"},
        404: {"description": "Account no longer exists"},
    },
)
async def get_me(user: CurrentUser, account_repo: AccountRepo) -> UserResponse:
    """Get the account the bearer token was issued for."""
    account = await GetAccountQuery(account_repo).by_id(user.account_id)
    return UserResponse.from_account(account)


@router.put(
    "/password",
    summary="Change password",
    responses={
        200: {"description": "Password changed successfully"},
        400: {"description": "New password too weak"},
        401: {"description": "Current password incorrect or not authenticated"},
    },
)
async def change_password(
    request: ChangePasswordRequest,
    user: CurrentUser,
    auth_service: AuthService,
) -> MessageResponse:
    """
    Change the current account's password.

    The account is taken from the bearer token. The token itself stays
    valid until it expires.
    """
    await auth_service.change_password(
        account_id=user.account_id,
        current_password=request.current_password,
        new_password=request.new_password,
    )
    return MessageResponse(message="Password updated successfully")


@router.post(
    "/forgot-password",
    status_code=status.HTTP_202_ACCEPTED,
    summary="Request password reset",
    responses={
        202: {"description": "If the email exists, a reset link has been sent"},
    },
)
async def forgot_password(
    request: ForgotPasswordRequest,
    reset_service: ResetService,
) -> MessageResponse:
    """Request a password reset email."""
    await reset_service.request_reset(request.email)
    return MessageResponse(message="If the email exists, a reset link has been sent.")


@router.post(
    "/reset-password",
    summary="Reset password with token",
    responses={
        200: {"description": "Password reset successfully"},
        400: {"description": "Invalid or expired token, or weak password"},
    },
)
async def reset_password(
    request: ResetPasswordRequest,
    reset_service: ResetService,
) -> MessageResponse:
    """Reset password with a token from the reset email."""
    await reset_service.reset_password(
        token=request.token,
        new_password=request.new_password,
    )
    return MessageResponse(message="Password reset successfully")
