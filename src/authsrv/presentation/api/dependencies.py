"""FastAPI dependency injection for the authsrv API.

Provides dependencies for:
- The Database handle and external clients owned by the app lifespan
- Authentication (current user from JWT)
- Repository, service, command and query instances
"""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from authsrv.application.context import UserContext
from authsrv.application.services import AuthenticationService, PasswordResetService
from authsrv.infrastructure.email import EmailService
from authsrv.infrastructure.persistence.sqlalchemy import (
    AccountRepositorySQLAlchemy,
    Database,
    ResetTokenRepositorySQLAlchemy,
)
from authsrv.infrastructure.storage import FileStorageClient
from authsrv.presentation.api.config import get_api_settings
from authsrv_config.settings import Settings
from authsrv_identity import InvalidTokenError, JWTService, PasswordHashingService

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Lifespan-owned resources
# -----------------------------------------------------------------------------


def get_database(request: Request) -> Database:
    """Database created by the application lifespan."""
    return request.app.state.database


def get_file_storage(request: Request) -> FileStorageClient:
    return request.app.state.file_storage


def get_email_service(request: Request) -> EmailService:
    return request.app.state.email_service


DatabaseDep = Annotated[Database, Depends(get_database)]


# -----------------------------------------------------------------------------
# Repositories
# -----------------------------------------------------------------------------


def get_account_repository(
    database: DatabaseDep,
    settings: SettingsDep,
    file_storage: FileStorageClient = Depends(get_file_storage),
) -> AccountRepositorySQLAlchemy:
    return AccountRepositorySQLAlchemy(
        database=database,
        file_storage=file_storage,
        profile_upload_url=settings.profile_upload_url,
    )


def get_reset_token_repository(database: DatabaseDep) -> ResetTokenRepositorySQLAlchemy:
    return ResetTokenRepositorySQLAlchemy(database)


AccountRepo = Annotated[AccountRepositorySQLAlchemy, Depends(get_account_repository)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret,
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service() -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService()


def get_authentication_service(
    account_repo: AccountRepo,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    return AuthenticationService(
        account_repository=account_repo,
        password_service=password_service,
        jwt_service=jwt_service,
    )


def get_password_reset_service(  # noqa: PLR0913
    account_repo: AccountRepo,
    settings: SettingsDep,
    token_repo: ResetTokenRepositorySQLAlchemy = Depends(get_reset_token_repository),
    password_service: PasswordHashingService = Depends(get_password_service),
    email_service: EmailService = Depends(get_email_service),
) -> PasswordResetService:
    return PasswordResetService(
        account_repository=account_repo,
        token_repository=token_repo,
        password_service=password_service,
        email_service=email_service,
        frontend_base_url=settings.frontend_base_url,
        token_expiry_hours=settings.reset_token_expire_hours,
    )


# Type aliases for injected services
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]
ResetService = Annotated[PasswordResetService, Depends(get_password_reset_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> UserContext:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Only the token is checked; the account itself is not loaded.

    Raises
    ------
    InvalidTokenError
        If the token is missing, malformed or expired (mapped to 401)
    ConfigurationError
        If no signing secret is configured (mapped to 500)
    """
    if credentials is None:
        msg = "Authentication required"
        raise InvalidTokenError(msg)

    payload = jwt_service.verify_token(credentials.credentials)
    return UserContext.from_token(payload)


# Type alias for injected current user
CurrentUser = Annotated[UserContext, Depends(get_current_user)]


def require_admin(user: CurrentUser) -> UserContext:
    """Require admin user."""
    if not user.is_admin:
        logger.warning("Account %s denied admin access", user.account_id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user


# Type alias for admin user
AdminUser = Annotated[UserContext, Depends(require_admin)]
