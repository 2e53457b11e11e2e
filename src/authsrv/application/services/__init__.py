"""Application layer services."""

from authsrv.application.services.authentication_service import AuthenticationService
from authsrv.application.services.password_reset_service import PasswordResetService

__all__ = [
    "AuthenticationService",
    "PasswordResetService",
]
