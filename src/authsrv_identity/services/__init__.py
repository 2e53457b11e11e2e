"""Identity services - JWT and password hashing."""

from authsrv_identity.services.jwt_service import JWTService
from authsrv_identity.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
