"""authsrv identity - password hashing and access tokens.

Stateless building blocks used by the authentication flows:
- Password hashing (bcrypt, fixed work factor)
- Access tokens (JWT, HS256)
- Authentication exceptions
"""

from authsrv_identity.exceptions import (
    AuthError,
    ConfigurationError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidResetTokenError,
    InvalidTokenError,
    UnauthorizedError,
    WeakPasswordError,
)
from authsrv_identity.schemas import TokenPayload
from authsrv_identity.services import (
    JWTService,
    PasswordHashingService,
)

__all__ = [
    # Exceptions
    "AuthError",
    "ConfigurationError",
    "ExpiredTokenError",
    "InvalidCredentialsError",
    "InvalidResetTokenError",
    "InvalidTokenError",
    "UnauthorizedError",
    "WeakPasswordError",
    # Schemas
    "TokenPayload",
    # Services
    "JWTService",
    "PasswordHashingService",
]
