"""Identity and authentication exceptions.

These exceptions are raised by the authsrv_identity package and by the
authentication flows in authsrv.application. The API layer maps each
``code`` to an HTTP status.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    code = "AUTH_ERROR"

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid or malformed."""

    code = "INVALID_TOKEN"

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class ExpiredTokenError(InvalidTokenError):
    """Raised when a JWT token signature is valid but its lifetime is over."""

    code = "TOKEN_EXPIRED"

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    code = "WEAK_PASSWORD"

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login.

    The message is identical for an unknown email and a wrong password.
    """

    code = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class UnauthorizedError(AuthError):
    """Raised when the current password does not match on password change."""

    code = "UNAUTHORIZED"

    def __init__(self, message: str = "Current password is incorrect"):
        super().__init__(message)


class InvalidResetTokenError(AuthError):
    """Raised when a password reset token is unknown or expired."""

    code = "INVALID_RESET_TOKEN"

    def __init__(self, message: str = "Invalid or expired password reset token"):
        super().__init__(message)


class ConfigurationError(AuthError):
    """Raised when the signing secret is required but not configured."""

    code = "CONFIGURATION_ERROR"

    def __init__(self, message: str = "JWT secret key is not configured"):
        super().__init__(message)
