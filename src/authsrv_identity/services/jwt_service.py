"""JWT token service.

Provides JWT token creation and verification for authentication.
"""

from datetime import datetime, timedelta, timezone

import jwt

from authsrv_identity.exceptions import (
    ConfigurationError,
    ExpiredTokenError,
    InvalidTokenError,
)
from authsrv_identity.schemas import TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    Tokens carry ``user_id`` and ``level_name`` claims plus ``iat``/``exp``
    and are signed with HS256. A missing secret does not prevent
    construction; it fails when a token is created or verified.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(1, "User")
    >>> payload = service.verify_token(token)
    >>> print(payload.account_id)
    1
    """

    DEFAULT_EXPIRE_HOURS = 3
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str | None,
        access_token_expire_hours: int = DEFAULT_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. ``None`` or empty leaves the
            service unconfigured.
        access_token_expire_hours
            Hours until an access token expires (default 3)
        """
        self._secret_key = secret_key or None
        self._access_expire = timedelta(hours=access_token_expire_hours)

    @property
    def is_configured(self) -> bool:
        return self._secret_key is not None

    def _require_secret(self) -> str:
        if self._secret_key is None:
            raise ConfigurationError
        return self._secret_key

    def create_access_token(
        self,
        account_id: int,
        role_name: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed access token.

        Parameters
        ----------
        account_id
            The account's numeric identifier
        role_name
            The account's role name at issuance
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string

        Raises
        ------
        ConfigurationError
            If no signing secret is configured
        """
        secret_key = self._require_secret()
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta or self._access_expire)

        payload = {
            "user_id": account_id,
            "level_name": role_name,
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded claims

        Raises
        ------
        ConfigurationError
            If no signing secret is configured
        ExpiredTokenError
            If the token is past its expiry
        InvalidTokenError
            If the token is invalid or malformed
        """
        secret_key = self._require_secret()
        try:
            payload = jwt.decode(
                token,
                secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["exp", "iat"]},
            )

            return TokenPayload(
                account_id=int(payload["user_id"]),
                role_name=str(payload["level_name"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
