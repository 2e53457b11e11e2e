"""Authentication service for login, registration and password change."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from authsrv.domain.account import DEFAULT_SIGNUP_ROLE, Account
from authsrv.domain.shared.exceptions import InternalError
from authsrv_identity import (
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
    UnauthorizedError,
)

if TYPE_CHECKING:
    from authsrv.domain.account import AccountRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for credential checks and token issuance.

    Orchestrates the account repository, password hashing and JWT
    issuance to provide:
    - Login with email and password
    - Registration
    - Password change for an authenticated account
    - Bearer token verification
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._account_repo = account_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def login(self, email: str, password: str) -> tuple[Account, str]:
        """
        Verify credentials and issue an access token.

        Parameters
        ----------
        email
            Exact email of the account
        password
            Plaintext password

        Returns
        -------
        The public account projection and the signed token

        Raises
        ------
        InvalidCredentialsError
            If the email is unknown or the password does not match
        ConfigurationError
            If no token signing secret is configured
        """
        credentials = await self._account_repo.find_credentials_by_email(email)
        if credentials is None:
            logger.debug("Login attempt for unknown email")
            raise InvalidCredentialsError

        if not self._password_service.verify(password, credentials.password_hash):
            logger.debug("Login attempt with wrong password for account %s", credentials.account.id)
            raise InvalidCredentialsError

        account = credentials.account
        if self._password_service.needs_rehash(credentials.password_hash or ""):
            await self._rehash(account.id, password)

        token = self._jwt_service.create_access_token(
            account_id=account.id,
            role_name=account.role_name,
        )

        logger.info("Account logged in: %s", account.id)
        return account, token

    async def register(self, username: str, email: str, password: str) -> Account:
        """
        Create an account with the default role.

        Raises
        ------
        WeakPasswordError
            If the password does not meet strength requirements
        DuplicateAccountError
            If username or email is taken
        """
        self._password_service.validate_strength(password)
        password_hash = self._password_service.hash(password)

        account = await self._account_repo.create(
            username=username,
            email=email,
            password_hash=password_hash,
            role_id=DEFAULT_SIGNUP_ROLE.id,
        )

        logger.info("Account registered: %s (role: %s)", account.id, account.role_name)
        return account

    async def change_password(
        self,
        account_id: int,
        current_password: str,
        new_password: str,
    ) -> None:
        """
        Replace the password of an authenticated account.

        The existing token stays valid until it expires.

        Parameters
        ----------
        account_id
            Account id taken from the verified bearer token
        current_password
            Must match the stored hash
        new_password
            New plaintext password

        Raises
        ------
        UnauthorizedError
            If ``current_password`` does not match
        WeakPasswordError
            If ``new_password`` does not meet strength requirements
        InternalError
            If the password row was not updated
        """
        stored_hash = await self._account_repo.get_password_hash(account_id)
        if not self._password_service.verify(current_password, stored_hash):
            raise UnauthorizedError

        self._password_service.validate_strength(new_password)
        new_hash = self._password_service.hash(new_password)

        if not await self._account_repo.update_password(account_id, new_hash):
            msg = "Failed to update password"
            raise InternalError(msg)

        logger.info("Password changed for account: %s", account_id)

    async def _rehash(self, account_id: int, password: str) -> None:
        """Upgrade a hash made with an outdated work factor after a verified login."""
        new_hash = self._password_service.hash(password)
        if await self._account_repo.update_password(account_id, new_hash):
            logger.info("Rehashed password of account %s", account_id)
        else:
            logger.warning("Could not store rehashed password of account %s", account_id)

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)
