import asyncio
import logging
import secrets
from datetime import timedelta

from authsrv.domain.account import AccountRepository, ResetToken, ResetTokenRepository
from authsrv.domain.shared.time import utc_now
from authsrv.infrastructure.email import EmailService
from authsrv_identity import InvalidResetTokenError, PasswordHashingService

logger = logging.getLogger(__name__)


class PasswordResetService:
    """Service for handling password reset requests and token consumption."""

    TOKEN_EXPIRY_HOURS = 1

    def __init__(  # noqa: PLR0913
        self,
        account_repository: AccountRepository,
        token_repository: ResetTokenRepository,
        password_service: PasswordHashingService,
        email_service: EmailService,
        frontend_base_url: str,
        token_expiry_hours: int = TOKEN_EXPIRY_HOURS,
    ):
        self._account_repo = account_repository
        self._token_repo = token_repository
        self._password_service = password_service
        self._email_service = email_service
        self._frontend_base_url = frontend_base_url.rstrip("/")
        self._token_expiry = timedelta(hours=token_expiry_hours)

    async def request_reset(self, email: str) -> ResetToken | None:
        account = await self._account_repo.find_by_email(email)
        if not account:
            # Silent fail to prevent email enumeration
            logger.debug("Password reset requested for unknown email")
            return None

        # Replaces any earlier token of the account
        reset_token = await self._token_repo.create(
            user_id=account.id,
            token=secrets.token_urlsafe(32),
            expires_at=utc_now() + self._token_expiry,
        )

        reset_link = f"{self._frontend_base_url}/reset-password?token={reset_token.token}"
        try:
            await asyncio.to_thread(
                self._email_service.send_password_reset_email,
                to_email=account.email,
                reset_link=reset_link,
            )
        except Exception as e:
            logger.error("Failed to send password reset email: %s", e)
            # Don't raise - the token exists and can be re-requested

        logger.info("Password reset requested for account %s", account.id)
        return reset_token

    async def reset_password(self, token: str, new_password: str) -> None:
        # Early rejection before paying for the hash
        if not await self._token_repo.find_valid(token):
            raise InvalidResetTokenError

        self._password_service.validate_strength(new_password)
        new_hash = self._password_service.hash(new_password)

        # Token claim and password write share one transaction
        account_id = await self._account_repo.reset_password(token, new_hash)
        if account_id is None:
            logger.debug("Reset token consumed concurrently or expired meanwhile")
            raise InvalidResetTokenError

        logger.info("Password reset completed for account %s", account_id)
