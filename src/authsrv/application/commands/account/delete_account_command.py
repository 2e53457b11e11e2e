import logging

from authsrv.domain.account import AccountNotFoundError, AccountRepository
from authsrv.domain.shared.exceptions import InternalError

logger = logging.getLogger(__name__)


class DeleteAccountCommand:
    """Command to delete an account with its profile picture and reset tokens."""

    def __init__(self, account_repository: AccountRepository):
        self._account_repo = account_repository

    async def execute(self, account_id: int) -> int:
        try:
            return await self._account_repo.delete(account_id)
        except AccountNotFoundError as e:
            # The caller is authenticated as this account, so a missing row
            # is a server-side inconsistency
            logger.error("Delete affected no account row for %s", account_id)
            msg = "Failed to delete user"
            raise InternalError(msg) from e
