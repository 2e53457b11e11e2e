import logging

from authsrv.domain.account import Account, AccountRepository

logger = logging.getLogger(__name__)


class ChangeAccountRoleCommand:
    """Command to move an account to another role (admin only)."""

    def __init__(self, account_repository: AccountRepository):
        self._account_repo = account_repository

    async def execute(
        self,
        account_id: int,
        role_id: int,
        requesting_admin_id: int,
    ) -> Account:
        account = await self._account_repo.change_role(account_id, role_id)
        logger.info(
            "Admin %s changed role of account %s to %s",
            requesting_admin_id,
            account_id,
            account.role_name,
        )
        return account
