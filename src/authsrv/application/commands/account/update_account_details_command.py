from authsrv.domain.account import Account, AccountDetailsUpdate, AccountRepository


class UpdateAccountDetailsCommand:
    """Command to change username and/or email of an account."""

    def __init__(self, account_repository: AccountRepository):
        self._account_repo = account_repository

    async def execute(self, account_id: int, update: AccountDetailsUpdate) -> Account:
        return await self._account_repo.update_details(account_id, update)
