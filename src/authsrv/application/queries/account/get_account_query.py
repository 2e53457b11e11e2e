"""Queries resolving a single account."""

from authsrv.domain.account import Account, AccountNotFoundError, AccountRepository


class GetAccountQuery:
    """Query to retrieve an account by id or username."""

    def __init__(self, account_repository: AccountRepository):
        self._account_repo = account_repository

    async def by_id(self, account_id: int) -> Account:
        account = await self._account_repo.find_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    async def by_username(self, username: str) -> Account:
        account = await self._account_repo.find_by_username(username)
        if account is None:
            raise AccountNotFoundError(username)
        return account

    async def username_by_id(self, account_id: int) -> str:
        return await self._account_repo.get_username(account_id)


class CheckEmailAvailableQuery:
    """Query to tell whether an email can still be registered."""

    def __init__(self, account_repository: AccountRepository):
        self._account_repo = account_repository

    async def execute(self, email: str) -> bool:
        return not await self._account_repo.exists_by_email(email)
