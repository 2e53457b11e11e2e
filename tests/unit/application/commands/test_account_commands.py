"""Unit tests for account commands."""

from unittest.mock import AsyncMock

import pytest

from authsrv.application.commands import (
    ChangeAccountRoleCommand,
    DeleteAccountCommand,
    PutProfilePictureCommand,
    UpdateAccountDetailsCommand,
)
from authsrv.domain.account import (
    ADMIN,
    AccountDetailsUpdate,
    AccountNotFoundError,
    DuplicateAccountError,
    RoleNotFoundError,
)
from authsrv.domain.shared.exceptions import InternalError
from tests.shared.fixtures.factories import TestAccountFactory, TestPictureFactory


class TestUpdateAccountDetailsCommand:
    def setup_method(self):
        """Set up test fixtures."""
        self.account_repo = AsyncMock()
        self.command = UpdateAccountDetailsCommand(self.account_repo)

    async def test_passes_partial_update_through(self):
        updated = TestAccountFactory.alice(username="alice2")
        self.account_repo.update_details.return_value = updated
        update = AccountDetailsUpdate(username="alice2")

        result = await self.command.execute(1, update)

        assert result == updated
        self.account_repo.update_details.assert_awaited_once_with(1, update)

    async def test_conflict_propagates(self):
        self.account_repo.update_details.side_effect = DuplicateAccountError()

        with pytest.raises(DuplicateAccountError):
            await self.command.execute(1, AccountDetailsUpdate(email="bob@example.com"))


class TestDeleteAccountCommand:
    def setup_method(self):
        """Set up test fixtures."""
        self.account_repo = AsyncMock()
        self.command = DeleteAccountCommand(self.account_repo)

    async def test_returns_deleted_id(self):
        self.account_repo.delete.return_value = 1

        assert await self.command.execute(1) == 1

    async def test_missing_row_becomes_internal_error(self):
        """The caller is authenticated as this account, so not-found is a server fault."""
        self.account_repo.delete.side_effect = AccountNotFoundError(1)

        with pytest.raises(InternalError, match="Failed to delete user"):
            await self.command.execute(1)


class TestPutProfilePictureCommand:
    async def test_delegates_upload_metadata(self):
        account_repo = AsyncMock()
        upload = TestPictureFactory.avatar()

        await PutProfilePictureCommand(account_repo).execute(1, upload)

        account_repo.put_profile_picture.assert_awaited_once_with(1, upload)


class TestChangeAccountRoleCommand:
    def setup_method(self):
        """Set up test fixtures."""
        self.account_repo = AsyncMock()
        self.command = ChangeAccountRoleCommand(self.account_repo)

    async def test_changes_role(self):
        promoted = TestAccountFactory.alice(role_id=ADMIN.id, role_name=ADMIN.name)
        self.account_repo.change_role.return_value = promoted

        result = await self.command.execute(
            account_id=1,
            role_id=ADMIN.id,
            requesting_admin_id=TestAccountFactory.ADMIN_ID,
        )

        assert result.role_name == "Admin"
        self.account_repo.change_role.assert_awaited_once_with(1, ADMIN.id)

    async def test_unknown_role_propagates(self):
        self.account_repo.change_role.side_effect = RoleNotFoundError(42)

        with pytest.raises(RoleNotFoundError):
            await self.command.execute(1, 42, TestAccountFactory.ADMIN_ID)
