"""Tests for ResetTokenRepositorySQLAlchemy against SQLite."""

from datetime import timedelta

import pytest

from authsrv.domain.account import USER
from authsrv.domain.shared.time import utc_now
from authsrv.infrastructure.persistence.sqlalchemy.models import ResetTokenModel


@pytest.fixture
async def alice_id(account_repo):
    account = await account_repo.create("alice", "alice@example.com", "hash", USER.id)
    return account.id


class TestResetTokenRepository:
    async def test_create_and_find_valid(self, token_repo, alice_id):
        expires_at = utc_now() + timedelta(hours=1)

        created = await token_repo.create(alice_id, "token-1", expires_at)
        found = await token_repo.find_valid("token-1")

        assert created.token == "token-1"
        assert found == created
        assert found.user_id == alice_id
        assert found.expires_at.tzinfo is not None

    async def test_new_token_replaces_older_ones(self, token_repo, alice_id, count_rows):
        await token_repo.create(alice_id, "token-1", utc_now() + timedelta(hours=1))
        await token_repo.create(alice_id, "token-2", utc_now() + timedelta(hours=1))

        assert await token_repo.find_valid("token-1") is None
        assert await token_repo.find_valid("token-2") is not None
        assert await count_rows(ResetTokenModel) == 1

    async def test_expired_token_is_not_valid(self, token_repo, alice_id):
        await token_repo.create(alice_id, "old", utc_now() - timedelta(minutes=1))

        assert await token_repo.find_valid("old") is None

    async def test_unknown_token(self, token_repo):
        assert await token_repo.find_valid("does-not-exist") is None

    async def test_purge_expired_keeps_live_tokens(self, token_repo, account_repo, alice_id):
        bob = await account_repo.create("bob", "bob@example.com", "hash", USER.id)
        await token_repo.create(alice_id, "expired", utc_now() - timedelta(hours=2))
        await token_repo.create(bob.id, "live", utc_now() + timedelta(hours=1))

        assert await token_repo.purge_expired() == 1

        assert await token_repo.find_valid("live") is not None
