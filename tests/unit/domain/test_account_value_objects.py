"""Tests for account value objects and exceptions."""

from datetime import datetime, timedelta, timezone

from authsrv.application.context import UserContext
from authsrv.domain.account import (
    ADMIN,
    DEFAULT_ROLES,
    DEFAULT_SIGNUP_ROLE,
    USER,
    AccountDetailsUpdate,
    AccountField,
    DuplicateAccountError,
)
from authsrv.domain.shared.exceptions import ConflictError, ErrorCode
from authsrv.domain.shared.time import ensure_tz_aware
from authsrv_identity import TokenPayload


class TestAccountDetailsUpdate:
    def test_only_supplied_fields_are_changes(self):
        update = AccountDetailsUpdate(email="new@example.com")

        assert update.changes() == {AccountField.EMAIL: "new@example.com"}

    def test_both_fields(self):
        update = AccountDetailsUpdate(username="alice2", email="new@example.com")

        assert set(update.changes()) == {AccountField.USERNAME, AccountField.EMAIL}

    def test_nothing_supplied_has_no_changes(self):
        assert AccountDetailsUpdate().changes() == {}


class TestRoles:
    def test_well_known_roles(self):
        assert [(r.id, r.name) for r in DEFAULT_ROLES] == [
            (1, "Admin"),
            (2, "User"),
            (3, "Guest"),
        ]

    def test_signup_role_is_user(self):
        assert DEFAULT_SIGNUP_ROLE == USER


class TestUserContext:
    def _payload(self, role_name):
        now = datetime.now(tz=timezone.utc)
        return TokenPayload(
            account_id=3,
            role_name=role_name,
            issued_at=now,
            expires_at=now + timedelta(hours=3),
        )

    def test_from_token(self):
        context = UserContext.from_token(self._payload("User"))

        assert context.account_id == 3
        assert not context.is_admin

    def test_admin_is_decided_by_role_name(self):
        assert UserContext.from_token(self._payload(ADMIN.name)).is_admin


class TestExceptions:
    def test_duplicate_account_is_conflict(self):
        error = DuplicateAccountError()

        assert isinstance(error, ConflictError)
        assert error.code == ErrorCode.DUPLICATE_ACCOUNT
        assert str(error) == "Username or email already exists"


def test_ensure_tz_aware_assumes_utc_for_naive():
    naive = datetime(2025, 1, 1, 12)

    assert ensure_tz_aware(naive).tzinfo is timezone.utc
