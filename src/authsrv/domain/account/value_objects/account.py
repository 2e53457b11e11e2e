"""Account read projections."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class Account:
    """Public view of an account.

    Never carries the password hash. ``profile_picture`` is the
    URL-qualified filename, or None when no picture is set.
    """

    id: int
    username: str
    email: str
    role_id: int
    role_name: str
    created_at: datetime
    profile_picture: str | None = None


@dataclass(frozen=True)
class AccountCredentials:
    """Account plus stored password hash, consumed only by login."""

    account: Account
    password_hash: str | None


class AccountField(str, Enum):
    """Fields that may be changed through a details update."""

    USERNAME = "username"
    EMAIL = "email"


@dataclass(frozen=True)
class AccountDetailsUpdate:
    """Partial update of account details.

    ``None`` means "not supplied"; only supplied fields are written.
    """

    username: str | None = None
    email: str | None = None

    def changes(self) -> dict[AccountField, str]:
        supplied = {
            AccountField.USERNAME: self.username,
            AccountField.EMAIL: self.email,
        }
        return {field: value for field, value in supplied.items() if value is not None}
