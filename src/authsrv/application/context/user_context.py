"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from authsrv.domain.account import ADMIN

if TYPE_CHECKING:
    from authsrv_identity.schemas import TokenPayload


@dataclass(frozen=True)
class UserContext:
    """
    Immutable context for the current authenticated user.

    Built from the verified bearer token alone; no database lookup is made,
    so ``role_name`` is the role at token issuance.
    """

    account_id: int
    role_name: str

    @classmethod
    def from_token(cls, payload: TokenPayload) -> UserContext:
        return cls(account_id=payload.account_id, role_name=payload.role_name)

    @property
    def is_admin(self) -> bool:
        return self.role_name == ADMIN.name

    def __str__(self) -> str:
        return f"UserContext({self.account_id})"
