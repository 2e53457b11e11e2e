"""Repository interface for password reset tokens."""

from abc import ABC, abstractmethod
from datetime import datetime

from authsrv.domain.account.value_objects import ResetToken


class ResetTokenRepository(ABC):
    """Repository for password reset tokens."""

    @abstractmethod
    async def create(self, user_id: int, token: str, expires_at: datetime) -> ResetToken:
        """
        Store a new token, deleting the user's older tokens first.

        Parameters
        ----------
        user_id
            Owning account
        token
            Opaque random token
        expires_at
            When the token stops being valid
        """

    @abstractmethod
    async def find_valid(self, token: str) -> ResetToken | None:
        """Find a token that has not expired yet."""

    @abstractmethod
    async def purge_expired(self) -> int:
        """Delete all expired tokens. Returns the number of deleted rows."""
