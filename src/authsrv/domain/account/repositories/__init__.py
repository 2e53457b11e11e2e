from authsrv.domain.account.repositories.account_repository import AccountRepository
from authsrv.domain.account.repositories.reset_token_repository import (
    ResetTokenRepository,
)

__all__ = [
    "AccountRepository",
    "ResetTokenRepository",
]
