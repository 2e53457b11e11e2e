from authsrv.infrastructure.persistence.sqlalchemy.repositories.account_repository import (
    AccountRepositorySQLAlchemy,
)
from authsrv.infrastructure.persistence.sqlalchemy.repositories.reset_token_repository import (
    ResetTokenRepositorySQLAlchemy,
)

__all__ = [
    "AccountRepositorySQLAlchemy",
    "ResetTokenRepositorySQLAlchemy",
]
