"""SQLAlchemy persistence: models, database handle and repositories."""

from authsrv.infrastructure.persistence.sqlalchemy.database import Database
from authsrv.infrastructure.persistence.sqlalchemy.models import Base
from authsrv.infrastructure.persistence.sqlalchemy.repositories import (
    AccountRepositorySQLAlchemy,
    ResetTokenRepositorySQLAlchemy,
)

__all__ = [
    "AccountRepositorySQLAlchemy",
    "Base",
    "Database",
    "ResetTokenRepositorySQLAlchemy",
]
