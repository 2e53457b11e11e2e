"""
Pytest fixtures for infrastructure persistence tests.

Every test gets its own SQLite file with the schema created and the roles
seeded. The file storage port is an AsyncMock so tests can inspect and
fail remote deletes.
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy import func, select

from authsrv.infrastructure.persistence.sqlalchemy import (
    AccountRepositorySQLAlchemy,
    ResetTokenRepositorySQLAlchemy,
)
from tests.shared.fixtures.database import sqlite_database  # noqa: F401
from tests.shared.fixtures.factories import PROFILE_UPLOAD_URL


@pytest.fixture
def file_storage():
    storage = AsyncMock()
    storage.delete_profile_picture.return_value = True
    return storage


@pytest.fixture
def account_repo(sqlite_database, file_storage):  # noqa: F811
    return AccountRepositorySQLAlchemy(
        database=sqlite_database,
        file_storage=file_storage,
        profile_upload_url=PROFILE_UPLOAD_URL,
    )


@pytest.fixture
def token_repo(sqlite_database):  # noqa: F811
    return ResetTokenRepositorySQLAlchemy(sqlite_database)


@pytest.fixture
def count_rows(sqlite_database):  # noqa: F811
    """Count rows of a model, optionally filtered."""

    async def _count(model, *criteria) -> int:
        stmt = select(func.count()).select_from(model).where(*criteria)
        async with sqlite_database.transaction() as session:
            return (await session.execute(stmt)).scalar_one()

    return _count
