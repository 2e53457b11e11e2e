"""
Database fixtures for repository and API tests.

Two backends are provided:
- ``sqlite_database``: a file-backed SQLite database per test (fast, default)
- ``postgres_database``: an ephemeral PostgreSQL from Testcontainers,
  for tests marked ``@pytest.mark.integration``

Both yield a ``Database`` with all tables created and the roles seeded.

Usage:
    # In your conftest.py
    from tests.shared.fixtures.database import sqlite_database  # noqa: F401

    async def test_something(sqlite_database):
        repo = ResetTokenRepositorySQLAlchemy(sqlite_database)
"""

import pytest
import pytest_asyncio
from testcontainers.postgres import PostgresContainer

from authsrv.infrastructure.persistence.sqlalchemy import Database
from authsrv.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
)

# Use same Postgres version as production
POSTGRES_IMAGE = "postgres:18-alpine"


def sqlite_url(tmp_path) -> str:
    """Async SQLite URL for a database file inside ``tmp_path``."""
    return f"sqlite+aiosqlite:///{tmp_path / 'authsrv-test.db'}"


@pytest_asyncio.fixture
async def sqlite_database(tmp_path):
    """
    Provide a freshly created SQLite database for one test.

    The file lives in ``tmp_path`` so every test starts from an empty schema.
    """
    database = Database.from_url(sqlite_url(tmp_path))
    await create_tables(database)
    yield database
    await database.dispose()


@pytest.fixture(scope="session")
def postgres_container():
    """
    Start a PostgreSQL container for the test session.

    The container is shared across all tests in the session for performance.
    Each test gets a clean schema via table drop/create.
    """
    with PostgresContainer(POSTGRES_IMAGE, driver="asyncpg") as postgres:
        yield postgres


@pytest_asyncio.fixture
async def postgres_database(postgres_container):
    """
    Provide an isolated PostgreSQL database for each test.

    Drops and recreates all tables before the test and drops them after.
    """
    database = Database.from_url(
        postgres_container.get_connection_url(),
        pool_size=5,
        connect_timeout=10.0,
    )
    await drop_tables(database)
    await create_tables(database)
    yield database
    await drop_tables(database)
    await database.dispose()
