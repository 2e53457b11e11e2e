"""Fixtures for repository tests against a real PostgreSQL (Testcontainers)."""

from unittest.mock import AsyncMock

import pytest

from authsrv.infrastructure.persistence.sqlalchemy import (
    AccountRepositorySQLAlchemy,
    ResetTokenRepositorySQLAlchemy,
)
from tests.shared.fixtures.database import (  # noqa: F401
    postgres_container,
    postgres_database,
)
from tests.shared.fixtures.factories import PROFILE_UPLOAD_URL


@pytest.fixture
def pg_file_storage():
    storage = AsyncMock()
    storage.delete_profile_picture.return_value = True
    return storage


@pytest.fixture
def pg_account_repo(postgres_database, pg_file_storage):  # noqa: F811
    return AccountRepositorySQLAlchemy(
        database=postgres_database,
        file_storage=pg_file_storage,
        profile_upload_url=PROFILE_UPLOAD_URL,
    )


@pytest.fixture
def pg_token_repo(postgres_database):  # noqa: F811
    return ResetTokenRepositorySQLAlchemy(postgres_database)
