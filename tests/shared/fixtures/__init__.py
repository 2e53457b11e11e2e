"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.database import (
    postgres_container,
    postgres_database,
    sqlite_database,
    sqlite_url,
)
from tests.shared.fixtures.factories import TestAccountFactory, TestPictureFactory

__all__ = [
    "postgres_container",
    "postgres_database",
    "sqlite_database",
    "sqlite_url",
    "TestAccountFactory",
    "TestPictureFactory",
]
