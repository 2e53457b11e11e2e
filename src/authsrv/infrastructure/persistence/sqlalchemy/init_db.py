"""Database schema utilities."""

import logging

from sqlalchemy import select

from authsrv.domain.account import DEFAULT_ROLES
from authsrv.infrastructure.persistence.sqlalchemy.database import Database
from authsrv.infrastructure.persistence.sqlalchemy.models import Base, UserLevelModel

logger = logging.getLogger(__name__)


async def create_tables(database: Database) -> None:
    """
    Create all database tables (idempotent) and seed the role table.

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    await seed_roles(database)
    logger.info("Database schema is up to date (missing tables created if needed)")


async def seed_roles(database: Database) -> int:
    """Insert the well-known roles that are missing. Returns how many were added."""
    async with database.transaction() as session:
        existing = set((await session.execute(select(UserLevelModel.user_level_id))).scalars())
        missing = [role for role in DEFAULT_ROLES if role.id not in existing]
        session.add_all(
            UserLevelModel(user_level_id=role.id, level_name=role.name) for role in missing
        )

    if missing:
        logger.info("Seeded roles: %s", ", ".join(role.name for role in missing))
    return len(missing)


async def drop_tables(database: Database) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all database tables...")

    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("Database tables dropped successfully")


async def reset_tables(database: Database) -> None:
    """Drop all tables and recreate them."""
    await drop_tables(database)
    await create_tables(database)
