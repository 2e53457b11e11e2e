"""Database engine, connection pool and transaction scope.

A ``Database`` is created once by the application (or CLI command), handed to
the repositories, and disposed on shutdown. There is no module-level engine.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any, AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from authsrv.domain.shared.exceptions import InternalError

if TYPE_CHECKING:
    from authsrv_config.settings import Settings

logger = logging.getLogger(__name__)


class Database:
    """Owns the async engine (and its bounded pool) and the session factory."""

    def __init__(self, engine: AsyncEngine):
        self._engine = engine
        self._session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_url(  # noqa: PLR0913
        cls,
        url: str,
        *,
        pool_size: int = 10,
        max_overflow: int = 0,
        pool_timeout: float = 2.0,
        pool_recycle: int = 1800,
        connect_timeout: float | None = 2.0,
        echo: bool = False,
    ) -> Database:
        """
        Create a database with a bounded connection pool.

        Parameters
        ----------
        url
            SQLAlchemy async URL (``postgresql+asyncpg://`` or ``sqlite+aiosqlite://``)
        pool_size
            Connections kept in the pool
        max_overflow
            Extra connections allowed above ``pool_size``
        pool_timeout
            Seconds to wait for a free connection before failing
        pool_recycle
            Maximum age in seconds of a pooled connection before it is replaced
            on checkout; stale idle connections are caught by ``pool_pre_ping``
        connect_timeout
            Seconds allowed for establishing a new connection (asyncpg only)
        echo
            Log all SQL statements
        """
        engine_kwargs: dict[str, Any] = {"echo": echo, "pool_pre_ping": True}

        if url.startswith("sqlite"):
            # Ensure data directory exists for file-based SQLite
            db_path = url.split("///")[-1]
            if db_path and db_path != ":memory:":
                Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        else:
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=pool_timeout,
                pool_recycle=pool_recycle,
            )
            if connect_timeout is not None:
                engine_kwargs["connect_args"] = {"timeout": connect_timeout}

        return cls(create_async_engine(url, **engine_kwargs))

    @classmethod
    def from_settings(cls, settings: Settings) -> Database:
        return cls.from_url(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
            pool_recycle=settings.db_pool_recycle,
            connect_timeout=settings.db_connect_timeout,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """
        Run a unit of work in one transaction.

        Commits when the block exits normally and rolls back on any
        exception. The connection goes back to the pool on every exit path.
        Store faults are logged and re-raised as ``InternalError``.

        Yields
        ------
        AsyncSession bound to the open transaction
        """
        try:
            async with self._session_maker() as session, session.begin():
                yield session
        except SQLAlchemyError as e:
            logger.exception("Database transaction failed: %s", type(e).__name__)
            raise InternalError("Database operation failed") from e

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self._engine.dispose()
        logger.info("Database connection pool disposed")
