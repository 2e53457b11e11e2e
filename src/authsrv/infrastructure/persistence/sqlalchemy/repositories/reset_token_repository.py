"""SQLAlchemy implementation of ResetTokenRepository."""

import logging
from datetime import datetime

from sqlalchemy import delete, select

from authsrv.domain.account import ResetToken, ResetTokenRepository
from authsrv.domain.shared.time import ensure_tz_aware, utc_now
from authsrv.infrastructure.persistence.sqlalchemy.database import Database
from authsrv.infrastructure.persistence.sqlalchemy.models import ResetTokenModel

logger = logging.getLogger(__name__)


class ResetTokenRepositorySQLAlchemy(ResetTokenRepository):
    def __init__(self, database: Database):
        self._db = database

    @staticmethod
    def _to_token(model: ResetTokenModel) -> ResetToken:
        return ResetToken(
            token=model.token,
            user_id=model.user_id,
            expires_at=ensure_tz_aware(model.expires_at),
        )

    async def create(self, user_id: int, token: str, expires_at: datetime) -> ResetToken:
        async with self._db.transaction() as session:
            await session.execute(
                delete(ResetTokenModel).where(ResetTokenModel.user_id == user_id),
            )
            model = ResetTokenModel(user_id=user_id, token=token, expires_at=expires_at)
            session.add(model)
            await session.flush()
            return self._to_token(model)

    async def find_valid(self, token: str) -> ResetToken | None:
        stmt = select(ResetTokenModel).where(
            ResetTokenModel.token == token,
            ResetTokenModel.expires_at > utc_now(),
        )
        async with self._db.transaction() as session:
            model = (await session.execute(stmt)).scalar_one_or_none()
            return self._to_token(model) if model else None

    async def purge_expired(self) -> int:
        async with self._db.transaction() as session:
            result = await session.execute(
                delete(ResetTokenModel).where(ResetTokenModel.expires_at <= utc_now()),
            )
            count = result.rowcount  # type: ignore[attr-defined]
        logger.info("Purged %d expired reset tokens", count)
        return count
