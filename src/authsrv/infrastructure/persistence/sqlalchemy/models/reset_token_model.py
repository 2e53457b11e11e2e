"""SQLAlchemy model for password reset tokens."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from authsrv.infrastructure.persistence.sqlalchemy.models.base import Base


class ResetTokenModel(Base):
    __tablename__ = "ResetTokens"

    reset_token_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("Users.user_id"),
        nullable=False,
        index=True,
    )
    token: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<ResetTokenModel(id={self.reset_token_id}, user_id={self.user_id})>"
