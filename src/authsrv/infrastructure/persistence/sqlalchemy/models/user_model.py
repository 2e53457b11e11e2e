"""SQLAlchemy model for accounts."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from authsrv.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
)


class UserModel(Base, CreatedAtMixin):
    """SQLAlchemy model for persisting accounts.

    ``password`` holds the bcrypt hash and may be NULL for accounts that
    cannot log in with a password.
    """

    __tablename__ = "Users"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    user_level_id: Mapped[int] = mapped_column(
        ForeignKey("UserLevels.user_level_id"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.user_id}, username={self.username})>"
