"""SQLAlchemy model for roles."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from authsrv.infrastructure.persistence.sqlalchemy.models.base import Base


class UserLevelModel(Base):
    """Reference table of roles, seeded at schema creation."""

    __tablename__ = "UserLevels"

    user_level_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=False,
    )
    level_name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<UserLevelModel(id={self.user_level_id}, name={self.level_name})>"
