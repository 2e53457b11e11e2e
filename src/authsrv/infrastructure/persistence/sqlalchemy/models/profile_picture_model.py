"""SQLAlchemy model for profile picture metadata."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from authsrv.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
)


class ProfilePictureModel(Base, CreatedAtMixin):
    """One row per account; ``filename`` is relative to the upload base URL."""

    __tablename__ = "ProfilePicture"

    profile_picture_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("Users.user_id"),
        unique=True,
        nullable=False,
    )
    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    filesize: Mapped[int] = mapped_column(Integer, nullable=False)
    media_type: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<ProfilePictureModel(id={self.profile_picture_id}, "
            f"user_id={self.user_id}, filename={self.filename})>"
        )
