"""SQLAlchemy models. Importing this package registers every table on Base."""

from authsrv.infrastructure.persistence.sqlalchemy.models.base import Base
from authsrv.infrastructure.persistence.sqlalchemy.models.profile_picture_model import (
    ProfilePictureModel,
)
from authsrv.infrastructure.persistence.sqlalchemy.models.reset_token_model import (
    ResetTokenModel,
)
from authsrv.infrastructure.persistence.sqlalchemy.models.user_level_model import (
    UserLevelModel,
)
from authsrv.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "ProfilePictureModel",
    "ResetTokenModel",
    "UserLevelModel",
    "UserModel",
]
