"""Profile picture metadata."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ProfilePictureUpload:
    """Metadata of a freshly uploaded picture, as reported by the upload service."""

    filename: str
    filesize: int
    media_type: str


@dataclass(frozen=True)
class ProfilePicture:
    """Stored profile picture with URL-qualified ``filename``."""

    id: int
    user_id: int
    filename: str
    filesize: int
    media_type: str
    created_at: datetime
