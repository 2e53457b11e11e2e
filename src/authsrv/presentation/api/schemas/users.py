"""Account schemas for request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from authsrv.domain.account import Account, ProfilePicture


class UserResponse(BaseModel):
    """Public account data; never contains the password hash."""

    user_id: int
    username: str
    email: str
    user_level_id: int
    level_name: str
    created_at: datetime
    profile_picture: str | None = Field(
        default=None,
        description="URL of the profile picture, if any",
    )

    @classmethod
    def from_account(cls, account: Account) -> "UserResponse":
        return cls(
            user_id=account.id,
            username=account.username,
            email=account.email,
            user_level_id=account.role_id,
            level_name=account.role_name,
            created_at=account.created_at,
            profile_picture=account.profile_picture,
        )


class RegisterRequest(BaseModel):
    """Request schema for account registration."""

    username: str = Field(..., min_length=3, max_length=255)
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="Password (8-72 bytes)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "email": "alice@example.com",
                "password": "securepassword123",
            },
        },
    )


class UpdateUserRequest(BaseModel):
    """Partial update; omitted fields stay unchanged."""

    username: str | None = Field(default=None, min_length=3, max_length=255)
    email: EmailStr | None = None


class UserMessageResponse(BaseModel):
    message: str
    user: UserResponse


class UsernameResponse(BaseModel):
    user_id: int
    username: str


class EmailAvailabilityResponse(BaseModel):
    available: bool


class DeleteUserResponse(BaseModel):
    message: str
    user_id: int


class ProfilePictureRequest(BaseModel):
    """Metadata of a file already stored by the upload service."""

    filename: str = Field(..., min_length=1, max_length=255)
    filesize: int = Field(..., ge=0)
    media_type: str = Field(..., min_length=1, max_length=100)


class ProfilePictureResponse(BaseModel):
    profile_picture_id: int
    user_id: int
    filename: str
    filesize: int
    media_type: str
    created_at: datetime

    @classmethod
    def from_picture(cls, picture: ProfilePicture) -> "ProfilePictureResponse":
        return cls(
            profile_picture_id=picture.id,
            user_id=picture.user_id,
            filename=picture.filename,
            filesize=picture.filesize,
            media_type=picture.media_type,
            created_at=picture.created_at,
        )


class ProfilePictureMessageResponse(BaseModel):
    message: str
    profile_picture: ProfilePictureResponse


class ChangeLevelRequest(BaseModel):
    user_level_id: int = Field(..., ge=1)
