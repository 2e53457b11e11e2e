from authsrv.domain.account.value_objects.account import (
    Account,
    AccountCredentials,
    AccountDetailsUpdate,
    AccountField,
)
from authsrv.domain.account.value_objects.profile_picture import (
    ProfilePicture,
    ProfilePictureUpload,
)
from authsrv.domain.account.value_objects.reset_token import ResetToken
from authsrv.domain.account.value_objects.role import (
    ADMIN,
    DEFAULT_ROLES,
    DEFAULT_SIGNUP_ROLE,
    GUEST,
    USER,
    Role,
)

__all__ = [
    "ADMIN",
    "DEFAULT_ROLES",
    "DEFAULT_SIGNUP_ROLE",
    "GUEST",
    "USER",
    "Account",
    "AccountCredentials",
    "AccountDetailsUpdate",
    "AccountField",
    "ProfilePicture",
    "ProfilePictureUpload",
    "ResetToken",
    "Role",
]
