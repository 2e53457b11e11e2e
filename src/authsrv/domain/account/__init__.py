"""Account domain: projections, repository contracts, exceptions."""

from authsrv.domain.account.exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    ProfilePictureNotFoundError,
    RoleNotFoundError,
)
from authsrv.domain.account.ports import FileStoragePort
from authsrv.domain.account.repositories import (
    AccountRepository,
    ResetTokenRepository,
)
from authsrv.domain.account.value_objects import (
    ADMIN,
    DEFAULT_ROLES,
    DEFAULT_SIGNUP_ROLE,
    GUEST,
    USER,
    Account,
    AccountCredentials,
    AccountDetailsUpdate,
    AccountField,
    ProfilePicture,
    ProfilePictureUpload,
    ResetToken,
    Role,
)

__all__ = [
    # Value objects
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
    # Exceptions
    "AccountNotFoundError",
    "DuplicateAccountError",
    "ProfilePictureNotFoundError",
    "RoleNotFoundError",
    # Repositories / ports
    "AccountRepository",
    "FileStoragePort",
    "ResetTokenRepository",
]
