"""Account domain exceptions."""

from authsrv.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class AccountNotFoundError(EntityNotFoundError):
    """Raised when no account matches the given identifier."""

    def __init__(self, account_id: int | str) -> None:
        super().__init__(
            message="User not found",
            code=ErrorCode.ACCOUNT_NOT_FOUND,
            details={"account_id": account_id},
        )
        self.account_id = account_id


class RoleNotFoundError(EntityNotFoundError):
    """Raised when a role id does not exist in ``UserLevels``."""

    def __init__(self, role_id: int) -> None:
        super().__init__(
            message="User level not found",
            code=ErrorCode.ROLE_NOT_FOUND,
            details={"role_id": role_id},
        )
        self.role_id = role_id


class ProfilePictureNotFoundError(EntityNotFoundError):
    """Raised when a profile picture cannot be found."""

    def __init__(self, account_id: int | None = None, picture_id: int | None = None) -> None:
        details = {}
        if account_id is not None:
            details["account_id"] = account_id
        if picture_id is not None:
            details["picture_id"] = picture_id
        super().__init__(
            message="Profile picture not found",
            code=ErrorCode.PROFILE_PICTURE_NOT_FOUND,
            details=details,
        )


class DuplicateAccountError(ConflictError):
    """Raised when a username or email is already taken.

    The store does not say which column clashed, so neither does this error.
    """

    def __init__(self) -> None:
        super().__init__(
            message="Username or email already exists",
            code=ErrorCode.DUPLICATE_ACCOUNT,
        )
