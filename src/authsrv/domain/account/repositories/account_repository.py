"""Repository interface for accounts."""

from abc import ABC, abstractmethod

from authsrv.domain.account.value_objects import (
    Account,
    AccountCredentials,
    AccountDetailsUpdate,
    ProfilePicture,
    ProfilePictureUpload,
)


class AccountRepository(ABC):
    """Repository for accounts and their profile pictures.

    Every method runs in its own transaction.
    """

    @abstractmethod
    async def find_by_id(self, account_id: int) -> Account | None:
        """Find an account by its id."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Account | None:
        """Find an account by exact email."""

    @abstractmethod
    async def find_by_username(self, username: str) -> Account | None:
        """Find an account by exact username."""

    @abstractmethod
    async def find_credentials_by_email(self, email: str) -> AccountCredentials | None:
        """Find an account together with its password hash (login only)."""

    @abstractmethod
    async def get_password_hash(self, account_id: int) -> str | None:
        """
        Get the stored password hash of an account.

        Returns
        -------
        The hash, or None if the account has no password set

        Raises
        ------
        AccountNotFoundError
            If the account does not exist
        """

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check whether an account with this email exists."""

    @abstractmethod
    async def get_username(self, account_id: int) -> str:
        """
        Get the username of an account.

        Raises
        ------
        AccountNotFoundError
            If the account does not exist
        """

    @abstractmethod
    async def create(
        self,
        username: str,
        email: str,
        password_hash: str,
        role_id: int,
    ) -> Account:
        """
        Insert a new account.

        Raises
        ------
        DuplicateAccountError
            If username or email is taken
        RoleNotFoundError
            If role_id does not exist
        """

    @abstractmethod
    async def update_details(
        self,
        account_id: int,
        update: AccountDetailsUpdate,
    ) -> Account:
        """
        Apply a partial update and return the re-read account.

        Raises
        ------
        AccountNotFoundError
            If the account does not exist
        DuplicateAccountError
            If the new username or email is taken
        """

    @abstractmethod
    async def update_password(self, account_id: int, password_hash: str) -> bool:
        """
        Store a new password hash and drop all reset tokens of the account.

        Returns
        -------
        True if a row was updated
        """

    @abstractmethod
    async def reset_password(self, token: str, password_hash: str) -> int | None:
        """
        Consume a reset token and store the new hash in one transaction.

        The token row is deleted before the password is written, so of two
        concurrent calls with the same token only one succeeds. All other
        reset tokens of the account are dropped as well.

        Returns
        -------
        The account id, or None if the token is unknown, expired or
        already consumed
        """

    @abstractmethod
    async def delete(self, account_id: int) -> int:
        """
        Delete an account with its profile picture and reset tokens.

        Returns
        -------
        The deleted account id

        Raises
        ------
        AccountNotFoundError
            If no account row was deleted; nothing is changed
        """

    @abstractmethod
    async def put_profile_picture(
        self,
        account_id: int,
        upload: ProfilePictureUpload,
    ) -> ProfilePicture:
        """Insert or overwrite the single profile picture of an account."""

    @abstractmethod
    async def find_profile_picture(self, account_id: int) -> ProfilePicture | None:
        """Find the profile picture of an account."""

    @abstractmethod
    async def get_profile_picture(self, picture_id: int) -> ProfilePicture:
        """
        Get a profile picture by its id.

        Raises
        ------
        ProfilePictureNotFoundError
            If no picture has this id
        """

    @abstractmethod
    async def change_role(self, account_id: int, role_id: int) -> Account:
        """
        Assign a different role to an account.

        Raises
        ------
        RoleNotFoundError
            If role_id does not exist
        AccountNotFoundError
            If the account does not exist
        """
