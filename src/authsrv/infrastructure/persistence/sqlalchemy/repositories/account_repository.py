"""SQLAlchemy implementation of AccountRepository.

Every public method runs in its own ``Database.transaction()``. Reads join
``UserLevels`` for the role name and LEFT JOIN ``ProfilePicture`` for the
picture filename, which is URL-qualified here and never stored that way.
"""

import logging
from typing import Any

from sqlalchemy import Row, Select, delete, exists, select
from sqlalchemy import update as sa_update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from authsrv.domain.account import (
    Account,
    AccountCredentials,
    AccountDetailsUpdate,
    AccountField,
    AccountNotFoundError,
    AccountRepository,
    DuplicateAccountError,
    FileStoragePort,
    ProfilePicture,
    ProfilePictureNotFoundError,
    ProfilePictureUpload,
    RoleNotFoundError,
)
from authsrv.domain.shared.time import ensure_tz_aware, utc_now
from authsrv.infrastructure.persistence.sqlalchemy.database import Database
from authsrv.infrastructure.persistence.sqlalchemy.models import (
    ProfilePictureModel,
    ResetTokenModel,
    UserLevelModel,
    UserModel,
)

logger = logging.getLogger(__name__)

_DETAIL_COLUMNS = {
    AccountField.USERNAME: UserModel.username,
    AccountField.EMAIL: UserModel.email,
}


class AccountRepositorySQLAlchemy(AccountRepository):
    """
    SQLAlchemy implementation of AccountRepository.

    Profile picture file deletions are delegated to the injected storage
    port; they happen inside the surrounding transaction and their failure
    never aborts it.
    """

    def __init__(
        self,
        database: Database,
        file_storage: FileStoragePort,
        profile_upload_url: str = "",
    ):
        """Initialize repository.

        Parameters
        ----------
        database
            Database owning the connection pool
        file_storage
            Client of the external profile picture storage
        profile_upload_url
            Base URL prepended to stored picture filenames
        """
        self._db = database
        self._storage = file_storage
        self._profile_upload_url = profile_upload_url

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _qualify(self, filename: str | None) -> str | None:
        if filename is None:
            return None
        return f"{self._profile_upload_url}{filename}"

    @staticmethod
    def _account_select(*extra_columns: Any) -> Select:
        return (
            select(
                UserModel.user_id,
                UserModel.username,
                UserModel.email,
                UserModel.user_level_id,
                UserModel.created_at,
                UserLevelModel.level_name,
                ProfilePictureModel.filename,
                *extra_columns,
            )
            .join(
                UserLevelModel,
                UserModel.user_level_id == UserLevelModel.user_level_id,
            )
            .outerjoin(
                ProfilePictureModel,
                ProfilePictureModel.user_id == UserModel.user_id,
            )
        )

    def _row_to_account(self, row: Row) -> Account:
        return Account(
            id=row.user_id,
            username=row.username,
            email=row.email,
            role_id=row.user_level_id,
            role_name=row.level_name,
            created_at=ensure_tz_aware(row.created_at),
            profile_picture=self._qualify(row.filename),
        )

    def _to_picture(self, model: ProfilePictureModel) -> ProfilePicture:
        return ProfilePicture(
            id=model.profile_picture_id,
            user_id=model.user_id,
            filename=self._qualify(model.filename) or "",
            filesize=model.filesize,
            media_type=model.media_type,
            created_at=ensure_tz_aware(model.created_at),
        )

    async def _fetch_account(
        self,
        session: AsyncSession,
        *criteria: Any,
    ) -> Account | None:
        result = await session.execute(self._account_select().where(*criteria))
        row = result.one_or_none()
        return self._row_to_account(row) if row else None

    async def _find_picture_model(
        self,
        session: AsyncSession,
        account_id: int,
    ) -> ProfilePictureModel | None:
        stmt = select(ProfilePictureModel).where(
            ProfilePictureModel.user_id == account_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    async def find_by_id(self, account_id: int) -> Account | None:
        async with self._db.transaction() as session:
            return await self._fetch_account(session, UserModel.user_id == account_id)

    async def find_by_email(self, email: str) -> Account | None:
        async with self._db.transaction() as session:
            return await self._fetch_account(session, UserModel.email == email)

    async def find_by_username(self, username: str) -> Account | None:
        async with self._db.transaction() as session:
            return await self._fetch_account(session, UserModel.username == username)

    async def find_credentials_by_email(self, email: str) -> AccountCredentials | None:
        stmt = self._account_select(UserModel.password).where(UserModel.email == email)
        async with self._db.transaction() as session:
            row = (await session.execute(stmt)).one_or_none()
        if row is None:
            return None
        return AccountCredentials(
            account=self._row_to_account(row),
            password_hash=row.password,
        )

    async def get_password_hash(self, account_id: int) -> str | None:
        stmt = select(UserModel.password).where(UserModel.user_id == account_id)
        async with self._db.transaction() as session:
            row = (await session.execute(stmt)).one_or_none()
        if row is None:
            raise AccountNotFoundError(account_id)
        return row.password

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(exists().where(UserModel.email == email))
        async with self._db.transaction() as session:
            return bool((await session.execute(stmt)).scalar())

    async def get_username(self, account_id: int) -> str:
        stmt = select(UserModel.username).where(UserModel.user_id == account_id)
        async with self._db.transaction() as session:
            username = (await session.execute(stmt)).scalar_one_or_none()
        if username is None:
            raise AccountNotFoundError(account_id)
        return username

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    async def create(
        self,
        username: str,
        email: str,
        password_hash: str,
        role_id: int,
    ) -> Account:
        async with self._db.transaction() as session:
            role = await session.get(UserLevelModel, role_id)
            if role is None:
                raise RoleNotFoundError(role_id)

            model = UserModel(
                username=username,
                email=email,
                password=password_hash,
                user_level_id=role_id,
            )
            session.add(model)
            try:
                await session.flush()
            except IntegrityError as e:
                raise DuplicateAccountError from e

            account = Account(
                id=model.user_id,
                username=model.username,
                email=model.email,
                role_id=role.user_level_id,
                role_name=role.level_name,
                created_at=ensure_tz_aware(model.created_at),
            )

        logger.info("Created account %s (%s)", account.id, account.username)
        return account

    async def update_details(
        self,
        account_id: int,
        update: AccountDetailsUpdate,
    ) -> Account:
        values = {_DETAIL_COLUMNS[field]: value for field, value in update.changes().items()}

        async with self._db.transaction() as session:
            if values:
                stmt = (
                    sa_update(UserModel)
                    .where(UserModel.user_id == account_id)
                    .values(values)
                    .execution_options(synchronize_session=False)
                )
                try:
                    result = await session.execute(stmt)
                except IntegrityError as e:
                    raise DuplicateAccountError from e
                if result.rowcount == 0:  # type: ignore[attr-defined]
                    raise AccountNotFoundError(account_id)

            account = await self._fetch_account(session, UserModel.user_id == account_id)
            if account is None:
                raise AccountNotFoundError(account_id)

        if values:
            logger.info(
                "Updated account %s fields: %s",
                account_id,
                ", ".join(field.value for field in update.changes()),
            )
        return account

    async def update_password(self, account_id: int, password_hash: str) -> bool:
        async with self._db.transaction() as session:
            result = await session.execute(
                sa_update(UserModel)
                .where(UserModel.user_id == account_id)
                .values(password=password_hash)
                .execution_options(synchronize_session=False),
            )
            updated = result.rowcount > 0  # type: ignore[attr-defined]
            if updated:
                await session.execute(
                    delete(ResetTokenModel).where(ResetTokenModel.user_id == account_id),
                )

        if updated:
            logger.info("Password updated for account %s", account_id)
        return updated

    async def reset_password(self, token: str, password_hash: str) -> int | None:
        async with self._db.transaction() as session:
            # Claim the token first; a concurrent claim finds no row
            consumed = await session.execute(
                delete(ResetTokenModel)
                .where(
                    ResetTokenModel.token == token,
                    ResetTokenModel.expires_at > utc_now(),
                )
                .returning(ResetTokenModel.user_id)
                .execution_options(synchronize_session=False),
            )
            account_id = consumed.scalar_one_or_none()
            if account_id is None:
                return None

            result = await session.execute(
                sa_update(UserModel)
                .where(UserModel.user_id == account_id)
                .values(password=password_hash)
                .execution_options(synchronize_session=False),
            )
            if result.rowcount == 0:  # type: ignore[attr-defined]
                raise AccountNotFoundError(account_id)
            await session.execute(
                delete(ResetTokenModel).where(ResetTokenModel.user_id == account_id),
            )

        logger.info("Password reset for account %s", account_id)
        return account_id

    async def delete(self, account_id: int) -> int:
        async with self._db.transaction() as session:
            picture = await self._find_picture_model(session, account_id)
            if picture is not None:
                await self._storage.delete_profile_picture(picture.filename, account_id)

            await session.execute(
                delete(ProfilePictureModel).where(
                    ProfilePictureModel.user_id == account_id,
                ),
            )
            await session.execute(
                delete(ResetTokenModel).where(ResetTokenModel.user_id == account_id),
            )
            result = await session.execute(
                delete(UserModel)
                .where(UserModel.user_id == account_id)
                .execution_options(synchronize_session=False),
            )
            if result.rowcount == 0:  # type: ignore[attr-defined]
                raise AccountNotFoundError(account_id)

        logger.info("Deleted account %s", account_id)
        return account_id

    async def put_profile_picture(
        self,
        account_id: int,
        upload: ProfilePictureUpload,
    ) -> ProfilePicture:
        async with self._db.transaction() as session:
            existing = await self._find_picture_model(session, account_id)
            previous_filename = existing.filename if existing else None

            if existing:
                existing.filename = upload.filename
                existing.filesize = upload.filesize
                existing.media_type = upload.media_type
            else:
                session.add(
                    ProfilePictureModel(
                        user_id=account_id,
                        filename=upload.filename,
                        filesize=upload.filesize,
                        media_type=upload.media_type,
                    ),
                )
            await session.flush()

            if previous_filename and previous_filename != upload.filename:
                await self._storage.delete_profile_picture(previous_filename, account_id)

            model = await self._find_picture_model(session, account_id)
            if model is None:
                raise ProfilePictureNotFoundError(account_id=account_id)
            picture = self._to_picture(model)

        logger.info(
            "%s profile picture for account %s",
            "Replaced" if existing else "Stored",
            account_id,
        )
        return picture

    async def find_profile_picture(self, account_id: int) -> ProfilePicture | None:
        async with self._db.transaction() as session:
            model = await self._find_picture_model(session, account_id)
            return self._to_picture(model) if model else None

    async def get_profile_picture(self, picture_id: int) -> ProfilePicture:
        async with self._db.transaction() as session:
            model = await session.get(ProfilePictureModel, picture_id)
            if model is None:
                raise ProfilePictureNotFoundError(picture_id=picture_id)
            return self._to_picture(model)

    async def change_role(self, account_id: int, role_id: int) -> Account:
        async with self._db.transaction() as session:
            if await session.get(UserLevelModel, role_id) is None:
                raise RoleNotFoundError(role_id)

            result = await session.execute(
                sa_update(UserModel)
                .where(UserModel.user_id == account_id)
                .values(user_level_id=role_id)
                .execution_options(synchronize_session=False),
            )
            if result.rowcount == 0:  # type: ignore[attr-defined]
                raise AccountNotFoundError(account_id)

            account = await self._fetch_account(session, UserModel.user_id == account_id)
            if account is None:
                raise AccountNotFoundError(account_id)

        logger.info("Account %s moved to role %s", account_id, account.role_name)
        return account
