from authsrv.domain.account import (
    AccountRepository,
    ProfilePicture,
    ProfilePictureUpload,
)


class PutProfilePictureCommand:
    """Command to set or replace the profile picture of an account."""

    def __init__(self, account_repository: AccountRepository):
        self._account_repo = account_repository

    async def execute(
        self,
        account_id: int,
        upload: ProfilePictureUpload,
    ) -> ProfilePicture:
        return await self._account_repo.put_profile_picture(account_id, upload)
