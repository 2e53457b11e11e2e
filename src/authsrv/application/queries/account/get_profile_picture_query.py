from authsrv.domain.account import (
    AccountRepository,
    ProfilePicture,
    ProfilePictureNotFoundError,
)


class GetProfilePictureQuery:
    """Query to retrieve a profile picture by owner or by its own id."""

    def __init__(self, account_repository: AccountRepository):
        self._account_repo = account_repository

    async def execute(self, account_id: int) -> ProfilePicture:
        picture = await self._account_repo.find_profile_picture(account_id)
        if picture is None:
            raise ProfilePictureNotFoundError(account_id=account_id)
        return picture

    async def by_id(self, picture_id: int) -> ProfilePicture:
        return await self._account_repo.get_profile_picture(picture_id)
