"""File storage port interface."""

from abc import ABC, abstractmethod


class FileStoragePort(ABC):
    """
    Interface for the external service that stores profile picture files.

    Deletion is best-effort: implementations log failures and never raise.
    """

    @abstractmethod
    async def delete_profile_picture(self, filename: str, user_id: int) -> bool:
        """
        Ask the storage service to delete a profile picture file.

        Parameters
        ----------
        filename
            Stored (relative) filename
        user_id
            Owner of the file, sent along for the service's ownership check

        Returns
        -------
        True if the service confirmed the deletion, False otherwise
        """
