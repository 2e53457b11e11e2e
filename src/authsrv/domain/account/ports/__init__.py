"""Port interfaces for external collaborators of the account domain."""

from authsrv.domain.account.ports.file_storage_port import FileStoragePort

__all__ = [
    "FileStoragePort",
]
