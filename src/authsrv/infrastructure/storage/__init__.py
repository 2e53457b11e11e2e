"""Client of the external file storage service."""

from authsrv.infrastructure.storage.file_storage_client import FileStorageClient

__all__ = [
    "FileStorageClient",
]
