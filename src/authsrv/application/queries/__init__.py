"""Application queries (read-only use cases)."""

from authsrv.application.queries.account import (
    CheckEmailAvailableQuery,
    GetAccountQuery,
    GetProfilePictureQuery,
)

__all__ = [
    "CheckEmailAvailableQuery",
    "GetAccountQuery",
    "GetProfilePictureQuery",
]
