from authsrv.application.queries.account.get_account_query import (
    CheckEmailAvailableQuery,
    GetAccountQuery,
)
from authsrv.application.queries.account.get_profile_picture_query import (
    GetProfilePictureQuery,
)

__all__ = [
    "CheckEmailAvailableQuery",
    "GetAccountQuery",
    "GetProfilePictureQuery",
]
