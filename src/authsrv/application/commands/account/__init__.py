from authsrv.application.commands.account.change_account_role_command import (
    ChangeAccountRoleCommand,
)
from authsrv.application.commands.account.delete_account_command import (
    DeleteAccountCommand,
)
from authsrv.application.commands.account.put_profile_picture_command import (
    PutProfilePictureCommand,
)
from authsrv.application.commands.account.update_account_details_command import (
    UpdateAccountDetailsCommand,
)

__all__ = [
    "ChangeAccountRoleCommand",
    "DeleteAccountCommand",
    "PutProfilePictureCommand",
    "UpdateAccountDetailsCommand",
]
