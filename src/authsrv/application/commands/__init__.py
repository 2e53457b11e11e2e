"""Application commands (state-changing use cases)."""

from authsrv.application.commands.account import (
    ChangeAccountRoleCommand,
    DeleteAccountCommand,
    PutProfilePictureCommand,
    UpdateAccountDetailsCommand,
)

__all__ = [
    "ChangeAccountRoleCommand",
    "DeleteAccountCommand",
    "PutProfilePictureCommand",
    "UpdateAccountDetailsCommand",
]
