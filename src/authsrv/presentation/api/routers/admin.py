"""Admin router for role management."""

from fastapi import APIRouter

from authsrv.application.commands import ChangeAccountRoleCommand
from authsrv.presentation.api.dependencies import AccountRepo, AdminUser
from authsrv.presentation.api.schemas.users import (
    ChangeLevelRequest,
    UserMessageResponse,
    UserResponse,
)

router = APIRouter()


@router.put(
    "/{user_id}/level",
    summary="Change a user's role",
    responses={
        403: {"description": "Admin access required"},
        404: {"description": "User or level not found"},
    },
)
async def change_user_level(
    user_id: int,
    request: ChangeLevelRequest,
    admin: AdminUser,
    account_repo: AccountRepo,
) -> UserMessageResponse:
    account = await ChangeAccountRoleCommand(account_repo).execute(
        account_id=user_id,
        role_id=request.user_level_id,
        requesting_admin_id=admin.account_id,
    )
    return UserMessageResponse(
        message="User level updated",
        user=UserResponse.from_account(account),
    )
