"""Account router: registration, lookups, profile data and pictures."""

from fastapi import APIRouter, status

from authsrv.application.commands import (
    DeleteAccountCommand,
    PutProfilePictureCommand,
    UpdateAccountDetailsCommand,
)
from authsrv.application.queries import (
    CheckEmailAvailableQuery,
    GetAccountQuery,
    GetProfilePictureQuery,
)
from authsrv.domain.account import AccountDetailsUpdate, ProfilePictureUpload
from authsrv.presentation.api.dependencies import AccountRepo, AuthService, CurrentUser
from authsrv.presentation.api.schemas.users import (
    DeleteUserResponse,
    EmailAvailabilityResponse,
    ProfilePictureMessageResponse,
    ProfilePictureRequest,
    ProfilePictureResponse,
    RegisterRequest,
    UpdateUserRequest,
    UserMessageResponse,
    UserResponse,
    UsernameResponse,
)


router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User created"},
        400: {"description": "Weak password"},
        409: {"description": "Username or email already exists"},
    },
)
async def register(request: RegisterRequest, auth_service: AuthService) -> UserMessageResponse:
    account = await auth_service.register(
        username=request.username,
        email=request.email,
        password=request.password,
    )
    return UserMessageResponse(message="User created", user=UserResponse.from_account(account))


@router.get(
    "/email/{email}/exists",
    summary="Check email availability",
)
async def check_email(email: str, account_repo: AccountRepo) -> EmailAvailabilityResponse:
    available = await CheckEmailAvailableQuery(account_repo).execute(email)
    return EmailAvailabilityResponse(available=available)


@router.get(
    "/username/{username}",
    summary="Get user by username",
    responses={404: {"description": "User not found"}},
)
async def get_user_by_username(username: str, account_repo: AccountRepo) -> UserResponse:
    account = await GetAccountQuery(account_repo).by_username(username)
    return UserResponse.from_account(account)


@router.put(
    "/me",
    summary="Update own username and/or email",
    responses={
        404: {"description": "User not found"},
        409: {"description": "Username or email already exists"},
    },
)
async def update_me(
    request: UpdateUserRequest,
    user: CurrentUser,
    account_repo: AccountRepo,
) -> UserMessageResponse:
    account = await UpdateAccountDetailsCommand(account_repo).execute(
        user.account_id,
        AccountDetailsUpdate(username=request.username, email=request.email),
    )
    return UserMessageResponse(message="User updated", user=UserResponse.from_account(account))


@router.delete(
    "/me",
    summary="Delete own account",
    responses={500: {"description": "Account could not be deleted"}},
)
async def delete_me(user: CurrentUser, account_repo: AccountRepo) -> DeleteUserResponse:
    """Delete the current account together with its profile picture."""
    account_id = await DeleteAccountCommand(account_repo).execute(user.account_id)
    return DeleteUserResponse(message="User deleted", user_id=account_id)


@router.put(
    "/me/profile-picture",
    summary="Set or replace own profile picture",
)
async def put_profile_picture(
    request: ProfilePictureRequest,
    user: CurrentUser,
    account_repo: AccountRepo,
) -> ProfilePictureMessageResponse:
    picture = await PutProfilePictureCommand(account_repo).execute(
        user.account_id,
        ProfilePictureUpload(
            filename=request.filename,
            filesize=request.filesize,
            media_type=request.media_type,
        ),
    )
    return ProfilePictureMessageResponse(
        message="Profile picture updated",
        profile_picture=ProfilePictureResponse.from_picture(picture),
    )


@router.get(
    "/{user_id}",
    summary="Get user by id",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: int, account_repo: AccountRepo) -> UserResponse:
    account = await GetAccountQuery(account_repo).by_id(user_id)
    return UserResponse.from_account(account)


@router.get(
    "/{user_id}/profile-picture",
    summary="Get a user's profile picture",
    responses={404: {"description": "Profile picture not found"}},
)
async def get_profile_picture(
    user_id: int,
    account_repo: AccountRepo,
) -> ProfilePictureResponse:
    picture = await GetProfilePictureQuery(account_repo).execute(user_id)
    return ProfilePictureResponse.from_picture(picture)


@router.get(
    "/{user_id}/username",
    summary="Get the username of a user",
    responses={404: {"description": "User not found"}},
)
async def get_username(user_id: int, account_repo: AccountRepo) -> UsernameResponse:
    username = await GetAccountQuery(account_repo).username_by_id(user_id)
    return UsernameResponse(user_id=user_id, username=username)


@router.get(
    "/profile-pictures/{picture_id}",
    summary="Get a profile picture by its id",
    responses={404: {"description": "Profile picture not found"}},
)
async def get_profile_picture_by_id(
    picture_id: int,
    account_repo: AccountRepo,
) -> ProfilePictureResponse:
    picture = await GetProfilePictureQuery(account_repo).by_id(picture_id)
    return ProfilePictureResponse.from_picture(picture)
