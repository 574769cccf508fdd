"""User API routes."""

from fastapi import APIRouter, Depends, Request

from api.v1.dependencies import get_profile_sync_service, get_user_service
from api.v1.schemas.user import (
    ProfileSyncResponse,
    ProfileUpdate,
    UserCreate,
    UserCreateResponse,
    UserResponse,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.profile_sync_service import ProfileSyncService
from domain.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=UserCreateResponse,
    summary="Register a user",
    responses={
        200: {"description": "User created, or already registered"},
        400: {"description": "Invalid email format"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def register_user(
    request: Request,
    body: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserCreateResponse:
    """Create a user record on first sign-in. Existing users are left as they are."""
    result = await service.register(body.email, body.display_name, body.photo_url)
    if not result.created:
        return UserCreateResponse(message="user already exists", inserted_id=None)
    return UserCreateResponse(message="user created", inserted_id=result.user.id)


@router.put(
    "/profile",
    response_model=ProfileSyncResponse,
    summary="Update profile and refresh artist identity on artworks",
    responses={
        200: {"description": "Profile stored and artworks updated"},
        400: {"description": "Invalid email"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    body: ProfileUpdate,
    service: ProfileSyncService = Depends(get_profile_sync_service),
) -> ProfileSyncResponse:
    """Store display name and photo, then copy them onto every artwork by this user."""
    result = await service.sync_profile(body.email, body.display_name, body.photo_url)
    return ProfileSyncResponse(
        success=True,
        created=result.created,
        updated_artworks=result.updated_artworks,
        artwork_count=result.artwork_count,
    )


@router.get(
    "/{email}",
    response_model=UserResponse,
    summary="Get a user by email",
    responses={404: {"description": "User not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_user(
    request: Request,
    email: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await service.get_by_email(email)
    return UserResponse(
        id=user.id,
        email=user.email,
        display_name=user.display_name,
        photo_url=user.photo_url,
    )
