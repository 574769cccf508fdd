"""Favorite API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from api.v1.dependencies import get_favorite_service
from api.v1.schemas.common import DeleteResponse
from api.v1.schemas.favorite import (
    FavoriteCheckResponse,
    FavoriteCreate,
    FavoriteListResponse,
    FavoriteResponse,
    FavoriteResultResponse,
)
from core.rate_limit import CHECK_LIMIT, READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.favorite import Favorite
from domain.services.favorite_service import FavoriteService

router = APIRouter(prefix="/favorites", tags=["favorites"])


def _to_response(favorite: Favorite) -> FavoriteResponse:
    return FavoriteResponse(
        id=favorite.id,
        artwork_id=favorite.artwork_id,
        user_email=favorite.user_email,
        created_at=favorite.created_at,
        **favorite.extra,
    )


@router.post(
    "",
    response_model=FavoriteResultResponse,
    summary="Add a favorite",
    responses={
        200: {"description": "Favorite added, or already present"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_favorite(
    request: Request,
    body: FavoriteCreate,
    service: FavoriteService = Depends(get_favorite_service),
) -> FavoriteResultResponse:
    """Bookmark an artwork. Extra body fields are stored as sent."""
    result = await service.add_favorite(body.artwork_id, body.user_email, body.extra_fields)
    if result.already_exists:
        return FavoriteResultResponse(
            success=False,
            already_exists=True,
            message="Already in favorites",
        )
    return FavoriteResultResponse(
        success=True,
        favorite=_to_response(result.favorite) if result.favorite else None,
    )


@router.get(
    "",
    response_model=FavoriteListResponse,
    summary="List a user's favorites",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_favorites(
    request: Request,
    email: str = Query(..., min_length=1),
    service: FavoriteService = Depends(get_favorite_service),
) -> FavoriteListResponse:
    favorites = await service.list_favorites(email)
    return FavoriteListResponse(
        favorites=[_to_response(favorite) for favorite in favorites],
        total=len(favorites),
    )


@router.get(
    "/check",
    response_model=FavoriteCheckResponse,
    summary="Check whether a user favorited an artwork",
)
@limiter.limit(CHECK_LIMIT)  # type: ignore[untyped-decorator]
async def check_favorited(
    request: Request,
    artwork_id: UUID = Query(...),
    user_email: str = Query(...),
    service: FavoriteService = Depends(get_favorite_service),
) -> FavoriteCheckResponse:
    return FavoriteCheckResponse(
        is_favorited=await service.is_favorited(artwork_id, user_email)
    )


@router.delete(
    "/{favorite_id}",
    response_model=DeleteResponse,
    summary="Remove a favorite",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_favorite(
    request: Request,
    favorite_id: UUID,
    service: FavoriteService = Depends(get_favorite_service),
) -> DeleteResponse:
    """Remove a favorite. Removing one that does not exist still succeeds."""
    deleted = await service.remove_favorite(favorite_id)
    return DeleteResponse(success=True, deleted=deleted)
