"""Like API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from api.v1.dependencies import get_like_service
from api.v1.schemas.like import LikeCheckResponse, LikeCreate, LikeResultResponse
from core.rate_limit import CHECK_LIMIT, WRITE_LIMIT, limiter
from domain.services.like_service import LikeService

router = APIRouter(tags=["likes"])


@router.patch(
    "/artworks/{artwork_id}/like",
    response_model=LikeResultResponse,
    summary="Like an artwork",
    responses={
        200: {"description": "Like recorded, or already present"},
        404: {"description": "Artwork not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def like_artwork(
    request: Request,
    artwork_id: UUID,
    body: LikeCreate,
    service: LikeService = Depends(get_like_service),
) -> LikeResultResponse:
    """Like an artwork. Liking twice leaves the counter unchanged."""
    result = await service.record_like(artwork_id, body.user_email)
    return LikeResultResponse(
        success=result.success,
        already_liked=result.already_liked,
        message="Already liked" if result.already_liked else None,
        likes=result.likes,
    )


@router.get(
    "/likes/check",
    response_model=LikeCheckResponse,
    summary="Check whether a user liked an artwork",
)
@limiter.limit(CHECK_LIMIT)  # type: ignore[untyped-decorator]
async def check_liked(
    request: Request,
    artwork_id: UUID = Query(...),
    user_email: str = Query(...),
    service: LikeService = Depends(get_like_service),
) -> LikeCheckResponse:
    return LikeCheckResponse(has_liked=await service.has_liked(artwork_id, user_email))
