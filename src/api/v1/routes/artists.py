"""Artist leaderboard routes."""

from fastapi import APIRouter, Depends, Query, Request

from api.v1.dependencies import get_top_artist_aggregator
from api.v1.schemas.artwork import ArtistRankingResponse
from core.config import settings
from core.rate_limit import READ_LIMIT, limiter
from domain.services.leaderboard_service import DEFAULT_TOP_ARTISTS, TopArtistAggregator

router = APIRouter(prefix="/artists", tags=["artists"])


@router.get(
    "/top",
    response_model=list[ArtistRankingResponse],
    summary="Top artists by likes",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def top_artists(
    request: Request,
    limit: int = Query(DEFAULT_TOP_ARTISTS, ge=1, le=settings.top_artists_max_limit),
    aggregator: TopArtistAggregator = Depends(get_top_artist_aggregator),
) -> list[ArtistRankingResponse]:
    """Artists ranked by total likes on their public artworks."""
    rankings = await aggregator.top_artists(limit)
    return [ArtistRankingResponse.model_validate(ranking) for ranking in rankings]
