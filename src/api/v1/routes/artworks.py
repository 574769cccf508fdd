"""Artwork API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from api.v1.dependencies import get_artwork_service
from api.v1.schemas.artwork import (
    ArtistSummaryResponse,
    ArtworkCreate,
    ArtworkDetailResponse,
    ArtworkListResponse,
    ArtworkResponse,
    ArtworkUpdate,
)
from api.v1.schemas.common import DeleteResponse
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.artwork import SORTABLE_FIELDS, Artwork
from domain.services.artwork_service import DEFAULT_CATALOG_LIMIT, ArtworkService

router = APIRouter(prefix="/artworks", tags=["artworks"])


def _to_list(artworks: list[Artwork]) -> ArtworkListResponse:
    return ArtworkListResponse(
        data=[ArtworkResponse.model_validate(artwork) for artwork in artworks],
        total=len(artworks),
    )


@router.get(
    "",
    response_model=ArtworkListResponse,
    summary="List public artworks",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_artworks(
    request: Request,
    limit: int = Query(DEFAULT_CATALOG_LIMIT, ge=1, le=500),
    service: ArtworkService = Depends(get_artwork_service),
) -> ArtworkListResponse:
    return _to_list(await service.list_public(limit))


@router.get(
    "/latest",
    response_model=ArtworkListResponse,
    summary="Newest public artworks",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def latest_artworks(
    request: Request,
    service: ArtworkService = Depends(get_artwork_service),
) -> ArtworkListResponse:
    """The six most recently published public artworks."""
    return _to_list(await service.latest())


@router.get(
    "/category/{category}",
    response_model=ArtworkListResponse,
    summary="Public artworks in a category",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def artworks_by_category(
    request: Request,
    category: str,
    service: ArtworkService = Depends(get_artwork_service),
) -> ArtworkListResponse:
    return _to_list(await service.by_category(category))


@router.get(
    "/artist/{email}",
    response_model=ArtistSummaryResponse,
    summary="Artist photo and artwork count",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def artist_summary(
    request: Request,
    email: str,
    service: ArtworkService = Depends(get_artwork_service),
) -> ArtistSummaryResponse:
    summary = await service.artist_summary(email)
    return ArtistSummaryResponse(artist_photo=summary.artist_photo, total=summary.total)


@router.get(
    "/{artwork_id}",
    response_model=ArtworkDetailResponse,
    summary="Get an artwork",
    responses={404: {"description": "Artwork not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_artwork(
    request: Request,
    artwork_id: UUID,
    service: ArtworkService = Depends(get_artwork_service),
) -> ArtworkDetailResponse:
    artwork = await service.get(artwork_id)
    return ArtworkDetailResponse(data=ArtworkResponse.model_validate(artwork))


@router.post(
    "",
    response_model=ArtworkDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Publish an artwork",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_artwork(
    request: Request,
    body: ArtworkCreate,
    service: ArtworkService = Depends(get_artwork_service),
) -> ArtworkDetailResponse:
    """Create an artwork. The artist name and photo are stored as sent."""
    artwork = await service.create(**body.model_dump())
    return ArtworkDetailResponse(data=ArtworkResponse.model_validate(artwork))


@router.put(
    "/{artwork_id}",
    response_model=ArtworkDetailResponse,
    summary="Update an artwork",
    responses={404: {"description": "Artwork not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_artwork(
    request: Request,
    artwork_id: UUID,
    body: ArtworkUpdate,
    service: ArtworkService = Depends(get_artwork_service),
) -> ArtworkDetailResponse:
    artwork = await service.update(artwork_id, **body.model_dump(exclude_unset=True))
    return ArtworkDetailResponse(data=ArtworkResponse.model_validate(artwork))


@router.delete(
    "/{artwork_id}",
    response_model=DeleteResponse,
    summary="Delete an artwork",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_artwork(
    request: Request,
    artwork_id: UUID,
    service: ArtworkService = Depends(get_artwork_service),
) -> DeleteResponse:
    deleted = await service.delete(artwork_id)
    return DeleteResponse(success=True, deleted=deleted)


# Catalog endpoints outside the /artworks prefix
catalog_router = APIRouter(tags=["catalog"])


@catalog_router.get(
    "/categories",
    response_model=list[str],
    summary="Categories in use by public artworks",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_categories(
    request: Request,
    service: ArtworkService = Depends(get_artwork_service),
) -> list[str]:
    return await service.categories()


@catalog_router.get(
    "/search",
    response_model=ArtworkListResponse,
    summary="Search public artworks",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def search_artworks(
    request: Request,
    search: str | None = Query(None, max_length=100),
    category: str | None = Query(None),
    service: ArtworkService = Depends(get_artwork_service),
) -> ArtworkListResponse:
    """Match ``search`` against title and artist name, optionally within a category."""
    return _to_list(await service.search(search, category))


@catalog_router.get(
    "/my-artworks",
    response_model=ArtworkListResponse,
    summary="All artworks of a user",
    responses={400: {"description": "Unsupported sort field"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def my_artworks(
    request: Request,
    email: str = Query(..., min_length=1),
    sort: str = Query("created_at", description=f"One of: {', '.join(SORTABLE_FIELDS)}"),
    order: str = Query("desc", pattern="^(asc|desc)$"),
    service: ArtworkService = Depends(get_artwork_service),
) -> ArtworkListResponse:
    return _to_list(await service.list_for_artist(email, sort=sort, order=order))
