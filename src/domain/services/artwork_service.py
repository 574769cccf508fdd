"""Artwork service layer: catalog reads and owner CRUD."""

from typing import Any, Callable
from uuid import UUID

import structlog

from core.exceptions import ArtworkNotFoundError, InvalidSortFieldError, store_operation
from domain.entities.artwork import (
    EDITABLE_FIELDS,
    SORTABLE_FIELDS,
    ArtistSummary,
    Artwork,
    Visibility,
)
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.validation import normalize_email, require_email

logger = structlog.get_logger()

DEFAULT_CATALOG_LIMIT = 100
LATEST_LIMIT = 6


class ArtworkService:
    """Service layer for Artwork business logic.

    The like counter and the artist identity columns are not writable here;
    they belong to LikeService and ProfileSyncService.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    @store_operation("create artwork")
    async def create(
        self,
        created_by: str,
        title: str,
        category: str | None = None,
        visibility: Visibility = Visibility.PUBLIC,
        image_url: str | None = None,
        description: str | None = None,
        artist_name: str | None = None,
        artist_photo: str | None = None,
    ) -> Artwork:
        """Create an artwork; artist identity is copied from the caller as given."""
        created_by = require_email(created_by)
        artwork = Artwork(
            title=title,
            created_by=created_by,
            category=category,
            visibility=visibility,
            image_url=image_url,
            description=description,
            artist_name=artist_name,
            artist_photo=artist_photo,
        )

        async with self._uow_factory() as uow:
            created = await uow.artworks.create(artwork)
            await uow.commit()

        logger.info("artwork_created", artwork_id=str(created.id), created_by=created_by)
        return created  # type: ignore[no-any-return]

    @store_operation("fetch artwork")
    async def get(self, artwork_id: UUID) -> Artwork:
        async with self._uow_factory() as uow:
            artwork = await uow.artworks.get(artwork_id)
            if not artwork:
                raise ArtworkNotFoundError(str(artwork_id))
            return artwork

    @store_operation("update artwork")
    async def update(self, artwork_id: UUID, **fields: Any) -> Artwork:
        """Update editable fields; anything else passed in is ignored."""
        changes = {
            name: value
            for name, value in fields.items()
            if name in EDITABLE_FIELDS and value is not None
        }
        if "visibility" in changes:
            changes["visibility"] = Visibility(changes["visibility"]).value

        async with self._uow_factory() as uow:
            if not changes:
                artwork = await uow.artworks.get(artwork_id)
            else:
                artwork = await uow.artworks.update_fields(artwork_id, changes)
            if not artwork:
                raise ArtworkNotFoundError(str(artwork_id))
            await uow.commit()
            return artwork

    @store_operation("delete artwork")
    async def delete(self, artwork_id: UUID) -> bool:
        """Delete an artwork. Deleting a missing ID is a no-op."""
        async with self._uow_factory() as uow:
            deleted = await uow.artworks.delete(artwork_id)
            await uow.commit()

        logger.info("artwork_deleted", artwork_id=str(artwork_id), deleted=deleted)
        return deleted  # type: ignore[no-any-return]

    @store_operation("fetch artworks")
    async def list_public(self, limit: int = DEFAULT_CATALOG_LIMIT) -> list[Artwork]:
        async with self._uow_factory() as uow:
            return await uow.artworks.list_public(limit)  # type: ignore[no-any-return]

    @store_operation("fetch latest artworks")
    async def latest(self, limit: int = LATEST_LIMIT) -> list[Artwork]:
        async with self._uow_factory() as uow:
            return await uow.artworks.latest_public(limit)  # type: ignore[no-any-return]

    @store_operation("fetch categories")
    async def categories(self) -> list[str]:
        async with self._uow_factory() as uow:
            return await uow.artworks.public_categories()  # type: ignore[no-any-return]

    @store_operation("fetch artworks by category")
    async def by_category(self, category: str) -> list[Artwork]:
        async with self._uow_factory() as uow:
            return await uow.artworks.public_by_category(category)  # type: ignore[no-any-return]

    @store_operation("fetch user artworks")
    async def list_for_artist(
        self, email: str, sort: str = "created_at", order: str = "desc"
    ) -> list[Artwork]:
        """List every artwork of a user, public or not.

        ``sort`` is restricted to ``SORTABLE_FIELDS``; ``order`` is ``asc``
        or anything else for descending.
        """
        if sort not in SORTABLE_FIELDS:
            raise InvalidSortFieldError(sort, list(SORTABLE_FIELDS))

        async with self._uow_factory() as uow:
            return await uow.artworks.list_by_creator(  # type: ignore[no-any-return]
                normalize_email(email), sort=sort, descending=order != "asc"
            )

    @store_operation("fetch artist info")
    async def artist_summary(self, email: str) -> ArtistSummary:
        """Photo from the artist's newest artwork, and how many artworks they have."""
        async with self._uow_factory() as uow:
            artworks = await uow.artworks.list_by_creator(
                normalize_email(email), sort="created_at"
            )
        photo = artworks[0].artist_photo if artworks else None
        return ArtistSummary(artist_photo=photo or "", total=len(artworks))

    @store_operation("search artworks")
    async def search(
        self, text: str | None = None, category: str | None = None
    ) -> list[Artwork]:
        async with self._uow_factory() as uow:
            return await uow.artworks.search_public(  # type: ignore[no-any-return]
                text=(text or "").strip() or None,
                category=category or None,
            )
