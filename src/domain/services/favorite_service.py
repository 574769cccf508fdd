"""Favorite service layer with business logic."""

from typing import Any, Callable
from uuid import UUID

import structlog

from core.exceptions import store_operation
from domain.entities.favorite import Favorite, FavoriteResult
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.validation import normalize_email, require_email

logger = structlog.get_logger()


class FavoriteService:
    """Service layer for user bookmarks.

    Favorites are independent of likes and of artwork state: adding one does
    not check that the artwork exists, and listing returns the stored rows
    without joining artwork data.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    @store_operation("add favorite")
    async def add_favorite(
        self,
        artwork_id: UUID,
        user_email: str,
        payload: dict[str, Any] | None = None,
    ) -> FavoriteResult:
        """Bookmark an artwork; an existing bookmark is reported, not raised."""
        user_email = require_email(user_email)
        favorite = Favorite(
            artwork_id=artwork_id,
            user_email=user_email,
            extra=dict(payload or {}),
        )

        async with self._uow_factory() as uow:
            created = await uow.favorites.add_if_absent(favorite)
            if created is None:
                logger.info(
                    "favorite_duplicate_ignored",
                    artwork_id=str(artwork_id),
                    user_email=user_email,
                )
                return FavoriteResult(success=False, already_exists=True)
            await uow.commit()

        logger.info(
            "favorite_added",
            favorite_id=str(created.id),
            artwork_id=str(artwork_id),
            user_email=user_email,
        )
        return FavoriteResult(success=True, favorite=created)

    @store_operation("fetch favorites")
    async def list_favorites(self, user_email: str) -> list[Favorite]:
        """Get all favorites of a user, newest first."""
        async with self._uow_factory() as uow:
            return await uow.favorites.list_for_user(  # type: ignore[no-any-return]
                normalize_email(user_email)
            )

    @store_operation("check favorite")
    async def is_favorited(self, artwork_id: UUID, user_email: str) -> bool:
        async with self._uow_factory() as uow:
            return await uow.favorites.get(artwork_id, normalize_email(user_email)) is not None

    @store_operation("remove favorite")
    async def remove_favorite(self, favorite_id: UUID) -> bool:
        """Delete a favorite by ID. Returns whether a row existed; a missing ID is fine."""
        async with self._uow_factory() as uow:
            deleted = await uow.favorites.delete(favorite_id)
            await uow.commit()

        logger.info("favorite_removed", favorite_id=str(favorite_id), deleted=deleted)
        return deleted  # type: ignore[no-any-return]
