"""Like service layer with business logic."""

from typing import Callable
from uuid import UUID

import structlog

from core.exceptions import ArtworkNotFoundError, store_operation
from domain.entities.like import Like, LikeResult
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.validation import normalize_email, require_email

logger = structlog.get_logger()


class LikeService:
    """Records likes and keeps the per-artwork like counter in step.

    The like row and the counter increment are written in one transaction,
    so once it commits the counter equals the number of like rows.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    @store_operation("like artwork")
    async def record_like(self, artwork_id: UUID, user_email: str) -> LikeResult:
        """Like an artwork once per user; replays are a no-op."""
        user_email = require_email(user_email)

        async with self._uow_factory() as uow:
            artwork = await uow.artworks.get(artwork_id)
            if not artwork:
                raise ArtworkNotFoundError(str(artwork_id))

            like = await uow.likes.add_if_absent(
                Like(artwork_id=artwork_id, user_email=user_email)
            )
            if like is None:
                logger.info(
                    "like_duplicate_ignored",
                    artwork_id=str(artwork_id),
                    user_email=user_email,
                )
                return LikeResult(success=False, already_liked=True, likes=artwork.likes)

            likes = await uow.artworks.increment_likes(artwork_id)
            if likes is None:
                # Artwork deleted between lookup and increment
                await uow.rollback()
                raise ArtworkNotFoundError(str(artwork_id))

            await uow.commit()

        logger.info(
            "like_recorded",
            artwork_id=str(artwork_id),
            user_email=user_email,
            likes=likes,
        )
        return LikeResult(success=True, likes=likes)

    @store_operation("check like")
    async def has_liked(self, artwork_id: UUID, user_email: str) -> bool:
        """Whether the user has liked the artwork. Does not require the artwork to exist."""
        async with self._uow_factory() as uow:
            return await uow.likes.get(artwork_id, normalize_email(user_email)) is not None
