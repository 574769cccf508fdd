"""Profile sync service: keeps denormalized artist identity current."""

from typing import Callable

import structlog

from core.exceptions import store_operation
from domain.entities.user import ProfileSyncResult
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.validation import require_email

logger = structlog.get_logger()


class ProfileSyncService:
    """Propagates a user's display name and photo onto their artworks."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    @store_operation("update profile")
    async def sync_profile(
        self,
        email: str,
        display_name: str | None,
        photo_url: str | None,
    ) -> ProfileSyncResult:
        """Upsert the profile, then rewrite artist identity on every artwork by the user.

        Both writes commit together. An artwork inserted by a concurrent
        request after the fan-out statement keeps whatever identity it was
        created with until the next sync.

        Args:
            email: The user's email (natural key).
            display_name: New display name, copied to ``artist_name``.
            photo_url: New photo URL, copied to ``artist_photo``.

        Returns:
            The stored user, whether it was created, the number of artworks
            rewritten and the user's total artwork count.
        """
        email = require_email(email)

        async with self._uow_factory() as uow:
            user, created = await uow.users.upsert_profile(email, display_name, photo_url)
            updated = await uow.artworks.set_artist_identity(email, display_name, photo_url)
            artwork_count = await uow.artworks.count_by_creator(email)
            await uow.commit()

        logger.info(
            "profile_synced",
            email=email,
            created=created,
            updated_artworks=updated,
            artwork_count=artwork_count,
        )
        return ProfileSyncResult(
            user=user,
            created=created,
            updated_artworks=updated,
            artwork_count=artwork_count,
        )
