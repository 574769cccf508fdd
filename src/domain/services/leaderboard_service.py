"""Top artist leaderboard."""

from typing import Callable

from core.exceptions import store_operation
from domain.entities.artwork import ArtistRanking
from domain.repositories.unit_of_work import IUnitOfWork

DEFAULT_TOP_ARTISTS = 3


class TopArtistAggregator:
    """Ranks artists by the likes on their public artworks.

    Computed on every call from the artworks table; nothing is materialized.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    @store_operation("fetch top artists")
    async def top_artists(self, limit: int = DEFAULT_TOP_ARTISTS) -> list[ArtistRanking]:
        """Get the ``limit`` artists with the most total likes.

        Each artist's name and photo are taken from their newest public
        artwork. Equal totals are ordered by artist email.
        """
        if limit < 1:
            return []
        async with self._uow_factory() as uow:
            return await uow.artworks.top_artists(limit)  # type: ignore[no-any-return]
