"""Like repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.like import Like


class ILikeRepository(Protocol):
    """Repository interface for Like entities."""

    async def get(self, artwork_id: UUID, user_email: str) -> Like | None:
        """Get the like for an (artwork, user) pair."""
        ...

    async def add_if_absent(self, like: Like) -> Like | None:
        """Insert the like unless the pair already exists.

        Single conditional write backed by the (artwork_id, user_email)
        unique constraint. Returns None when nothing was inserted.
        """
        ...

    async def count_for_artwork(self, artwork_id: UUID) -> int:
        """Count likes referencing an artwork."""
        ...
