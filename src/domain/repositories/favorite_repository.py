"""Favorite repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.favorite import Favorite


class IFavoriteRepository(Protocol):
    """Repository interface for Favorite entities."""

    async def get(self, artwork_id: UUID, user_email: str) -> Favorite | None:
        """Get the favorite for an (artwork, user) pair."""
        ...

    async def add_if_absent(self, favorite: Favorite) -> Favorite | None:
        """Insert the favorite unless the pair already exists; None on conflict."""
        ...

    async def list_for_user(self, user_email: str) -> list[Favorite]:
        """Get all favorites of a user, newest first."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a favorite by ID and return whether a row was removed."""
        ...
