"""Artwork repository protocol."""

from typing import Any, Protocol
from uuid import UUID

from domain.entities.artwork import ArtistRanking, Artwork


class IArtworkRepository(Protocol):
    """Repository interface for Artwork entities."""

    async def get(self, id: UUID) -> Artwork | None:
        """Get an artwork by ID."""
        ...

    async def create(self, artwork: Artwork) -> Artwork:
        """Create a new artwork."""
        ...

    async def update_fields(self, id: UUID, fields: dict[str, Any]) -> Artwork | None:
        """Set the given columns on an artwork; None if it does not exist."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete an artwork and return whether a row was removed."""
        ...

    async def list_public(self, limit: int) -> list[Artwork]:
        """Get public artworks in insertion order."""
        ...

    async def latest_public(self, limit: int) -> list[Artwork]:
        """Get the newest public artworks."""
        ...

    async def public_categories(self) -> list[str]:
        """Get distinct non-empty categories of public artworks."""
        ...

    async def public_by_category(self, category: str) -> list[Artwork]:
        """Get public artworks in a category."""
        ...

    async def list_by_creator(
        self, email: str, sort: str = "created_at", descending: bool = True
    ) -> list[Artwork]:
        """Get all artworks created by a user, sorted by an allowlisted column."""
        ...

    async def search_public(
        self, text: str | None = None, category: str | None = None
    ) -> list[Artwork]:
        """Case-insensitive search over title and artist name."""
        ...

    async def increment_likes(self, id: UUID, amount: int = 1) -> int | None:
        """Atomically add to the like counter and return the new value."""
        ...

    async def set_artist_identity(
        self, email: str, artist_name: str | None, artist_photo: str | None
    ) -> int:
        """Overwrite the denormalized artist identity on every artwork of a user.

        Returns the number of artworks updated.
        """
        ...

    async def count_by_creator(self, email: str) -> int:
        """Count all artworks created by a user."""
        ...

    async def top_artists(self, limit: int) -> list[ArtistRanking]:
        """Rank artists by total likes over their public artworks."""
        ...
