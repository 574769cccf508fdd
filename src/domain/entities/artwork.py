"""Artwork domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4


class Visibility(StrEnum):
    """Catalog visibility of an artwork."""

    PUBLIC = "Public"
    PRIVATE = "Private"


# Fields an owner may change through a plain artwork update. The like
# counter and artist identity are owned by LikeService and ProfileSyncService.
EDITABLE_FIELDS = frozenset({"title", "category", "visibility", "image_url", "description"})

SORTABLE_FIELDS = ("created_at", "updated_at", "title", "likes", "category")


@dataclass
class Artwork:
    """Domain entity for an Artwork."""

    title: str
    created_by: str
    id: UUID = field(default_factory=uuid4)
    category: str | None = None
    visibility: Visibility = Visibility.PUBLIC
    image_url: str | None = None
    description: str | None = None
    artist_name: str | None = None
    artist_photo: str | None = None
    likes: int = 0
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Coerce visibility strings and keep updated_at at or after created_at."""
        self.visibility = Visibility(self.visibility)
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    @property
    def is_public(self) -> bool:
        return self.visibility == Visibility.PUBLIC


@dataclass(frozen=True, slots=True)
class ArtistRanking:
    """Read-only leaderboard row for one artist."""

    artist_email: str
    artist_name: str | None
    artist_photo: str | None
    total_likes: int
    total_artworks: int


@dataclass(frozen=True, slots=True)
class ArtistSummary:
    """Photo and artwork count shown on an artist's page."""

    artist_photo: str
    total: int
