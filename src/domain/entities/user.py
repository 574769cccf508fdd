"""User domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class User:
    """Domain entity for a user profile.

    The profile is the canonical source of an artist's display identity;
    artworks carry a denormalized copy refreshed by profile sync.
    """

    email: str
    id: UUID = field(default_factory=uuid4)
    display_name: str | None = None
    photo_url: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Normalize email and keep updated_at at or after created_at."""
        self.email = self.email.strip()
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at


@dataclass(frozen=True, slots=True)
class RegistrationResult:
    """Outcome of registering a user; ``created`` is False when the email existed."""

    user: User
    created: bool


@dataclass(frozen=True, slots=True)
class ProfileSyncResult:
    """Outcome of a profile sync and its artwork fan-out."""

    user: User
    created: bool
    updated_artworks: int
    artwork_count: int
