"""Favorite domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

# Columns that caller-supplied extra fields can never override
RESERVED_FIELDS = frozenset({"id", "artwork_id", "user_email", "created_at"})


@dataclass
class Favorite:
    """A user's bookmark of an artwork.

    ``extra`` holds whatever additional fields the client sent (title,
    thumbnail, ...); they are stored verbatim and never interpreted.
    """

    artwork_id: UUID
    user_email: str
    id: UUID = field(default_factory=uuid4)
    extra: dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        self.extra = {k: v for k, v in self.extra.items() if k not in RESERVED_FIELDS}


@dataclass(frozen=True, slots=True)
class FavoriteResult:
    """Outcome of adding a favorite; ``already_exists`` is a soft conflict."""

    success: bool
    already_exists: bool = False
    favorite: Favorite | None = None
