"""Like domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Like:
    """One user's like on one artwork. Created once, never mutated."""

    artwork_id: UUID
    user_email: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True, slots=True)
class LikeResult:
    """Outcome of recording a like.

    ``already_liked`` marks the idempotent replay case, which is a normal
    outcome rather than an error.
    """

    success: bool
    already_liked: bool = False
    likes: int | None = None
