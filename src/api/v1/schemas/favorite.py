"""Pydantic schemas for Favorite API."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class FavoriteCreate(BaseModel):
    """Schema for adding a favorite.

    Any additional fields (title, image, artist name, ...) are accepted and
    stored verbatim.
    """

    model_config = ConfigDict(extra="allow")

    artwork_id: UUID
    user_email: str = Field(..., min_length=1, max_length=255)

    @property
    def extra_fields(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class FavoriteResponse(BaseModel):
    """Schema for a stored favorite, with its extra fields flattened in."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "id": "6f1c9a2e-3b7d-4e0a-9c55-1d2b3c4d5e6f",
                "artwork_id": "0b9e8d7c-6a5f-4e3d-2c1b-0a9f8e7d6c5b",
                "user_email": "viewer@example.com",
                "created_at": "2026-01-28T10:00:00",
                "title": "Harbour at Dusk",
            }
        },
    )

    id: UUID
    artwork_id: UUID
    user_email: str
    created_at: datetime


class FavoriteResultResponse(BaseModel):
    """Schema for the outcome of adding a favorite."""

    success: bool
    already_exists: bool = False
    message: str | None = None
    favorite: FavoriteResponse | None = None


class FavoriteListResponse(BaseModel):
    """Schema for a user's favorites."""

    favorites: list[FavoriteResponse]
    total: int


class FavoriteCheckResponse(BaseModel):
    """Schema for favorite lookup."""

    is_favorited: bool
