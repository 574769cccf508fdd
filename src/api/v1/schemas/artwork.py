"""Pydantic schemas for Artwork API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.artwork import Visibility


class ArtworkCreate(BaseModel):
    """Schema for creating an Artwork."""

    title: str = Field(..., min_length=1, max_length=255)
    created_by: str = Field(..., min_length=1, max_length=255)
    category: str | None = Field(None, max_length=100)
    visibility: Visibility = Visibility.PUBLIC
    image_url: str | None = Field(None, max_length=500)
    description: str | None = None
    artist_name: str | None = Field(None, max_length=100)
    artist_photo: str | None = Field(None, max_length=500)


class ArtworkUpdate(BaseModel):
    """Schema for updating an Artwork. Likes and artist identity are not editable."""

    title: str | None = Field(None, min_length=1, max_length=255)
    category: str | None = Field(None, max_length=100)
    visibility: Visibility | None = None
    image_url: str | None = Field(None, max_length=500)
    description: str | None = None


class ArtworkResponse(BaseModel):
    """Schema for Artwork response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "0b9e8d7c-6a5f-4e3d-2c1b-0a9f8e7d6c5b",
                "title": "Harbour at Dusk",
                "category": "Painting",
                "visibility": "Public",
                "image_url": "https://cdn.example.com/harbour.png",
                "description": None,
                "created_by": "artist@example.com",
                "artist_name": "A. Painter",
                "artist_photo": "https://cdn.example.com/a.png",
                "likes": 12,
                "created_at": "2026-01-28T10:00:00",
                "updated_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    title: str
    category: str | None = None
    visibility: Visibility
    image_url: str | None = None
    description: str | None = None
    created_by: str
    artist_name: str | None = None
    artist_photo: str | None = None
    likes: int = 0
    created_at: datetime
    updated_at: datetime


class ArtworkListResponse(BaseModel):
    """Schema for list of Artworks."""

    data: list[ArtworkResponse]
    total: int


class ArtworkDetailResponse(BaseModel):
    """Schema for single Artwork."""

    data: ArtworkResponse


class ArtistSummaryResponse(BaseModel):
    """Schema for artist page header."""

    artist_photo: str
    total: int


class ArtistRankingResponse(BaseModel):
    """Schema for one leaderboard row."""

    model_config = ConfigDict(from_attributes=True)

    artist_email: str
    artist_name: str | None = None
    artist_photo: str | None = None
    total_likes: int
    total_artworks: int
