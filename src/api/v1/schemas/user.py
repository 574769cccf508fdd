"""Pydantic schemas for User API."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Schema for registering a user.

    Accepts ``displayName``/``photoURL`` as sent by the web client, or the
    snake_case field names.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(..., max_length=255)
    display_name: str | None = Field(None, alias="displayName", max_length=100)
    photo_url: str | None = Field(None, alias="photoURL", max_length=500)


class UserCreateResponse(BaseModel):
    """Schema for registration outcome; ``inserted_id`` is null for an existing user."""

    message: str
    inserted_id: UUID | None = None


class ProfileUpdate(BaseModel):
    """Schema for a profile sync.

    Unknown keys are rejected: a misspelled name field would otherwise sync
    as null onto every artwork of the user.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    email: str = Field(..., min_length=1, max_length=255)
    display_name: str | None = Field(None, alias="displayName", max_length=100)
    photo_url: str | None = Field(None, alias="photoURL", max_length=500)


class ProfileSyncResponse(BaseModel):
    """Schema for profile sync outcome."""

    success: bool = True
    created: bool
    updated_artworks: int
    artwork_count: int


class UserResponse(BaseModel):
    """Schema for User response."""

    id: UUID
    email: str
    display_name: str | None = None
    photo_url: str | None = None
