"""Pydantic schemas for Like API."""

from pydantic import BaseModel, ConfigDict, Field


class LikeCreate(BaseModel):
    """Schema for liking an artwork."""

    user_email: str = Field(..., min_length=1, max_length=255)


class LikeResultResponse(BaseModel):
    """Schema for the outcome of a like.

    ``success`` is False with ``already_liked`` set when the user had liked
    the artwork before; that is not an error.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "already_liked": False,
                "message": None,
                "likes": 12,
            }
        },
    )

    success: bool
    already_liked: bool = False
    message: str | None = None
    likes: int | None = None


class LikeCheckResponse(BaseModel):
    """Schema for like lookup."""

    has_liked: bool
