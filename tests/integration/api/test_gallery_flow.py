"""End-to-end flow across likes, favorites, profile sync and the leaderboard."""

import pytest
from httpx import AsyncClient


class TestGalleryFlow:
    @pytest.mark.asyncio
    async def test_like_favorite_rename_rank(self, client: AsyncClient, make_artwork):
        artwork = await make_artwork(created_by="a@x.com", artist_name="A", likes=0)
        like_url = f"/api/v1/artworks/{artwork.id}/like"

        first = await client.patch(like_url, json={"user_email": "u@x.com"})
        repeat = await client.patch(like_url, json={"user_email": "u@x.com"})
        second = await client.patch(like_url, json={"user_email": "v@x.com"})

        assert first.json()["likes"] == 1
        assert repeat.json()["already_liked"] is True
        assert second.json()["likes"] == 2

        added = await client.post(
            "/api/v1/favorites",
            json={"artwork_id": str(artwork.id), "user_email": "u@x.com"},
        )
        assert added.json()["success"] is True

        synced = await client.put(
            "/api/v1/users/profile",
            json={"email": "a@x.com", "display_name": "A2", "photo_url": "p2"},
        )
        assert synced.json()["updated_artworks"] == 1

        top = (await client.get("/api/v1/artists/top", params={"limit": 1})).json()
        assert top == [
            {
                "artist_email": "a@x.com",
                "artist_name": "A2",
                "artist_photo": "p2",
                "total_likes": 2,
                "total_artworks": 1,
            }
        ]
