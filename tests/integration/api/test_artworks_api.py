"""Integration tests for Artworks and catalog API."""

from datetime import datetime
from uuid import uuid4

import pytest
from httpx import AsyncClient


class TestArtworkCRUD:
    """Integration tests for Artwork create, read, update and delete."""

    @pytest.mark.asyncio
    async def test_create_artwork(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/artworks",
            json={
                "title": "Harbour at Dusk",
                "created_by": "a@x.com",
                "category": "Painting",
                "artist_name": "Ada",
            },
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["title"] == "Harbour at Dusk"
        assert data["visibility"] == "Public"
        assert data["likes"] == 0
        assert data["artist_name"] == "Ada"

    @pytest.mark.asyncio
    async def test_get_missing_artwork_returns_404(self, client: AsyncClient):
        response = await client.get(f"/api/v1/artworks/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["error_code"] == "ARTWORK_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_update_cannot_touch_likes(self, client: AsyncClient, make_artwork):
        artwork = await make_artwork(likes=4, title="Before")

        response = await client.put(
            f"/api/v1/artworks/{artwork.id}",
            json={"title": "After", "likes": 1000, "visibility": "Private"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["title"] == "After"
        assert data["visibility"] == "Private"
        assert data["likes"] == 4

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, client: AsyncClient, make_artwork):
        artwork = await make_artwork()

        first = await client.delete(f"/api/v1/artworks/{artwork.id}")
        second = await client.delete(f"/api/v1/artworks/{artwork.id}")

        assert first.json() == {"success": True, "deleted": True}
        assert second.json() == {"success": True, "deleted": False}


class TestCatalog:
    """Public listings, categories and search."""

    @pytest.mark.asyncio
    async def test_private_artworks_are_hidden(self, client: AsyncClient, make_artwork):
        await make_artwork(title="Shown")
        await make_artwork(title="Hidden", visibility="Private")

        listing = (await client.get("/api/v1/artworks")).json()

        assert [a["title"] for a in listing["data"]] == ["Shown"]

    @pytest.mark.asyncio
    async def test_latest_returns_six_newest(self, client: AsyncClient, make_artwork):
        for day in range(1, 9):
            await make_artwork(title=f"Day {day}", created_at=datetime(2026, 1, day))

        data = (await client.get("/api/v1/artworks/latest")).json()["data"]

        assert [a["title"] for a in data] == [f"Day {day}" for day in range(8, 2, -1)]

    @pytest.mark.asyncio
    async def test_categories_are_distinct(self, client: AsyncClient, make_artwork):
        await make_artwork(category="Painting")
        await make_artwork(category="Painting")
        await make_artwork(category="Sketch")
        await make_artwork(category="Secret", visibility="Private")

        response = await client.get("/api/v1/categories")

        assert response.json() == ["Painting", "Sketch"]

    @pytest.mark.asyncio
    async def test_by_category(self, client: AsyncClient, make_artwork):
        await make_artwork(title="P", category="Painting")
        await make_artwork(title="S", category="Sketch")

        data = (await client.get("/api/v1/artworks/category/Painting")).json()["data"]

        assert [a["title"] for a in data] == ["P"]

    @pytest.mark.asyncio
    async def test_search_matches_title_and_artist(self, client: AsyncClient, make_artwork):
        await make_artwork(title="Harbour at Dusk", artist_name="Ada")
        await make_artwork(title="Forest", artist_name="Harbourne")
        await make_artwork(title="Meadow", artist_name="Bea")

        body = (await client.get("/api/v1/search", params={"search": "harbour"})).json()

        assert {a["title"] for a in body["data"]} == {"Harbour at Dusk", "Forest"}

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, client: AsyncClient, make_artwork):
        await make_artwork(title="100% Cotton")
        await make_artwork(title="Plain")

        body = (await client.get("/api/v1/search", params={"search": "%"})).json()

        assert [a["title"] for a in body["data"]] == ["100% Cotton"]


class TestMyArtworks:
    """GET /api/v1/my-artworks."""

    @pytest.mark.asyncio
    async def test_includes_private_and_sorts(self, client: AsyncClient, make_artwork):
        await make_artwork(created_by="a@x.com", title="B", likes=1)
        await make_artwork(created_by="a@x.com", title="A", likes=5, visibility="Private")
        await make_artwork(created_by="b@x.com", title="C")

        response = await client.get(
            "/api/v1/my-artworks",
            params={"email": "a@x.com", "sort": "likes", "order": "desc"},
        )

        assert response.status_code == 200
        assert [a["title"] for a in response.json()["data"]] == ["A", "B"]

    @pytest.mark.asyncio
    async def test_unknown_sort_field_returns_400(self, client: AsyncClient):
        response = await client.get(
            "/api/v1/my-artworks",
            params={"email": "a@x.com", "sort": "created_by"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "INVALID_SORT_FIELD"
        assert "likes" in body["details"]["allowed"]

    @pytest.mark.asyncio
    async def test_artist_summary(self, client: AsyncClient, make_artwork):
        await make_artwork(created_by="a@x.com", artist_photo="old.png", created_at=datetime(2026, 1, 1))
        await make_artwork(created_by="a@x.com", artist_photo="new.png", created_at=datetime(2026, 2, 1))

        body = (await client.get("/api/v1/artworks/artist/a@x.com")).json()

        assert body == {"artist_photo": "new.png", "total": 2}
