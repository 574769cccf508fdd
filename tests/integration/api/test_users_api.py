"""Integration tests for Users API."""

import pytest
from httpx import AsyncClient


class TestRegisterUser:
    """POST /api/v1/users."""

    @pytest.mark.asyncio
    async def test_creates_user(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/users",
            json={"email": "ada@example.com", "display_name": "Ada"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "user created"
        assert body["inserted_id"] is not None

    @pytest.mark.asyncio
    async def test_existing_user_is_not_overwritten(self, client: AsyncClient):
        await client.post(
            "/api/v1/users", json={"email": "ada@example.com", "display_name": "Ada"}
        )
        response = await client.post(
            "/api/v1/users", json={"email": "ada@example.com", "display_name": "Other"}
        )

        assert response.json() == {"message": "user already exists", "inserted_id": None}
        user = await client.get("/api/v1/users/ada@example.com")
        assert user.json()["display_name"] == "Ada"

    @pytest.mark.asyncio
    async def test_invalid_email_returns_400(self, client: AsyncClient):
        response = await client.post("/api/v1/users", json={"email": "nope"})

        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_EMAIL"

    @pytest.mark.asyncio
    async def test_unknown_user_returns_404(self, client: AsyncClient):
        response = await client.get("/api/v1/users/ghost@example.com")

        assert response.status_code == 404
        assert response.json()["error_code"] == "USER_NOT_FOUND"


class TestUpdateProfile:
    """PUT /api/v1/users/profile."""

    @pytest.mark.asyncio
    async def test_profile_change_reaches_every_artwork(
        self, client: AsyncClient, make_artwork
    ):
        mine = [
            await make_artwork(created_by="a@x.com", artist_name="Old", visibility=visibility)
            for visibility in ("Public", "Public", "Private")
        ]
        other = await make_artwork(created_by="b@x.com", artist_name="Bea")

        response = await client.put(
            "/api/v1/users/profile",
            json={"email": "a@x.com", "display_name": "Ada", "photo_url": "ada.png"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "created": True,
            "updated_artworks": 3,
            "artwork_count": 3,
        }
        for artwork in mine:
            data = (await client.get(f"/api/v1/artworks/{artwork.id}")).json()["data"]
            assert data["artist_name"] == "Ada"
            assert data["artist_photo"] == "ada.png"
        untouched = (await client.get(f"/api/v1/artworks/{other.id}")).json()["data"]
        assert untouched["artist_name"] == "Bea"

        user = (await client.get("/api/v1/users/a@x.com")).json()
        assert user["display_name"] == "Ada"
        assert user["photo_url"] == "ada.png"

    @pytest.mark.asyncio
    async def test_second_sync_updates_existing_user(self, client: AsyncClient):
        await client.put(
            "/api/v1/users/profile", json={"email": "a@x.com", "display_name": "First"}
        )
        response = await client.put(
            "/api/v1/users/profile", json={"email": "a@x.com", "display_name": "Second"}
        )

        assert response.json()["created"] is False
        user = (await client.get("/api/v1/users/a@x.com")).json()
        assert user["display_name"] == "Second"

    @pytest.mark.asyncio
    async def test_user_without_artworks(self, client: AsyncClient):
        response = await client.put(
            "/api/v1/users/profile", json={"email": "new@x.com", "display_name": "New"}
        )

        body = response.json()
        assert body["updated_artworks"] == 0
        assert body["artwork_count"] == 0

    @pytest.mark.asyncio
    async def test_blank_email_writes_nothing(self, client: AsyncClient, make_artwork):
        artwork = await make_artwork(created_by="a@x.com", artist_name="Old")

        response = await client.put(
            "/api/v1/users/profile", json={"email": " ", "display_name": "Ada"}
        )

        assert response.status_code == 400
        data = (await client.get(f"/api/v1/artworks/{artwork.id}")).json()["data"]
        assert data["artist_name"] == "Old"

    @pytest.mark.asyncio
    async def test_camel_case_body_reaches_artworks(self, client: AsyncClient, make_artwork):
        artwork = await make_artwork(created_by="a@x.com", artist_name="Old")

        response = await client.put(
            "/api/v1/users/profile",
            json={"email": "a@x.com", "displayName": "New", "photoURL": "p.png"},
        )

        assert response.status_code == 200
        data = (await client.get(f"/api/v1/artworks/{artwork.id}")).json()["data"]
        assert data["artist_name"] == "New"
        assert data["artist_photo"] == "p.png"

    @pytest.mark.asyncio
    async def test_unknown_field_is_rejected_without_writing(
        self, client: AsyncClient, make_artwork
    ):
        artwork = await make_artwork(created_by="a@x.com", artist_name="Old")

        response = await client.put(
            "/api/v1/users/profile",
            json={"email": "a@x.com", "displayname": "Typo"},
        )

        assert response.status_code == 422
        data = (await client.get(f"/api/v1/artworks/{artwork.id}")).json()["data"]
        assert data["artist_name"] == "Old"

    @pytest.mark.asyncio
    async def test_padded_email_finds_user(self, client: AsyncClient):
        await client.put(
            "/api/v1/users/profile", json={"email": " a@x.com ", "display_name": "Ada"}
        )

        response = await client.get("/api/v1/users/a@x.com")

        assert response.status_code == 200
        assert response.json()["email"] == "a@x.com"
