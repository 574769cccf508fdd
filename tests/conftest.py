"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from datetime import datetime
from pathlib import Path
from typing import Any

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.database.models import ArtworkModel
from infrastructure.database.session import Database

# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """A fresh in-memory database with all tables, per test."""
    db = Database(TEST_DATABASE_URL, poolclass=StaticPool)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient, None]:
    """Async test client bound to the test database."""
    from main import create_app

    app = create_app(database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def make_artwork(database: Database) -> Any:
    """Insert an artwork row directly, bypassing the API.

    Lets tests pin ``created_at`` and ``likes``, which the API does not accept.
    """

    async def _make(**overrides: Any) -> ArtworkModel:
        values: dict[str, Any] = {
            "title": "Untitled",
            "created_by": "artist@example.com",
            "visibility": "Public",
            "likes": 0,
            "created_at": datetime(2026, 1, 1, 12, 0, 0),
            "updated_at": datetime(2026, 1, 1, 12, 0, 0),
        }
        values.update(overrides)
        model = ArtworkModel(**values)
        async with database.session_factory() as session:
            session.add(model)
            await session.commit()
        return model

    return _make
