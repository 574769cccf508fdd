"""SQLAlchemy implementation of Favorite repository."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.favorite import Favorite
from infrastructure.database.models import FavoriteModel
from infrastructure.database.repositories.conditional_insert import insert_if_absent


class SQLAlchemyFavoriteRepository:
    """SQLAlchemy implementation of IFavoriteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, artwork_id: UUID, user_email: str) -> Favorite | None:
        """Get the favorite for an (artwork, user) pair."""
        stmt = select(FavoriteModel).where(
            FavoriteModel.artwork_id == artwork_id,
            FavoriteModel.user_email == user_email,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def add_if_absent(self, favorite: Favorite) -> Favorite | None:
        """Insert the favorite unless the pair already exists."""
        inserted_id = await insert_if_absent(
            self._session,
            FavoriteModel,
            {
                "id": favorite.id,
                "artwork_id": favorite.artwork_id,
                "user_email": favorite.user_email,
                "extra": favorite.extra,
                "created_at": favorite.created_at,
            },
            conflict_columns=["artwork_id", "user_email"],
        )
        return favorite if inserted_id is not None else None

    async def list_for_user(self, user_email: str) -> list[Favorite]:
        """Get all favorites of a user, newest first."""
        stmt = (
            select(FavoriteModel)
            .where(FavoriteModel.user_email == user_email)
            .order_by(FavoriteModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def delete(self, id: UUID) -> bool:
        """Delete a favorite by ID; a missing ID is not an error."""
        stmt = delete(FavoriteModel).where(FavoriteModel.id == id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    def _to_entity(self, model: FavoriteModel) -> Favorite:
        """Convert ORM model to domain entity."""
        return Favorite(
            id=model.id,
            artwork_id=model.artwork_id,
            user_email=model.user_email,
            extra=dict(model.extra or {}),
            created_at=model.created_at,
        )
