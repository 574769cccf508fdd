"""SQLAlchemy implementation of Like repository."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.like import Like
from infrastructure.database.models import LikeModel
from infrastructure.database.repositories.conditional_insert import insert_if_absent


class SQLAlchemyLikeRepository:
    """SQLAlchemy implementation of ILikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, artwork_id: UUID, user_email: str) -> Like | None:
        """Get the like for an (artwork, user) pair."""
        stmt = select(LikeModel).where(
            LikeModel.artwork_id == artwork_id,
            LikeModel.user_email == user_email,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def add_if_absent(self, like: Like) -> Like | None:
        """Insert the like unless the pair already exists."""
        inserted_id = await insert_if_absent(
            self._session,
            LikeModel,
            {
                "id": like.id,
                "artwork_id": like.artwork_id,
                "user_email": like.user_email,
                "created_at": like.created_at,
            },
            conflict_columns=["artwork_id", "user_email"],
        )
        return like if inserted_id is not None else None

    async def count_for_artwork(self, artwork_id: UUID) -> int:
        """Count likes referencing an artwork."""
        stmt = (
            select(func.count())
            .select_from(LikeModel)
            .where(LikeModel.artwork_id == artwork_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    def _to_entity(self, model: LikeModel) -> Like:
        """Convert ORM model to domain entity."""
        return Like(
            id=model.id,
            artwork_id=model.artwork_id,
            user_email=model.user_email,
            created_at=model.created_at,
        )
