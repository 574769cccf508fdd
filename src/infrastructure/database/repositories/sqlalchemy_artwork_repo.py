"""SQLAlchemy implementation of Artwork repository."""

from typing import Any
from uuid import UUID

from sqlalchemy import and_, delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.artwork import SORTABLE_FIELDS, ArtistRanking, Artwork, Visibility
from infrastructure.database.models import ArtworkModel

_SORT_COLUMNS = {name: getattr(ArtworkModel, name) for name in SORTABLE_FIELDS}

_PUBLIC = ArtworkModel.visibility == Visibility.PUBLIC.value


class SQLAlchemyArtworkRepository:
    """SQLAlchemy implementation of IArtworkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Artwork | None:
        """Get an artwork by ID."""
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    async def create(self, artwork: Artwork) -> Artwork:
        """Create a new artwork."""
        model = self._to_model(artwork)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update_fields(self, id: UUID, fields: dict[str, Any]) -> Artwork | None:
        """Set the given columns on an artwork."""
        model = await self._get_model(id)
        if not model:
            return None

        for name, value in fields.items():
            setattr(model, name, value)

        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete an artwork."""
        stmt = delete(ArtworkModel).where(ArtworkModel.id == id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    async def list_public(self, limit: int) -> list[Artwork]:
        """Get public artworks."""
        stmt = select(ArtworkModel).where(_PUBLIC).limit(limit)
        return await self._fetch(stmt)

    async def latest_public(self, limit: int) -> list[Artwork]:
        """Get the newest public artworks."""
        stmt = (
            select(ArtworkModel)
            .where(_PUBLIC)
            .order_by(ArtworkModel.created_at.desc())
            .limit(limit)
        )
        return await self._fetch(stmt)

    async def public_categories(self) -> list[str]:
        """Get distinct non-empty categories of public artworks."""
        stmt = (
            select(ArtworkModel.category)
            .where(_PUBLIC, ArtworkModel.category.is_not(None), ArtworkModel.category != "")
            .distinct()
            .order_by(ArtworkModel.category)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars())

    async def public_by_category(self, category: str) -> list[Artwork]:
        """Get public artworks in a category."""
        stmt = (
            select(ArtworkModel)
            .where(_PUBLIC, ArtworkModel.category == category)
            .order_by(ArtworkModel.created_at.desc())
        )
        return await self._fetch(stmt)

    async def list_by_creator(
        self, email: str, sort: str = "created_at", descending: bool = True
    ) -> list[Artwork]:
        """Get all artworks created by a user, sorted by an allowlisted column."""
        column = _SORT_COLUMNS[sort]
        stmt = (
            select(ArtworkModel)
            .where(ArtworkModel.created_by == email)
            .order_by(column.desc() if descending else column.asc(), ArtworkModel.id)
        )
        return await self._fetch(stmt)

    async def search_public(
        self, text: str | None = None, category: str | None = None
    ) -> list[Artwork]:
        """Case-insensitive search over title and artist name."""
        stmt = select(ArtworkModel).where(_PUBLIC)
        if text:
            stmt = stmt.where(
                or_(
                    ArtworkModel.title.icontains(text, autoescape=True),
                    ArtworkModel.artist_name.icontains(text, autoescape=True),
                )
            )
        if category:
            stmt = stmt.where(ArtworkModel.category == category)
        return await self._fetch(stmt.order_by(ArtworkModel.created_at.desc()))

    async def increment_likes(self, id: UUID, amount: int = 1) -> int | None:
        """Atomically add to the like counter and return the new value."""
        stmt = (
            update(ArtworkModel)
            .where(ArtworkModel.id == id)
            .values(likes=func.coalesce(ArtworkModel.likes, 0) + amount)
            .returning(ArtworkModel.likes)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def set_artist_identity(
        self, email: str, artist_name: str | None, artist_photo: str | None
    ) -> int:
        """Overwrite the denormalized artist identity on every artwork of a user."""
        stmt = (
            update(ArtworkModel)
            .where(ArtworkModel.created_by == email)
            .values(artist_name=artist_name, artist_photo=artist_photo)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount or 0

    async def count_by_creator(self, email: str) -> int:
        """Count all artworks created by a user."""
        stmt = (
            select(func.count())
            .select_from(ArtworkModel)
            .where(ArtworkModel.created_by == email)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def top_artists(self, limit: int) -> list[ArtistRanking]:
        """Rank artists by total likes over their public artworks.

        Identity comes from each artist's newest public artwork; equal totals
        are ordered by email.
        """
        totals = (
            select(
                ArtworkModel.created_by.label("artist_email"),
                func.coalesce(func.sum(ArtworkModel.likes), 0).label("total_likes"),
                func.count().label("total_artworks"),
            )
            .where(_PUBLIC)
            .group_by(ArtworkModel.created_by)
            .subquery()
        )
        newest = (
            select(
                ArtworkModel.created_by,
                ArtworkModel.artist_name,
                ArtworkModel.artist_photo,
                func.row_number()
                .over(
                    partition_by=ArtworkModel.created_by,
                    order_by=(ArtworkModel.created_at.desc(), ArtworkModel.id.desc()),
                )
                .label("position"),
            )
            .where(_PUBLIC)
            .subquery()
        )
        stmt = (
            select(
                totals.c.artist_email,
                newest.c.artist_name,
                newest.c.artist_photo,
                totals.c.total_likes,
                totals.c.total_artworks,
            )
            .join(
                newest,
                and_(
                    newest.c.created_by == totals.c.artist_email,
                    newest.c.position == 1,
                ),
            )
            .order_by(totals.c.total_likes.desc(), totals.c.artist_email)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [
            ArtistRanking(
                artist_email=row.artist_email,
                artist_name=row.artist_name,
                artist_photo=row.artist_photo,
                total_likes=int(row.total_likes),
                total_artworks=int(row.total_artworks),
            )
            for row in result
        ]

    async def _get_model(self, id: UUID) -> ArtworkModel | None:
        stmt = select(ArtworkModel).where(ArtworkModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _fetch(self, stmt: Any) -> list[Artwork]:
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    def _to_entity(self, model: ArtworkModel) -> Artwork:
        """Convert ORM model to domain entity."""
        return Artwork(
            id=model.id,
            title=model.title,
            category=model.category,
            visibility=Visibility(model.visibility),
            image_url=model.image_url,
            description=model.description,
            created_by=model.created_by,
            artist_name=model.artist_name,
            artist_photo=model.artist_photo,
            likes=model.likes or 0,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Artwork) -> ArtworkModel:
        """Convert domain entity to ORM model."""
        return ArtworkModel(
            id=entity.id,
            title=entity.title,
            category=entity.category,
            visibility=entity.visibility.value,
            image_url=entity.image_url,
            description=entity.description,
            created_by=entity.created_by,
            artist_name=entity.artist_name,
            artist_photo=entity.artist_photo,
            likes=entity.likes,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
