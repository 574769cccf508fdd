"""SQLAlchemy implementation of User repository."""

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.user import User
from infrastructure.database.models import UserModel
from infrastructure.database.repositories.conditional_insert import insert_if_absent


class SQLAlchemyUserRepository:
    """SQLAlchemy implementation of IUserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create_if_absent(self, user: User) -> User | None:
        """Insert the user unless the email is taken."""
        inserted_id = await insert_if_absent(
            self._session,
            UserModel,
            self._to_values(user),
            conflict_columns=["email"],
        )
        return user if inserted_id is not None else None

    async def upsert_profile(
        self, email: str, display_name: str | None, photo_url: str | None
    ) -> tuple[User, bool]:
        """Set display name and photo for the email, inserting when absent."""
        now = datetime.utcnow()
        candidate = User(
            email=email,
            display_name=display_name,
            photo_url=photo_url,
            created_at=now,
            updated_at=now,
        )
        created = await self.create_if_absent(candidate)
        if created:
            return created, True

        stmt = (
            update(UserModel)
            .where(UserModel.email == email)
            .values(display_name=display_name, photo_url=photo_url, updated_at=now)
        )
        await self._session.execute(stmt)
        await self._session.flush()

        stored = await self.get_by_email(email)
        if stored is None:
            raise ValueError(f"User {email} vanished during profile update")
        return stored, False

    def _to_values(self, entity: User) -> dict:
        return {
            "id": entity.id,
            "email": entity.email,
            "display_name": entity.display_name,
            "photo_url": entity.photo_url,
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
        }

    def _to_entity(self, model: UserModel) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=model.id,
            email=model.email,
            display_name=model.display_name,
            photo_url=model.photo_url,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
