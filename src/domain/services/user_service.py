"""User service layer with business logic."""

from typing import Callable

import structlog

from core.exceptions import UserNotFoundError, store_operation
from domain.entities.user import RegistrationResult, User
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.validation import normalize_email, require_email

logger = structlog.get_logger()


class UserService:
    """Service layer for user records."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    @store_operation("create user")
    async def register(
        self,
        email: str,
        display_name: str | None = None,
        photo_url: str | None = None,
    ) -> RegistrationResult:
        """Create a user unless one with this email exists (first sign-in)."""
        email = require_email(email, require_at=True)

        async with self._uow_factory() as uow:
            created = await uow.users.create_if_absent(
                User(email=email, display_name=display_name, photo_url=photo_url)
            )
            if created is None:
                existing = await uow.users.get_by_email(email)
                if existing is None:
                    raise UserNotFoundError(email)
                return RegistrationResult(user=existing, created=False)
            await uow.commit()

        logger.info("user_registered", email=email, user_id=str(created.id))
        return RegistrationResult(user=created, created=True)

    @store_operation("fetch user")
    async def get_by_email(self, email: str) -> User:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(normalize_email(email))
            if not user:
                raise UserNotFoundError(email)
            return user
