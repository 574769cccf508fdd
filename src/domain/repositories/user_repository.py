"""User repository protocol."""

from typing import Protocol

from domain.entities.user import User


class IUserRepository(Protocol):
    """Repository interface for User entities."""

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        ...

    async def create_if_absent(self, user: User) -> User | None:
        """Insert the user unless the email is taken.

        Returns the created user, or None when a user with that email
        already exists.
        """
        ...

    async def upsert_profile(
        self, email: str, display_name: str | None, photo_url: str | None
    ) -> tuple[User, bool]:
        """Set display name and photo for the email, inserting when absent.

        Returns the stored user and whether it was newly created.
        """
        ...
