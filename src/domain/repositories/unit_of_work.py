"""Unit of Work protocol."""

from typing import Protocol

from domain.repositories.artwork_repository import IArtworkRepository
from domain.repositories.favorite_repository import IFavoriteRepository
from domain.repositories.like_repository import ILikeRepository
from domain.repositories.user_repository import IUserRepository


class IUnitOfWork(Protocol):
    """Unit of Work interface for managing transactions.

    Store errors raised inside the context are rolled back and re-raised as
    ``StoreFailureError``.
    """

    users: IUserRepository
    artworks: IArtworkRepository
    likes: ILikeRepository
    favorites: IFavoriteRepository

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...
