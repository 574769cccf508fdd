"""Dependency injection factories for API v1."""

from typing import Callable

from fastapi import Depends

from domain.services.artwork_service import ArtworkService
from domain.services.favorite_service import FavoriteService
from domain.services.leaderboard_service import TopArtistAggregator
from domain.services.like_service import LikeService
from domain.services.profile_sync_service import ProfileSyncService
from domain.services.user_service import UserService
from infrastructure.database.session import Database, get_database
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory(
    database: Database = Depends(get_database),
) -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances bound to the app's database."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(database.session_factory)

    return factory


def get_like_service(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork] = Depends(get_uow_factory),
) -> LikeService:
    """Get Like service instance."""
    return LikeService(uow_factory)


def get_favorite_service(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork] = Depends(get_uow_factory),
) -> FavoriteService:
    """Get Favorite service instance."""
    return FavoriteService(uow_factory)


def get_profile_sync_service(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork] = Depends(get_uow_factory),
) -> ProfileSyncService:
    """Get ProfileSync service instance."""
    return ProfileSyncService(uow_factory)


def get_top_artist_aggregator(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork] = Depends(get_uow_factory),
) -> TopArtistAggregator:
    """Get leaderboard instance."""
    return TopArtistAggregator(uow_factory)


def get_user_service(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork] = Depends(get_uow_factory),
) -> UserService:
    """Get User service instance."""
    return UserService(uow_factory)


def get_artwork_service(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork] = Depends(get_uow_factory),
) -> ArtworkService:
    """Get Artwork service instance."""
    return ArtworkService(uow_factory)
