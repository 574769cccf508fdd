"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.artists import router as artists_router
from api.v1.routes.artworks import catalog_router
from api.v1.routes.artworks import router as artworks_router
from api.v1.routes.favorites import router as favorites_router
from api.v1.routes.likes import router as likes_router
from api.v1.routes.users import router as users_router

router = APIRouter()
router.include_router(likes_router)
router.include_router(artworks_router)
router.include_router(catalog_router)
router.include_router(favorites_router)
router.include_router(users_router)
router.include_router(artists_router)
