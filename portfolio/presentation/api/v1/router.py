"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from portfolio.presentation.api.v1.endpoints.health import router as health_router
from portfolio.presentation.api.v1.endpoints.collections import router as collections_router
from portfolio.presentation.api.v1.endpoints.blog_posts import router as blog_posts_router
from portfolio.presentation.api.v1.endpoints.profile import router as profile_router
from portfolio.presentation.api.v1.endpoints.public import router as public_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(collections_router)
router.include_router(blog_posts_router)
router.include_router(profile_router)
router.include_router(public_router)
