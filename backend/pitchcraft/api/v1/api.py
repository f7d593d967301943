"""API v1: aggregates all routers under a single prefix."""

from fastapi import APIRouter

from pitchcraft.api.v1.routers import images, presentations

router = APIRouter()
router.include_router(presentations.router)
router.include_router(images.router)
