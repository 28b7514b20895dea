"""API v1 router -- aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from storefront.api.v1 import categories, health, home, sections, tabs

api_v1_router = APIRouter()

api_v1_router.include_router(health.router, tags=["health"])
api_v1_router.include_router(home.router, prefix="/home", tags=["home"])
api_v1_router.include_router(sections.router, prefix="/sections", tags=["sections"])
api_v1_router.include_router(tabs.router, prefix="/tabs", tags=["tabs"])
api_v1_router.include_router(categories.router, prefix="/categories", tags=["categories"])
