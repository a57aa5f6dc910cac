"""API routers package."""

from skills_api.routers.skills import router as skills_router
from skills_api.routers.themes import router as themes_router

__all__ = ["skills_router", "themes_router"]
