"""API routes package."""

from .health_routes import router as health_router
from .image_routes import router as image_router, get_orchestrator

__all__ = ["health_router", "image_router", "get_orchestrator"]
