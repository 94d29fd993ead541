"""API routers package."""

from .health import router as health_router
from .patterns import router as patterns_router

__all__ = [
    "health_router",
    "patterns_router",
]
