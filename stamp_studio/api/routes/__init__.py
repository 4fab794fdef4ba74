"""API routes module."""

from stamp_studio.api.routes.designs import router as designs_router
from stamp_studio.api.routes.health import router as health_router
from stamp_studio.api.routes.products import router as products_router
from stamp_studio.api.routes.reviews import router as reviews_router

__all__ = ["designs_router", "health_router", "products_router", "reviews_router"]
