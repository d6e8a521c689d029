from fastapi import APIRouter
from .products import router as products_router
from .health import router as health_router

# Create main API router
api_router = APIRouter()

api_router.include_router(products_router, tags=["Products"])
api_router.include_router(health_router, tags=["Health"])

__all__ = ["api_router"]
