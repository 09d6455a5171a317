"""
Admin API Router

Admin-only endpoints for managing the catalog.
Mounted under /api/admin in api/index.py.
"""
from fastapi import APIRouter

from .products import router as products_router

router = APIRouter(tags=["admin"])

router.include_router(products_router)

__all__ = ["router"]
