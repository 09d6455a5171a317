"""
FastAPI Routers Package

All routers are included in api/index.py.
"""

from core.routers.admin import router as admin_router
from core.routers.cart import router as cart_router
from core.routers.products import router as catalog_router

__all__ = [
    "admin_router",
    "cart_router",
    "catalog_router",
]
