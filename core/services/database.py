"""
Supabase Database Service

Provides Database class with catalog operations via Repository pattern.

Usage:
    from core.services.database import get_database

    # At FastAPI startup (lifespan):
    await init_database()

    db = get_database()
    products = await db.get_products(category_id="...")
"""

import asyncio
from typing import Any, Optional

from supabase._async.client import AsyncClient

from core.db import get_supabase
from core.logging import get_logger
from core.services.models import Category, Product
from core.services.repositories import CategoryRepository, ProductRepository

logger = get_logger(__name__)


class Database:
    """
    Supabase database client with catalog operations.

    Uses Repository pattern internally but exposes a flat API to routers.
    Must be created via ``Database.create()`` or ``init_database()``.
    """

    def __init__(self, client: AsyncClient):
        self.client = client
        self._categories_repo = CategoryRepository(self.client)
        self._products_repo = ProductRepository(self.client)

    @classmethod
    async def create(cls) -> "Database":
        """Async factory: builds the Supabase client from environment."""
        client = await get_supabase()
        return cls(client)

    # ==================== CATEGORY OPERATIONS ====================

    async def get_categories(self) -> list[Category]:
        return await self._categories_repo.get_all()

    async def get_category_by_id(self, category_id: str) -> Category | None:
        return await self._categories_repo.get_by_id(category_id)

    async def create_category(self, name: str, image_url: str) -> Category:
        return await self._categories_repo.create({"name": name, "image_url": image_url})

    async def update_category(self, category_id: str, data: dict[str, Any]) -> Category | None:
        return await self._categories_repo.update(category_id, data)

    async def delete_category(self, category_id: str) -> bool:
        return await self._categories_repo.delete(category_id)

    # ==================== PRODUCT OPERATIONS ====================

    async def get_products(self, category_id: str | None = None) -> list[Product]:
        return await self._products_repo.get_all(category_id)

    async def get_product_by_id(self, product_id: str) -> Product | None:
        return await self._products_repo.get_by_id(product_id)

    async def create_product(self, data: dict[str, Any]) -> Product:
        return await self._products_repo.create(data)

    async def update_product(self, product_id: str, data: dict[str, Any]) -> Product | None:
        return await self._products_repo.update(product_id, data)

    async def delete_product(self, product_id: str) -> bool:
        return await self._products_repo.delete(product_id)


# ==================== SINGLETON ====================

_db: Database | None = None
_db_lock: Optional["asyncio.Lock"] = None


def _get_lock() -> "asyncio.Lock":
    """Create the init lock lazily, inside a running loop."""
    global _db_lock
    if _db_lock is None:
        _db_lock = asyncio.Lock()
    return _db_lock


async def init_database() -> Database:
    """Initialize the database singleton (call once at startup)."""
    global _db
    if _db is not None:
        return _db

    async with _get_lock():
        if _db is None:
            _db = await Database.create()
            logger.info("Database initialized")
    return _db


async def close_database() -> None:
    """Drop the singleton (used at shutdown)."""
    global _db
    _db = None


def get_database() -> Database:
    """
    Get database instance (sync accessor).

    Raises:
        RuntimeError: If init_database() has not run yet
    """
    if _db is None:
        raise RuntimeError(
            "Database not initialized. Call 'await init_database()' at startup."
        )
    return _db
