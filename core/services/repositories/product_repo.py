"""Product Repository - Product catalog operations."""
from typing import Optional, List, Dict, Any
from .base import BaseRepository
from core.services.models import Product

# Embed the owning category so listings can show its name
PRODUCT_COLUMNS = "*, category:categories(*)"


class ProductRepository(BaseRepository):
    """Product database operations."""

    table = "products"

    async def get_all(self, category_id: Optional[str] = None) -> List[Product]:
        """Get all products, optionally only those in one category."""
        query = self._table().select(PRODUCT_COLUMNS)
        if category_id:
            query = query.eq("category_id", category_id)
        result = await query.order("name").execute()
        return [Product(**p) for p in result.data]

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        result = await self._table().select(PRODUCT_COLUMNS).eq("id", product_id).execute()
        if not result.data:
            return None
        return Product(**result.data[0])

    async def create(self, data: Dict[str, Any]) -> Product:
        result = await self._table().insert(data).execute()
        return Product(**result.data[0])

    async def update(self, product_id: str, data: Dict[str, Any]) -> Optional[Product]:
        result = await self._table().update(data).eq("id", product_id).execute()
        return Product(**result.data[0]) if result.data else None

    async def delete(self, product_id: str) -> bool:
        result = await self._table().delete().eq("id", product_id).execute()
        return bool(result.data)
