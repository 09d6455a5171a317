"""Category Repository - Category CRUD operations."""
from typing import Optional, List, Dict, Any
from .base import BaseRepository
from core.services.models import Category


class CategoryRepository(BaseRepository):
    """Category database operations."""

    table = "categories"

    async def get_all(self) -> List[Category]:
        result = await self._table().select("*").order("name").execute()
        return [Category(**c) for c in result.data]

    async def get_by_id(self, category_id: str) -> Optional[Category]:
        result = await self._table().select("*").eq("id", category_id).execute()
        if not result.data:
            return None
        return Category(**result.data[0])

    async def create(self, data: Dict[str, Any]) -> Category:
        result = await self._table().insert(data).execute()
        return Category(**result.data[0])

    async def update(self, category_id: str, data: Dict[str, Any]) -> Optional[Category]:
        """Update only the given fields; None when the category does not exist."""
        result = await self._table().update(data).eq("id", category_id).execute()
        return Category(**result.data[0]) if result.data else None

    async def delete(self, category_id: str) -> bool:
        result = await self._table().delete().eq("id", category_id).execute()
        return bool(result.data)
