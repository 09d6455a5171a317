"""
Repository Pattern for Database Operations

- CategoryRepository: category CRUD
- ProductRepository: product catalog, category filter
"""
from .category_repo import CategoryRepository
from .product_repo import ProductRepository

__all__ = [
    "CategoryRepository",
    "ProductRepository",
]
