"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import Mock, AsyncMock

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")
os.environ.setdefault("ADMIN_API_KEY", "test_admin_key")
os.environ.setdefault("CART_STORAGE_BACKEND", "memory")
os.environ.setdefault("CORS_ORIGINS", "https://shop.example")

from core.cart import CartStore, CartPersistence, MemoryStorage, ProfileStorage


def _result(data):
    result = Mock()
    result.data = data
    return result


@pytest.fixture
def mock_supabase_client():
    """Mock async Supabase client; set ``table_mock.execute.return_value.data``."""
    client = Mock()

    table_mock = Mock()
    table_mock.select.return_value = table_mock
    table_mock.insert.return_value = table_mock
    table_mock.update.return_value = table_mock
    table_mock.delete.return_value = table_mock
    table_mock.eq.return_value = table_mock
    table_mock.order.return_value = table_mock
    table_mock.execute = AsyncMock(return_value=_result([]))

    client.table.return_value = table_mock
    client.table_mock = table_mock
    client.result = _result

    return client


@pytest.fixture
def mock_database(mock_supabase_client):
    """Database wired to the mock client"""
    from core.services.database import Database

    return Database(mock_supabase_client)


@pytest.fixture
def memory_storage():
    """Shared in-memory backend"""
    return MemoryStorage()


@pytest.fixture
def profile_storage(memory_storage):
    """Backend scoped to one browser profile"""
    return ProfileStorage(memory_storage, "profile-test-0001")


@pytest.fixture
def persisted_store(profile_storage):
    """Store with write-through persistence bound"""
    persistence = CartPersistence(profile_storage)
    return persistence.bind(CartStore(persistence.load().items))


@pytest.fixture
def sample_category():
    """Sample category data"""
    return {
        "id": "cat-123",
        "name": "Grains",
        "image_url": "https://res.cloudinary.com/demo/grains.jpg",
    }


@pytest.fixture
def sample_product(sample_category):
    """Sample product data"""
    return {
        "id": "product-123",
        "name": "Rice 5kg",
        "description": "Ponni raw rice",
        "price": 250,
        "category_id": "cat-123",
        "image_url": "https://res.cloudinary.com/demo/rice.jpg",
        "category": sample_category,
        "created_at": "2025-01-01T00:00:00Z",
    }


@pytest.fixture
def grocery_lines():
    """Two-line cart from the order message example"""
    return [
        ("Rice 5kg", 250, "https://cdn.example/rice.jpg", 2),
        ("Oil 1L", 180, "https://cdn.example/oil.jpg", 1),
    ]


@pytest.fixture
def grocery_store(grocery_lines):
    """Unpersisted store holding ``grocery_lines``"""
    store = CartStore()
    for name, price, image, quantity in grocery_lines:
        for _ in range(quantity):
            store.add_item(name, price, image)
    return store
