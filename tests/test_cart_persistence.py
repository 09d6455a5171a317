"""
Tests for cart storage and write-through persistence
"""

import json
import logging
from decimal import Decimal
from unittest.mock import Mock

import pytest

from core.cart import (
    COUNT_KEY,
    ITEMS_KEY,
    CartPersistence,
    CartStore,
    ProfileStorage,
    RedisStorage,
)


def test_mutation_writes_both_keys(persisted_store, profile_storage):
    """Every mutation is persisted without an explicit save."""
    persisted_store.add_item("Rice 5kg", 250, "rice.jpg")
    persisted_store.add_item("Rice 5kg", 250, "rice.jpg")

    items = json.loads(profile_storage.get(ITEMS_KEY))
    assert items == [{"name": "Rice 5kg", "price": "250", "imageRef": "rice.jpg", "quantity": 2}]
    assert profile_storage.get(COUNT_KEY) == "2"


def test_keys_scoped_to_profile(persisted_store, memory_storage):
    persisted_store.add_item("Oil 1L", 180, "oil.jpg")

    assert "cart:profile-test-0001:cartItems" in memory_storage
    assert "cart:profile-test-0001:cartCount" in memory_storage

    other = CartPersistence(ProfileStorage(memory_storage, "profile-other-0002"))
    assert other.load().is_empty


def test_reload_reproduces_cart(profile_storage):
    persistence = CartPersistence(profile_storage)
    store = persistence.bind(CartStore())
    for _ in range(2):
        store.add_item("Rice 5kg", 250, "rice.jpg")
    for _ in range(3):
        store.add_item("Dal 1kg", Decimal("99.50"), "dal.jpg")

    reloaded = CartPersistence(profile_storage).load()

    assert reloaded == store.snapshot()
    assert reloaded.total_count == 5
    assert reloaded.total_amount == Decimal("798.50")


def test_noop_mutation_does_not_write(persisted_store, profile_storage):
    persisted_store.change_quantity(0, 1)
    persisted_store.remove_item(3)

    assert profile_storage.get(ITEMS_KEY) is None
    assert profile_storage.get(COUNT_KEY) is None


def test_removal_to_empty_persists_empty_cart(persisted_store, profile_storage):
    persisted_store.add_item("Salt", 20, "")
    persisted_store.change_quantity(0, -1)

    assert json.loads(profile_storage.get(ITEMS_KEY)) == []
    assert profile_storage.get(COUNT_KEY) == "0"


def test_missing_keys_load_empty(profile_storage):
    persistence = CartPersistence(profile_storage)

    assert persistence.load().is_empty
    assert persistence.peek_count() == 0


@pytest.mark.parametrize("raw", [
    "{not json",
    '{"name": "Rice"}',
    '[{"name": "Rice", "price": 250, "quantity": 0}]',
    '[{"name": "Rice", "price": -5, "quantity": 1}]',
    '[{"price": 250, "quantity": 1}]',
    '[{"name": "Gold", "price": "1e27", "imageRef": "", "quantity": 1}]',
    '["Rice"]',
])
def test_malformed_items_load_empty(profile_storage, raw):
    profile_storage.set(ITEMS_KEY, raw)
    profile_storage.set(COUNT_KEY, "3")

    snapshot = CartPersistence(profile_storage).load()

    assert snapshot.is_empty


def test_malformed_items_logged(profile_storage, caplog):
    profile_storage.set(ITEMS_KEY, "{not json")

    with caplog.at_level(logging.WARNING, logger="core.cart.persistence"):
        CartPersistence(profile_storage).load()

    assert "Corrupted cart data" in caplog.text


def test_count_mismatch_uses_items(profile_storage, caplog):
    profile_storage.set(ITEMS_KEY, '[{"name": "Rice", "price": "250", "imageRef": "", "quantity": 2}]')
    profile_storage.set(COUNT_KEY, "9")

    with caplog.at_level(logging.WARNING, logger="core.cart.persistence"):
        snapshot = CartPersistence(profile_storage).load()

    assert snapshot.total_count == 2
    assert "count mismatch" in caplog.text


def test_peek_count_reads_only_count_key():
    storage = Mock()
    storage.get.return_value = "7"

    assert CartPersistence(storage).peek_count() == 7
    storage.get.assert_called_once_with(COUNT_KEY)


@pytest.mark.parametrize("raw", ["seven", "", "-4"])
def test_peek_count_malformed_is_zero(profile_storage, raw):
    profile_storage.set(COUNT_KEY, raw)

    assert CartPersistence(profile_storage).peek_count() == 0


def test_clear_removes_keys(persisted_store, profile_storage):
    persisted_store.add_item("Rice 5kg", 250, "rice.jpg")

    CartPersistence(profile_storage).clear()

    assert profile_storage.get(ITEMS_KEY) is None
    assert profile_storage.get(COUNT_KEY) is None


class TestRedisStorage:
    """RedisStorage against a mocked Upstash client."""

    def test_set_refreshes_ttl(self):
        redis = Mock()
        storage = RedisStorage(redis, ttl=60)

        storage.set("cart:abc:cartCount", "2")

        redis.set.assert_called_once_with("cart:abc:cartCount", "2", ex=60)

    def test_get_decodes_bytes(self):
        redis = Mock()
        redis.get.return_value = b"[]"

        assert RedisStorage(redis).get("k") == "[]"

    def test_delete(self):
        redis = Mock()

        RedisStorage(redis).delete("a", "b")

        redis.delete.assert_called_once_with("a", "b")

    def test_profile_prefix(self):
        redis = Mock()
        redis.get.return_value = None
        storage = ProfileStorage(RedisStorage(redis), "abc")

        storage.get(ITEMS_KEY)

        redis.get.assert_called_once_with("cart:abc:cartItems")
