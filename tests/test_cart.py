"""
Tests for the cart store and line item models
"""

import logging
import random
from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from core.cart import CartLineItem, CartSnapshot, CartStore
from core.services.money import MAX_QUANTITY


class TestCartLineItem:
    """Tests for CartLineItem dataclass."""

    def test_price_normalized_to_decimal(self):
        item = CartLineItem(name="Oil 1L", price=180.5, image_ref="oil.jpg")

        assert item.price == Decimal("180.5")
        assert item.quantity == 1

    def test_subtotal(self):
        item = CartLineItem(name="Rice 5kg", price=250, quantity=2)

        assert item.subtotal == Decimal("500")

    def test_is_frozen(self):
        item = CartLineItem(name="Rice 5kg", price=250)

        with pytest.raises(FrozenInstanceError):
            item.quantity = 5

    def test_to_dict(self):
        item = CartLineItem(name="Rice 5kg", price=250, image_ref="rice.jpg", quantity=2)

        assert item.to_dict() == {
            "name": "Rice 5kg",
            "price": "250",
            "imageRef": "rice.jpg",
            "quantity": 2,
        }

    def test_from_dict_accepts_numeric_price(self):
        item = CartLineItem.from_dict({"name": "Dal", "price": 99.5, "imageRef": "", "quantity": 3})

        assert item.price == Decimal("99.5")
        assert item.quantity == 3

    @pytest.mark.parametrize("data", [
        {"name": "Dal", "price": "abc", "quantity": 1},
        {"name": "Dal", "price": -1, "quantity": 1},
        {"name": "Dal", "price": 10, "quantity": 0},
        {"name": "Dal", "price": 10, "quantity": 1.5},
        {"name": "Dal", "price": "1e27", "quantity": 1},
        {"name": "Dal", "price": 10, "quantity": 10000},
        {"name": "", "price": 10, "quantity": 1},
        {"price": 10, "quantity": 1},
    ])
    def test_from_dict_rejects_malformed(self, data):
        with pytest.raises((ValueError, KeyError, TypeError)):
            CartLineItem.from_dict(data)


class TestCartSnapshot:
    """Tests for CartSnapshot totals."""

    def test_empty(self):
        snapshot = CartSnapshot()

        assert snapshot.is_empty
        assert len(snapshot) == 0
        assert snapshot.total_count == 0
        assert snapshot.total_amount == 0

    def test_totals_derived_from_items(self):
        snapshot = CartSnapshot(items=(
            CartLineItem(name="Rice 5kg", price=250, quantity=2),
            CartLineItem(name="Oil 1L", price=180, quantity=1),
        ))

        assert snapshot.total_count == 3
        assert snapshot.total_amount == Decimal("680")


class TestCartStore:
    """Tests for CartStore mutations."""

    def test_add_new_items_in_insertion_order(self):
        store = CartStore()
        store.add_item("Rice 5kg", 250, "rice.jpg")
        store.add_item("Oil 1L", 180, "oil.jpg")

        names = [item.name for item in store.snapshot()]
        assert names == ["Rice 5kg", "Oil 1L"]

    def test_add_same_name_increments_one_line(self):
        store = CartStore()
        store.add_item("Rice 5kg", 250, "rice.jpg")
        store.add_item("Rice 5kg", 250, "rice.jpg")

        snapshot = store.snapshot()
        assert len(snapshot) == 1
        assert snapshot.items[0].quantity == 2
        assert snapshot.total_count == 2

    def test_add_item_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="core.cart.store"):
            CartStore().add_item("Rice 5kg", 250, "rice.jpg")

        assert "Added to cart: Rice 5kg" in caplog.text

    def test_change_quantity(self, grocery_store):
        grocery_store.change_quantity(1, 2)

        snapshot = grocery_store.snapshot()
        assert snapshot.items[1].quantity == 3
        assert snapshot.total_count == 5
        assert snapshot.total_amount == Decimal("1040")

    @pytest.mark.parametrize("delta", [-2, -3, -100])
    def test_change_quantity_to_zero_or_below_removes_line(self, grocery_store, delta):
        grocery_store.change_quantity(0, delta)

        snapshot = grocery_store.snapshot()
        assert [item.name for item in snapshot] == ["Oil 1L"]
        assert all(item.quantity >= 1 for item in snapshot)

    @pytest.mark.parametrize("index", [2, 99, -1])
    def test_change_quantity_out_of_range_is_noop(self, grocery_store, index):
        before = grocery_store.snapshot()

        grocery_store.change_quantity(index, 1)

        assert grocery_store.snapshot() == before

    def test_quantity_is_capped(self):
        store = CartStore([CartLineItem("Salt", 20, quantity=MAX_QUANTITY - 1)])
        calls = []
        store.subscribe(calls.append)

        store.change_quantity(0, 50)
        store.add_item("Salt", 20)
        store.change_quantity(0, 1)

        assert store.snapshot().total_count == MAX_QUANTITY
        assert len(calls) == 1

    def test_remove_item(self, grocery_store):
        grocery_store.remove_item(0)

        snapshot = grocery_store.snapshot()
        assert [item.name for item in snapshot] == ["Oil 1L"]
        assert snapshot.total_amount == Decimal("180")

    @pytest.mark.parametrize("index", [2, -1])
    def test_remove_item_out_of_range_is_noop(self, grocery_store, index):
        before = grocery_store.snapshot()

        grocery_store.remove_item(index)

        assert grocery_store.snapshot() == before

    def test_clear(self, grocery_store):
        grocery_store.clear()

        assert grocery_store.snapshot().is_empty

    def test_snapshot_is_detached_from_store(self, grocery_store):
        snapshot = grocery_store.snapshot()

        grocery_store.add_item("Sugar 1kg", 48, "sugar.jpg")
        grocery_store.remove_item(0)

        assert [item.name for item in snapshot] == ["Rice 5kg", "Oil 1L"]
        assert isinstance(snapshot.items, tuple)

    def test_listeners_called_on_change_only(self):
        store = CartStore()
        seen = []
        store.subscribe(seen.append)

        store.add_item("Rice 5kg", 250, "rice.jpg")
        store.change_quantity(5, 1)
        store.remove_item(5)
        store.change_quantity(0, 1)

        assert [s.total_count for s in seen] == [1, 2]

    def test_totals_track_items_for_any_sequence(self):
        rng = random.Random(20241018)
        catalog = [("Rice 5kg", 250), ("Oil 1L", 180), ("Dal 1kg", Decimal("99.50")), ("Salt", 20)]
        store = CartStore()

        for _ in range(500):
            op = rng.choice(["add", "change", "remove"])
            if op == "add":
                name, price = rng.choice(catalog)
                store.add_item(name, price, "")
            elif op == "change":
                store.change_quantity(rng.randint(-1, 4), rng.randint(-4, 4))
            else:
                store.remove_item(rng.randint(-1, 4))

            snapshot = store.snapshot()
            assert snapshot.total_count == sum(item.quantity for item in snapshot)
            assert snapshot.total_amount == sum(
                (item.price * item.quantity for item in snapshot), Decimal("0")
            )
            assert all(item.quantity >= 1 for item in snapshot)
            assert len({item.name for item in snapshot}) == len(snapshot)
