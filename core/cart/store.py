"""In-memory cart state container."""
from dataclasses import replace
from typing import Callable, Iterable, List

from core.logging import get_logger, sanitize_string_for_logging
from core.services.money import MAX_QUANTITY, Number
from .models import CartLineItem, CartSnapshot

logger = get_logger(__name__)

CartListener = Callable[[CartSnapshot], None]


class CartStore:
    """
    Sole owner and mutator of cart line items.

    Totals are never stored; they are derived from the line items in
    ``CartSnapshot``. Listeners registered with ``subscribe`` are called
    synchronously after every mutation that changes state, which is how
    persistence stays write-through.

    Usage:
        store = CartStore()
        store.add_item("Rice 5kg", 250, "https://cdn/rice.jpg")
        store.change_quantity(0, 1)
        snapshot = store.snapshot()
    """

    def __init__(self, items: Iterable[CartLineItem] = ()):
        self._items: List[CartLineItem] = list(items)
        self._listeners: List[CartListener] = []

    def subscribe(self, listener: CartListener) -> None:
        """Register a callable invoked with the new snapshot after each change."""
        self._listeners.append(listener)

    def snapshot(self) -> CartSnapshot:
        """Return an immutable copy of the current cart."""
        return CartSnapshot(items=tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def _valid_index(self, index: int) -> bool:
        # Negative positions are stale UI references, not "from the end"
        return 0 <= index < len(self._items)

    def _changed(self) -> None:
        snapshot = self.snapshot()
        for listener in self._listeners:
            listener(snapshot)

    def add_item(self, name: str, price: Number, image_ref: str = "") -> None:
        """
        Add one unit; an existing line with the same name is incremented.

        A line already at MAX_QUANTITY is left as is.
        """
        for position, item in enumerate(self._items):
            if item.name == name:
                if item.quantity >= MAX_QUANTITY:
                    return
                self._items[position] = replace(item, quantity=item.quantity + 1)
                break
        else:
            self._items.append(CartLineItem(name=name, price=price, image_ref=image_ref))

        logger.debug(f"Added to cart: {sanitize_string_for_logging(name)}")
        self._changed()

    def change_quantity(self, index: int, delta: int) -> None:
        """
        Shift a line's quantity by ``delta``.

        Out-of-range indexes are ignored. A line whose quantity reaches
        zero or below is removed; quantities are capped at MAX_QUANTITY.
        """
        if not self._valid_index(index):
            return

        item = self._items[index]
        quantity = min(item.quantity + delta, MAX_QUANTITY)
        if quantity == item.quantity:
            return
        if quantity <= 0:
            del self._items[index]
        else:
            self._items[index] = replace(item, quantity=quantity)
        self._changed()

    def remove_item(self, index: int) -> None:
        """Remove the line at ``index``; out-of-range indexes are ignored."""
        if not self._valid_index(index):
            return

        del self._items[index]
        self._changed()

    def clear(self) -> None:
        """Drop every line."""
        self._items.clear()
        self._changed()
