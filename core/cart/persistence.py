"""Write-through persistence for the cart."""
import json
from typing import List

from core.logging import get_logger, sanitize_id_for_logging
from .models import CartLineItem, CartSnapshot, EMPTY_CART
from .storage import KeyValueStorage
from .store import CartStore

logger = get_logger(__name__)

ITEMS_KEY = "cartItems"
COUNT_KEY = "cartCount"


def parse_items(raw: str) -> List[CartLineItem]:
    """
    Parse the stored ``cartItems`` payload.

    Raises:
        ValueError, KeyError, TypeError: If the payload is not a valid list
            of line items (json.JSONDecodeError is a ValueError)
    """
    data = json.loads(raw)
    if not isinstance(data, list):
        raise TypeError(f"expected a list of cart items, got {type(data).__name__}")
    return [CartLineItem.from_dict(entry) for entry in data]


class CartPersistence:
    """
    Serializes cart state into two storage keys.

    ``cartItems`` holds the JSON line items; ``cartCount`` holds the unit
    count on its own so a badge can be drawn without decoding the list.
    Reads fail open: anything unreadable is treated as an empty cart.
    """

    def __init__(self, storage: KeyValueStorage):
        self.storage = storage

    @property
    def _label(self) -> str:
        return sanitize_id_for_logging(getattr(self.storage, "profile", None))

    def save(self, snapshot: CartSnapshot) -> None:
        """Write both keys for the given snapshot."""
        self.storage.set(ITEMS_KEY, json.dumps(snapshot.to_list(), ensure_ascii=False))
        self.storage.set(COUNT_KEY, str(snapshot.total_count))

    def bind(self, store: CartStore) -> CartStore:
        """Persist every subsequent mutation of ``store``."""
        store.subscribe(self.save)
        return store

    def load(self) -> CartSnapshot:
        """Read the stored cart, or an empty cart if absent or corrupt."""
        raw = self.storage.get(ITEMS_KEY)
        if not raw:
            return EMPTY_CART

        try:
            items = parse_items(raw)
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Corrupted cart data for profile {self._label}: {e}")
            return EMPTY_CART

        snapshot = CartSnapshot(items=tuple(items))
        stored_count = self.peek_count()
        if stored_count != snapshot.total_count:
            logger.warning(
                f"Cart count mismatch for profile {self._label}: "
                f"stored {stored_count}, derived {snapshot.total_count}"
            )
        return snapshot

    def peek_count(self) -> int:
        """Read only ``cartCount``; 0 when missing or unparsable."""
        raw = self.storage.get(COUNT_KEY)
        if raw is None:
            return 0
        try:
            count = int(raw)
        except (TypeError, ValueError):
            return 0
        return max(count, 0)

    def clear(self) -> None:
        """Remove both keys."""
        self.storage.delete(ITEMS_KEY, COUNT_KEY)
