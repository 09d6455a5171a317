"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Tuple

from core.services.money import MAX_PRICE, MAX_QUANTITY, to_decimal, multiply


@dataclass(frozen=True)
class CartLineItem:
    """
    One distinct product in the cart.

    Lines are identified by ``name``; the catalog does not thread a stable
    product id through the add-to-cart event.
    """
    name: str
    price: Decimal
    image_ref: str = ""
    quantity: int = 1

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "price", to_decimal(self.price))

    @property
    def subtotal(self) -> Decimal:
        """Unit price times quantity."""
        return multiply(self.price, self.quantity)

    def to_dict(self) -> dict:
        """Convert to the stored JSON shape."""
        return {
            "name": self.name,
            "price": str(self.price),
            "imageRef": self.image_ref,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartLineItem":
        """
        Create from the stored JSON shape.

        Raises:
            KeyError, TypeError, ValueError: If the entry is malformed
        """
        name = data["name"]
        if not isinstance(name, str) or not name:
            raise ValueError("name must be a non-empty string")

        quantity = data["quantity"]
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise TypeError("quantity must be an integer")
        if not 1 <= quantity <= MAX_QUANTITY:
            raise ValueError(f"quantity must be between 1 and {MAX_QUANTITY}")

        raw_price = data["price"]
        if isinstance(raw_price, bool) or not isinstance(raw_price, (int, float, str)):
            raise TypeError("price must be a number")
        try:
            price = Decimal(str(raw_price))
        except InvalidOperation:
            raise ValueError(f"invalid price: {raw_price!r}") from None
        if not price.is_finite() or not 0 <= price <= MAX_PRICE:
            raise ValueError(f"price must be between 0 and {MAX_PRICE}")

        image_ref = data.get("imageRef", "")
        if not isinstance(image_ref, str):
            raise TypeError("imageRef must be a string")

        return cls(name=name, price=price, image_ref=image_ref, quantity=quantity)


@dataclass(frozen=True)
class CartSnapshot:
    """Immutable view of cart state at a point in time."""
    items: Tuple[CartLineItem, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def total_count(self) -> int:
        """Total number of units in cart."""
        return sum(item.quantity for item in self.items)

    @property
    def total_amount(self) -> Decimal:
        """Sum of line subtotals."""
        return sum((item.subtotal for item in self.items), Decimal("0"))

    def to_list(self) -> list:
        """Serialize line items for storage."""
        return [item.to_dict() for item in self.items]


EMPTY_CART = CartSnapshot()
