"""Projection of cart state into a displayable view."""
from dataclasses import dataclass, field
from typing import List

from core.services.money import DEFAULT_CURRENCY, currency_symbol, fixed, format_money, plain
from .models import CartSnapshot


@dataclass(frozen=True)
class CartLineView:
    index: int
    name: str
    image_ref: str
    unit_price: str
    quantity: int
    subtotal: str


@dataclass(frozen=True)
class CartView:
    lines: List[CartLineView] = field(default_factory=list)
    count: int = 0
    total: str = ""
    is_empty: bool = True

    def to_dict(self) -> dict:
        return {
            "items": [
                {
                    "index": line.index,
                    "name": line.name,
                    "image_ref": line.image_ref,
                    "unit_price": line.unit_price,
                    "quantity": line.quantity,
                    "subtotal": line.subtotal,
                }
                for line in self.lines
            ],
            "count": self.count,
            "total": self.total,
            "is_empty": self.is_empty,
        }


class CartRenderer:
    """
    Builds a ``CartView`` from a snapshot.

    Rendering has no side effects and always builds the view from scratch,
    so rendering the same snapshot twice gives equal views.
    """

    def __init__(self, currency: str = DEFAULT_CURRENCY):
        self.currency = currency

    def render(self, snapshot: CartSnapshot) -> CartView:
        symbol = currency_symbol(self.currency)
        lines = [
            CartLineView(
                index=index,
                name=item.name,
                image_ref=item.image_ref,
                unit_price=f"{symbol}{plain(item.price)}",
                quantity=item.quantity,
                subtotal=f"{symbol}{fixed(item.subtotal)}",
            )
            for index, item in enumerate(snapshot.items)
        ]
        return CartView(
            lines=lines,
            count=snapshot.total_count,
            total=format_money(snapshot.total_amount, self.currency),
            is_empty=snapshot.is_empty,
        )
