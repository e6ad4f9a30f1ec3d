"""Shopping cart and line items.

A Cart is built once per checkout attempt and not mutated after it is handed
to ``CheckoutService``; both classes are frozen.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from checkout.customer.customer import Customer
from checkout.domain import ZERO, to_money


@dataclass(frozen=True)
class Item:
    """A product line with a non-negative unit price."""

    name: str
    unit_price: Decimal

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Item name cannot be empty")
        price = to_money(self.unit_price)
        if price < ZERO:
            raise ValueError(f"Item price cannot be negative: {price}")
        object.__setattr__(self, "unit_price", price)


@dataclass(frozen=True)
class Cart:
    owner: Customer
    items: tuple[Item, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def subtotal(self) -> Decimal:
        """Sum of item prices before any discount; 0 for an empty cart."""
        return sum((item.unit_price for item in self.items), ZERO)
