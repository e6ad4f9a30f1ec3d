"""Order produced by a successful checkout."""

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum


class OrderStatus(Enum):
    PROCESSED = "Processed"


@dataclass(frozen=True)
class Order:
    """Charged amount and status of a checkout; ``id`` is set by the repository."""

    final_total: Decimal
    status: OrderStatus = OrderStatus.PROCESSED
    customer_id: int | str | None = None
    id: int | str | None = None

    def with_id(self, order_id: int | str) -> "Order":
        """Return a copy carrying the repository-assigned identifier."""
        return replace(self, id=order_id)
