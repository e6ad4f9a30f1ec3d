"""Order repository port — abstract interface for order persistence."""

from abc import ABC, abstractmethod

from checkout.order.order import Order


class OrderRepository(ABC):
    """Abstract interface for order persistence adapters."""

    @abstractmethod
    async def save(self, order: Order) -> Order:
        """Persist ``order`` and return a copy carrying its assigned id.

        All other fields of the input order are preserved.
        """
        ...
