"""In-memory order repository — sequential ids, no durability."""

from itertools import count

from checkout.exceptions import OrderPersistenceError
from checkout.order.order import Order
from checkout.repository.port import OrderRepository


class InMemoryOrderRepository(OrderRepository):
    """Stores orders in a dict; ids start at 1."""

    def __init__(self) -> None:
        self.orders: dict[int, Order] = {}
        self.should_fail = False
        self._ids = count(1)

    async def save(self, order: Order) -> Order:
        if self.should_fail:
            raise OrderPersistenceError("Order store unavailable")

        saved = order.with_id(next(self._ids))
        self.orders[saved.id] = saved
        return saved

    def get(self, order_id: int) -> Order | None:
        return self.orders.get(order_id)

    def reset(self) -> None:
        self.orders.clear()
        self.should_fail = False
        self._ids = count(1)
