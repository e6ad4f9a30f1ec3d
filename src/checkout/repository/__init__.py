"""Order repository port and in-memory adapter."""

from checkout.repository.memory import InMemoryOrderRepository
from checkout.repository.port import OrderRepository

__all__ = ["InMemoryOrderRepository", "OrderRepository"]
