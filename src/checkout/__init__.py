"""Checkout bounded context — prices a cart, charges it and records the order.

Collaborators (payment gateway, order repository, notification channel) are
reached through the ports in ``checkout.gateway``, ``checkout.repository``
and ``checkout.channel``; ``CheckoutService`` is the only place that decides
pricing, payment-failure handling and notification-failure isolation.
"""

from checkout.cart.cart import Cart, Item
from checkout.customer.customer import Customer, CustomerTier
from checkout.order.order import Order, OrderStatus
from checkout.pricing.discount import apply_discount
from checkout.service import CheckoutService

__all__ = [
    "Cart",
    "CheckoutService",
    "Customer",
    "CustomerTier",
    "Item",
    "Order",
    "OrderStatus",
    "apply_discount",
]
