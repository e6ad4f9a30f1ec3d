"""Exceptions raised by checkout adapters.

A declined payment is not an exception; ``CheckoutService`` reports it by
returning ``None``. These classes cover transport-level failures only.
"""


class CheckoutError(Exception):
    """Base class for checkout infrastructure failures."""


class PaymentGatewayError(CheckoutError):
    """The payment gateway could not be reached or answered garbage."""


class OrderPersistenceError(CheckoutError):
    """The order could not be stored."""


class NotificationDeliveryError(CheckoutError):
    """The notification channel failed to deliver a message."""
