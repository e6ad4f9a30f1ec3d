"""Checkout service — prices a cart, charges it, stores and announces the order.

Flow for one ``process_order`` call:
    STARTED → CHARGING → CHARGE_FAILED              (returns None)
                       → CHARGED → PERSISTING → PERSISTED → NOTIFYING → DONE

A declined charge is a business outcome, not an error. Gateway and repository
exceptions propagate to the caller untouched. Notification failures are logged
and never change the result.
"""

from enum import Enum

import structlog

from checkout.cart.cart import Cart
from checkout.channel.email_port import NotificationService
from checkout.config import CheckoutSettings, load_settings
from checkout.gateway.port import PaymentGateway
from checkout.order.order import Order, OrderStatus
from checkout.pricing.discount import apply_discount
from checkout.repository.port import OrderRepository
from checkout.templates import get_template

logger = structlog.get_logger(__name__)


class CheckoutStage(Enum):
    STARTED = "started"
    CHARGING = "charging"
    CHARGE_FAILED = "charge_failed"
    CHARGED = "charged"
    PERSISTING = "persisting"
    PERSISTED = "persisted"
    NOTIFYING = "notifying"
    DONE = "done"


class CheckoutService:
    def __init__(
        self,
        gateway: PaymentGateway,
        repository: OrderRepository,
        notifier: NotificationService,
        settings: CheckoutSettings | None = None,
    ) -> None:
        self._gateway = gateway
        self._repository = repository
        self._notifier = notifier
        self._settings = settings or load_settings()
        self._template = get_template(self._settings.locale)

    async def process_order(self, cart: Cart, payment_token: str) -> Order | None:
        """Check out ``cart``, charging the instrument behind ``payment_token``.

        Returns the stored order, or None when the gateway declines the charge.
        """
        with structlog.contextvars.bound_contextvars(customer_id=str(cart.owner.id)):
            _enter(CheckoutStage.STARTED)
            subtotal = cart.subtotal()
            final_total = apply_discount(subtotal, cart.owner.tier)

            _enter(CheckoutStage.CHARGING, amount=str(final_total))
            result = await self._gateway.charge(final_total, payment_token)
            if not result.success:
                _enter(CheckoutStage.CHARGE_FAILED)
                logger.info(
                    "Payment declined",
                    amount=str(final_total),
                    reason=getattr(result, "failure_reason", None),
                )
                return None
            _enter(CheckoutStage.CHARGED)

            order = Order(
                final_total=final_total,
                status=OrderStatus.PROCESSED,
                customer_id=cart.owner.id,
            )

            _enter(CheckoutStage.PERSISTING)
            saved = await self._repository.save(order)
            _enter(CheckoutStage.PERSISTED, order_id=str(saved.id))

            _enter(CheckoutStage.NOTIFYING)
            await self._notify(cart.owner.email, saved)

            _enter(CheckoutStage.DONE)
            logger.info(
                "Order processed",
                order_id=str(saved.id),
                subtotal=str(subtotal),
                final_total=str(final_total),
            )
            return saved

    async def _notify(self, recipient: str, order: Order) -> None:
        try:
            message = self._template.render(
                {"order_id": order.id, "amount": order.final_total},
                currency_symbol=self._settings.currency_symbol,
            )
            delivered = await self._notifier.send(recipient, message["subject"], message["body"])
        except Exception as exc:
            logger.error("Failed to send email", error=str(exc))
            return

        if delivered is False:
            logger.warning("Email not accepted for delivery", order_id=str(order.id))


def _enter(stage: CheckoutStage, **fields) -> None:
    logger.debug("Checkout stage", stage=stage.value, **fields)
