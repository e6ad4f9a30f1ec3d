"""Payment gateway port (abstract interface).

Defines the contract that payment gateway adapters must implement, so the
checkout flow never depends on a concrete provider.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ChargeResult:
    """Result of a payment charge attempt."""

    success: bool
    gateway_transaction_id: str | None = None
    failure_reason: str | None = None


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    async def charge(self, amount: Decimal, token: str) -> ChargeResult:
        """Charge ``amount`` to the payment instrument identified by ``token``.

        A decline is reported through ``ChargeResult.success``; transport
        problems are raised.
        """
        ...
