"""Configurable fake payment gateway for development and testing.

Simulates a provider without any external calls. It can be told to approve,
decline, or fail at transport level, and it records every call.
"""

from decimal import Decimal
from uuid import uuid4

from checkout.exceptions import PaymentGatewayError
from checkout.gateway.port import ChargeResult, PaymentGateway


class FakeGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Card declined"
        self.transport_error: str | None = None
        self.calls: list[dict] = []

    def configure(
        self,
        should_succeed: bool,
        failure_reason: str = "Card declined",
        transport_error: str | None = None,
    ) -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.transport_error = transport_error

    async def charge(self, amount: Decimal, token: str) -> ChargeResult:
        self.calls.append({"method": "charge", "amount": amount, "token": token})

        if self.transport_error:
            raise PaymentGatewayError(self.transport_error)

        if self.should_succeed:
            return ChargeResult(
                success=True,
                gateway_transaction_id=f"fake_txn_{uuid4().hex[:12]}",
            )
        return ChargeResult(success=False, failure_reason=self.failure_reason)
