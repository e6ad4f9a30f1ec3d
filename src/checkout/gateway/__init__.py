"""Payment gateway port and the in-memory adapter used outside production."""

from checkout.gateway.fake_adapter import FakeGateway
from checkout.gateway.port import ChargeResult, PaymentGateway

__all__ = ["ChargeResult", "FakeGateway", "PaymentGateway"]
