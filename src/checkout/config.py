"""Checkout settings read from the environment.

    CHECKOUT_LOCALE           notification locale (default "en_US")
    CHECKOUT_CURRENCY_SYMBOL  overrides the locale's currency symbol
    ENVIRONMENT               deployment environment (default "development")
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class CheckoutSettings:
    locale: str = "en_US"
    currency_symbol: str | None = None
    environment: str = "development"


def load_settings() -> CheckoutSettings:
    return CheckoutSettings(
        locale=os.getenv("CHECKOUT_LOCALE", "en_US"),
        currency_symbol=os.getenv("CHECKOUT_CURRENCY_SYMBOL") or None,
        environment=os.getenv("ENVIRONMENT", "development").lower(),
    )
