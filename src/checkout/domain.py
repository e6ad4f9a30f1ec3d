"""Shared helpers for the checkout context's value objects."""

from decimal import Decimal, InvalidOperation

ZERO = Decimal("0")
CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    """Convert a price given as int, float, str or Decimal to an exact Decimal.

    Floats go through ``str`` first so ``150.00`` stays ``Decimal("150.0")``
    instead of carrying binary noise.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid monetary amount: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValueError(f"Invalid monetary amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Invalid monetary amount: {value!r}")
    return amount
