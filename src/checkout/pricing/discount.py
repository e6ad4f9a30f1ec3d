"""Loyalty discount policy.

Rates are looked up per tier; a tier missing from ``TIER_DISCOUNT_RATES``
pays the full subtotal. Adding a tier means adding a row here, not touching
the checkout flow.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from checkout.customer.customer import CustomerTier
from checkout.domain import CENT, ZERO

TIER_DISCOUNT_RATES: dict[CustomerTier, Decimal] = {
    CustomerTier.PREMIUM: Decimal("0.10"),
}


def discount_rate(tier: CustomerTier) -> Decimal:
    return TIER_DISCOUNT_RATES.get(tier, ZERO)


def apply_discount(subtotal: Decimal, tier: CustomerTier) -> Decimal:
    """Return the amount to charge for ``subtotal`` at the given tier.

    Discounted amounts are rounded half-up to cents. Undiscounted subtotals
    are returned unchanged.
    """
    rate = discount_rate(tier)
    if rate == ZERO:
        return subtotal
    with localcontext() as ctx:
        # room for the exact product and for quantizing very large totals to cents
        ctx.prec = max(ctx.prec, len(subtotal.as_tuple().digits) + 4, subtotal.adjusted() + 4)
        return (subtotal * (Decimal("1") - rate)).quantize(CENT, rounding=ROUND_HALF_UP)
