"""Customer value object with loyalty tier."""

from dataclasses import dataclass
from enum import Enum


class CustomerTier(Enum):
    """Enumeration of customer loyalty tiers."""

    STANDARD = "Standard"
    PREMIUM = "Premium"


@dataclass(frozen=True)
class Customer:
    """The person checking out: identity, contact email and loyalty tier.

    The tier is fixed at construction; it accepts either a ``CustomerTier``
    or its value/name as a string.
    """

    id: int | str
    name: str
    email: str
    tier: CustomerTier = CustomerTier.STANDARD

    def __post_init__(self):
        if not isinstance(self.tier, CustomerTier):
            object.__setattr__(self, "tier", _coerce_tier(self.tier))

        email = self.email
        if not email or " " in email or email.count("@") != 1:
            raise ValueError(f"Invalid email address: {email!r}")
        local_part, domain_part = email.split("@", 1)
        if not local_part or not domain_part:
            raise ValueError(f"Invalid email address: {email!r}")


def _coerce_tier(value) -> CustomerTier:
    if value is None:
        return CustomerTier.STANDARD
    for tier in CustomerTier:
        if value in (tier.value, tier.name):
            return tier
    raise ValueError(f"Unknown customer tier: {value!r}")
