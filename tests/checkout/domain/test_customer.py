"""Tests for the Customer value object."""

import pytest
from checkout.customer.customer import Customer, CustomerTier


class TestCustomer:
    def test_defaults_to_standard_tier(self):
        customer = Customer(1, "John Smith", "john@email.com")
        assert customer.tier is CustomerTier.STANDARD

    def test_unspecified_tier_is_standard(self):
        assert Customer(1, "John Smith", "john@email.com", None).tier is CustomerTier.STANDARD

    def test_premium(self, customers):
        assert customers.premium().tier is CustomerTier.PREMIUM

    @pytest.mark.parametrize("raw", ["Premium", "PREMIUM"])
    def test_tier_from_string(self, raw):
        assert Customer(1, "Mary", "mary@email.com", raw).tier is CustomerTier.PREMIUM

    def test_unknown_tier_rejected(self):
        with pytest.raises(ValueError, match="Unknown customer tier"):
            Customer(1, "Mary", "mary@email.com", "Diamond")

    @pytest.mark.parametrize("email", ["", "no-at-sign", "a@b@c", "@email.com", "john@", "jo hn@email.com"])
    def test_invalid_email_rejected(self, email):
        with pytest.raises(ValueError, match="Invalid email"):
            Customer(1, "John", email)

    def test_tier_cannot_change(self, customers):
        customer = customers.standard()
        with pytest.raises(AttributeError):
            customer.tier = CustomerTier.PREMIUM
