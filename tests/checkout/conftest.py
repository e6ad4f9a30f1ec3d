"""Test data builders and in-memory collaborators for checkout tests."""

from decimal import Decimal

import pytest
from checkout.cart.cart import Cart, Item
from checkout.channel.fake_email import FakeEmailAdapter
from checkout.config import CheckoutSettings
from checkout.customer.customer import Customer, CustomerTier
from checkout.gateway.fake_adapter import FakeGateway
from checkout.repository.memory import InMemoryOrderRepository
from checkout.service import CheckoutService


class CustomerMother:
    @staticmethod
    def standard() -> Customer:
        return Customer(1, "John Smith", "john@email.com", CustomerTier.STANDARD)

    @staticmethod
    def premium() -> Customer:
        return Customer(2, "Mary Premium", "premium@email.com", CustomerTier.PREMIUM)

    @staticmethod
    def with_email(email: str) -> Customer:
        return Customer(3, "Test Customer", email, CustomerTier.STANDARD)


class CartBuilder:
    """Builds a standard customer's cart holding one 100.00 item unless told otherwise."""

    def __init__(self):
        self.owner = CustomerMother.standard()
        self.items = [Item("Default Product", Decimal("100.00"))]

    def with_owner(self, owner: Customer) -> "CartBuilder":
        self.owner = owner
        return self

    def with_items(self, items) -> "CartBuilder":
        self.items = list(items)
        return self

    def add_item(self, item: Item) -> "CartBuilder":
        self.items.append(item)
        return self

    def empty(self) -> "CartBuilder":
        self.items = []
        return self

    def with_total(self, amount) -> "CartBuilder":
        self.items = [Item("Custom Item", amount)]
        return self

    def build(self) -> Cart:
        return Cart(self.owner, self.items)


@pytest.fixture
def customers():
    return CustomerMother


@pytest.fixture
def cart_builder():
    return CartBuilder()


@pytest.fixture
def settings():
    return CheckoutSettings(locale="en_US")


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def repository():
    return InMemoryOrderRepository()


@pytest.fixture
def email_adapter():
    return FakeEmailAdapter()


@pytest.fixture
def service(gateway, repository, email_adapter, settings):
    return CheckoutService(gateway, repository, email_adapter, settings=settings)
