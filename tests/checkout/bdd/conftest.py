"""Shared BDD fixtures and step definitions for the checkout flow."""

import asyncio
from decimal import Decimal

import pytest
from checkout.cart.cart import Cart, Item
from checkout.customer.customer import Customer, CustomerTier
from pytest_bdd import given, parsers, when


@pytest.fixture
def cart_items():
    return []


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a {tier} customer with email "{email}"'), target_fixture="customer")
def _(tier, email):
    return Customer(id=1, name="BDD Customer", email=email, tier=CustomerTier[tier.upper()])


@given(parsers.cfparse('the cart holds "{name}" priced {price}'))
def _(cart_items, name, price):
    cart_items.append(Item(name, Decimal(price)))


@given("the gateway declines charges")
def _(gateway):
    gateway.configure(should_succeed=False)


@given("the email server is down")
def _(email_adapter):
    email_adapter.configure(should_succeed=False, failure_reason="Email server unavailable")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the customer checks out with card "{card}"'), target_fixture="order")
def _(service, customer, cart_items, card):
    return asyncio.run(service.process_order(Cart(customer, cart_items), card))
