"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from pytest_bdd import given, parsers, then
from storefront.cart.cart import Cart


@pytest.fixture()
def error():
    """Container for a captured validation error."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps: Cart
# ---------------------------------------------------------------------------
@given("an open cart", target_fixture="cart")
def open_cart():
    cart = Cart.open(session_id="sess-001")
    cart._events.clear()
    return cart


@given(
    parsers.cfparse('the cart holds {qty:d} of product "{product_id}" in colour "{color}" size "{size}"'),
    target_fixture="cart",
)
def cart_holding(cart, qty, product_id, color, size):
    cart.add_item(product_id=product_id, quantity=qty, color=color, size=size)
    cart._events.clear()
    return cart


# ---------------------------------------------------------------------------
# Then steps: Cart
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart has {count:d} item"))
def cart_has_n_items_singular(cart, count):
    assert len(cart.items) == count


@then(parsers.cfparse("the cart has {count:d} items"))
def cart_has_n_items(cart, count):
    assert len(cart.items) == count
