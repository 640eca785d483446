"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from ordering.cart.cart import ShoppingCart
from pytest_bdd import given, parsers, then


def _product_id(name):
    return name.lower().replace(" ", "-")


@pytest.fixture()
def outcome():
    """Container for the latest pricing or checkout result."""
    return {"pricing": None, "checkout": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an empty cart", target_fixture="cart")
def empty_cart():
    return ShoppingCart.create(session_id="sess-bdd")


@given(parsers.cfparse('the cart holds {quantity:d} of "{name}" at {price:g}'))
def cart_holds(cart, quantity, name, price):
    cart.add_item(product_id=_product_id(name), unit_price=price, quantity=quantity, name=name)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart has {count:d} line"))
@then(parsers.cfparse("the cart has {count:d} lines"))
def cart_has_lines(cart, count):
    assert len(cart.items) == count


@then(parsers.cfparse("the cart count is {count:d}"))
def cart_count_is(cart, count):
    assert cart.count == count


@then(parsers.cfparse("the cart total is {total:g}"))
def cart_total_is(cart, total):
    assert cart.total == pytest.approx(total)
