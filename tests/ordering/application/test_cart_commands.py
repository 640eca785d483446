"""Application tests for cart command handlers."""

import pytest
from ordering.cart.cart import ShoppingCart
from ordering.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from ordering.cart.management import ClearCart, CreateCart
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain


def _create_cart(**kwargs):
    return current_domain.process(CreateCart(**kwargs), asynchronous=False)


def _add(cart_id, product_id="prod-1", quantity=1, size="M", color="Navy", unit_price=60.0):
    current_domain.process(
        AddToCart(
            cart_id=cart_id,
            product_id=product_id,
            unit_price=unit_price,
            quantity=quantity,
            name="Chore Jacket",
            size=size,
            color=color,
        ),
        asynchronous=False,
    )


def _cart(cart_id):
    return current_domain.repository_for(ShoppingCart).get(cart_id)


class TestCreateCart:
    def test_guest_cart(self):
        cart_id = _create_cart(session_id="sess-abc")
        cart = _cart(cart_id)
        assert cart.session_id == "sess-abc"
        assert cart.is_empty

    def test_customer_cart(self):
        cart = _cart(_create_cart(customer_id="cust-1"))
        assert str(cart.customer_id) == "cust-1"


class TestAddToCart:
    def test_add_persists_line(self):
        cart_id = _create_cart()
        _add(cart_id, quantity=2)

        cart = _cart(cart_id)
        assert cart.count == 2
        assert cart.items[0].name == "Chore Jacket"

    def test_add_same_variant_merges(self):
        cart_id = _create_cart()
        _add(cart_id)
        _add(cart_id, quantity=2)
        cart = _cart(cart_id)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 3

    def test_zero_quantity_rejected_by_command(self):
        cart_id = _create_cart()
        with pytest.raises(ValidationError):
            _add(cart_id, quantity=0)

    def test_add_writes_to_event_store(self):
        cart_id = _create_cart()
        _add(cart_id)

        messages = current_domain.event_store.store.read("ordering::shopping_cart")
        assert any(
            m.metadata.headers.type == "Ordering.CartItemAdded.v1" and m.data.get("cart_id") == cart_id
            for m in messages
        )


class TestUpdateAndRemove:
    def test_update_quantity(self):
        cart_id = _create_cart()
        _add(cart_id)
        current_domain.process(
            UpdateCartQuantity(cart_id=cart_id, product_id="prod-1", size="M", color="Navy", new_quantity=4),
            asynchronous=False,
        )
        assert _cart(cart_id).count == 4

    def test_update_to_zero_is_ignored(self):
        cart_id = _create_cart()
        _add(cart_id, quantity=2)
        current_domain.process(
            UpdateCartQuantity(cart_id=cart_id, product_id="prod-1", size="M", color="Navy", new_quantity=0),
            asynchronous=False,
        )
        assert _cart(cart_id).count == 2

    def test_remove_line(self):
        cart_id = _create_cart()
        _add(cart_id, size="M")
        _add(cart_id, size="L")
        current_domain.process(
            RemoveFromCart(cart_id=cart_id, product_id="prod-1", size="M", color="Navy"),
            asynchronous=False,
        )
        cart = _cart(cart_id)
        assert len(cart.items) == 1
        assert cart.items[0].size == "L"

    def test_clear_cart(self):
        cart_id = _create_cart()
        _add(cart_id, product_id="p-1")
        _add(cart_id, product_id="p-2")
        current_domain.process(ClearCart(cart_id=cart_id), asynchronous=False)
        assert _cart(cart_id).is_empty
