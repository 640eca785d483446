"""Order placement — command and handler for checking out a stored cart."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.checkout.checkout import place_order
from ordering.domain import ordering
from ordering.order.order import PaymentMethod
from ordering.pricing.settings import DEFAULT_SHIPPING_METHOD_ID, get_pricing_settings


@ordering.command(part_of="ShoppingCart")
class PlaceOrder:
    cart_id = Identifier(required=True)
    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    phone = String(max_length=30)
    shipping_address = Text(required=True)  # JSON: address dict
    billing_address = Text()  # JSON: address dict, defaults to shipping address
    shipping_method = String(max_length=50, default=DEFAULT_SHIPPING_METHOD_ID)
    payment_method = String(choices=PaymentMethod, default=PaymentMethod.CREDIT_CARD.value)
    promo_code = Text()


def _load_json(value):
    return json.loads(value) if isinstance(value, str) else value


@ordering.command_handler(part_of=ShoppingCart)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        settings = get_pricing_settings()
        shipping_method = settings.shipping_method(command.shipping_method)
        if shipping_method is None:
            raise ValidationError({"shipping_method": [f"Unknown shipping method: {command.shipping_method}"]})

        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)

        result = place_order(
            cart,
            contact={
                "first_name": command.first_name,
                "last_name": command.last_name,
                "email": command.email,
                "phone": command.phone,
            },
            shipping_address=_load_json(command.shipping_address),
            billing_address=_load_json(command.billing_address) if command.billing_address else None,
            shipping_method=shipping_method,
            payment_method=command.payment_method,
            promo_code=command.promo_code,
            settings=settings,
        )
        repo.add(cart)
        return result
