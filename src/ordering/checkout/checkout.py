"""Checkout — turns a priced cart into an order.

Checkout is gated on the cart having items: an empty cart sends the
shopper back to browsing instead of failing. Payment is recorded by method
only; no gateway is called.
"""

from enum import Enum

from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from ordering.domain import logger, ordering
from ordering.order.order import Order, PaymentMethod
from ordering.pricing.engine import price_cart
from ordering.pricing.settings import get_pricing_settings

BROWSE_PATH = "/products"


class CheckoutStatus(Enum):
    PLACED = "Placed"
    REDIRECT = "Redirect"


@ordering.value_object
class CheckoutResult:
    status = String(required=True, choices=CheckoutStatus)
    order_id = Identifier()
    redirect_to = String(max_length=255)
    total = Float()

    @property
    def placed(self):
        return self.status == CheckoutStatus.PLACED.value


class RepositoryOrderSink:
    """Order sink backed by the ordering domain's Order repository."""

    def submit(self, contact, items_data, pricing, shipping_method, **details):
        order = Order.place(
            contact=contact,
            items_data=items_data,
            pricing=pricing,
            shipping_method=shipping_method,
            **details,
        )
        current_domain.repository_for(Order).add(order)
        return str(order.id)


def place_order(
    cart,
    contact,
    shipping_address,
    shipping_method=None,
    billing_address=None,
    payment_method=PaymentMethod.CREDIT_CARD.value,
    promo_code=None,
    sink=None,
    settings=None,
):
    """Price ``cart`` and submit it to ``sink``; the cart is cleared once submitted.

    Returns a ``CheckoutResult``. An empty cart yields a redirect result and
    nothing is submitted.
    """
    if cart.is_empty:
        logger.info("checkout_redirected_empty_cart", cart_id=str(cart.id))
        return CheckoutResult(status=CheckoutStatus.REDIRECT.value, redirect_to=BROWSE_PATH)

    sink = sink or RepositoryOrderSink()
    settings = settings or get_pricing_settings()
    if shipping_method is None:
        shipping_method = settings.default_shipping_method
    pricing = price_cart(cart.items, promo_code=promo_code, shipping_method=shipping_method, settings=settings)

    order_id = sink.submit(
        contact=contact,
        items_data=cart.line_items(),
        pricing=pricing,
        shipping_method=shipping_method.method_id,
        shipping_address=shipping_address,
        billing_address=billing_address,
        payment_method=payment_method,
        customer_id=cart.customer_id,
    )
    cart.clear()

    logger.info("order_placed", cart_id=str(cart.id), order_id=order_id, total=pricing.total)
    return CheckoutResult(
        status=CheckoutStatus.PLACED.value,
        order_id=order_id,
        total=pricing.total,
    )
