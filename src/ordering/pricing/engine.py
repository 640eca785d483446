"""Cart pricing engine.

Turns a list of line items plus promo and shipping inputs into a
``PricingResult``. Amounts are carried at full float precision; rounding to
cents happens only when a result is presented.
"""

from decimal import ROUND_HALF_UP, Decimal

from protean.fields import Float, String

from ordering.domain import logger, ordering
from ordering.pricing.promotions import MAX_PROMO_CODE_LENGTH, PromoCodeTable, PromoStatus, evaluate_promo
from ordering.pricing.settings import get_pricing_settings

_CENT = Decimal("0.01")


def round_currency(amount):
    """Round an amount to cents, halves away from zero."""
    return float(Decimal(str(amount)).quantize(_CENT, rounding=ROUND_HALF_UP))


@ordering.value_object
class PricingResult:
    subtotal = Float(default=0.0)
    discount = Float(default=0.0)
    shipping = Float(default=0.0)
    tax = Float(default=0.0)
    total = Float(default=0.0)
    shipping_method_id = String(max_length=50)
    promo_code = String(max_length=MAX_PROMO_CODE_LENGTH)
    promo_status = String(choices=PromoStatus, default=PromoStatus.NONE.value)
    promo_reason = String(max_length=255)

    @property
    def promo_applied(self):
        return self.promo_status == PromoStatus.APPLIED.value

    @property
    def free_shipping(self):
        return self.shipping == 0.0

    def presented(self):
        """Amounts rounded to cents for display."""
        return {
            "subtotal": round_currency(self.subtotal),
            "discount": round_currency(self.discount),
            "shipping": round_currency(self.shipping),
            "tax": round_currency(self.tax),
            "total": round_currency(self.total),
        }


def subtotal_of(line_items):
    return sum((item.unit_price * item.quantity for item in line_items), 0.0)


def price_cart(line_items, promo_code=None, shipping_method=None, settings=None, tax_rate=None, promo_codes=None):
    """Price ``line_items``.

    ``shipping_method`` defaults to the configured default method;
    ``tax_rate`` and ``promo_codes`` default to ``settings`` (or the
    environment-configured settings); ``promo_codes`` may also be a plain
    mapping of code to percent. Free shipping is judged on the subtotal
    before any discount.
    """
    settings = settings or get_pricing_settings()
    if shipping_method is None:
        shipping_method = settings.default_shipping_method
    tax_rate = settings.tax_rate if tax_rate is None else tax_rate
    if promo_codes is None:
        promo_codes = settings.promo_codes
    elif not isinstance(promo_codes, PromoCodeTable):
        promo_codes = PromoCodeTable(promo_codes)

    subtotal = subtotal_of(line_items)
    promo = evaluate_promo(promo_code, promo_codes)
    discount = promo.discount_on(subtotal)
    shipping = shipping_method.cost_for(subtotal) if shipping_method is not None else 0.0
    tax = (subtotal - discount) * tax_rate
    total = subtotal - discount + shipping + tax

    logger.debug(
        "cart_priced",
        subtotal=subtotal,
        discount=discount,
        shipping=shipping,
        tax=tax,
        total=total,
        promo_status=promo.status,
    )

    return PricingResult(
        subtotal=subtotal,
        discount=discount,
        shipping=shipping,
        tax=tax,
        total=total,
        shipping_method_id=shipping_method.method_id if shipping_method is not None else None,
        promo_code=promo.code,
        promo_status=promo.status,
        promo_reason=promo.reason,
    )
