"""Shipping methods offered at checkout."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, String

from ordering.domain import ordering


@ordering.value_object
class ShippingMethod:
    """A selectable delivery option: flat fee, waived at or above a threshold."""

    method_id = String(required=True, max_length=50)
    name = String(required=True, max_length=100)
    description = String(max_length=255)
    fee = Float(required=True, min_value=0.0)
    free_shipping_threshold = Float(required=True)

    @invariant.post
    def method_id_must_not_be_blank(self):
        if not (self.method_id or "").strip():
            raise ValidationError({"method_id": ["Shipping method id cannot be blank"]})

    def cost_for(self, subtotal):
        """Shipping charged on an order with the given (pre-discount) subtotal."""
        if subtotal >= self.free_shipping_threshold:
            return 0.0
        return self.fee
