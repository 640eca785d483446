"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A priced cart was submitted at checkout and recorded as an order."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_id = Identifier()
    email = String(required=True)
    item_count = Integer(required=True)
    subtotal = Float(required=True)
    discount = Float()
    shipping = Float()
    tax = Float()
    total = Float(required=True)
    shipping_method = String(required=True)
    payment_method = String(required=True)
    placed_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderStatusChanged:
    """An order moved along its fulfilment lifecycle."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)
