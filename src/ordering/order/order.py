"""Order aggregate — the record a successful checkout leaves behind.

An order keeps its own copy of the line items, addresses and pricing as they
were at checkout; later catalog or cart changes do not touch it.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import (
    DateTime,
    Float,
    HasMany,
    Identifier,
    Integer,
    String,
    ValueObject,
)

from ordering.domain import ordering
from ordering.order.events import OrderPlaced, OrderStatusChanged


class OrderStatus(Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class PaymentMethod(Enum):
    CREDIT_CARD = "credit-card"
    UPI = "upi"
    WALLET = "wallet"
    CASH_ON_DELIVERY = "cod"


# Lifecycle transitions; delivered and cancelled orders are final
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELLED: set(),
}


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@ordering.value_object(part_of="Order")
class ShippingAddress:
    """A delivery or billing address captured at checkout time."""

    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(max_length=100)
    postal_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)


@ordering.value_object(part_of="Order")
class OrderPricing:
    """Financial summary of an order at the moment it was placed."""

    subtotal = Float(default=0.0)
    discount = Float(default=0.0)
    shipping = Float(default=0.0)
    tax = Float(default=0.0)
    total = Float(default=0.0)
    promo_code = String(max_length=100)
    currency = String(max_length=3, default="USD")


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    product_id = Identifier(required=True)
    name = String(max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    size = String(max_length=50)
    color = String(max_length=50)
    image_url = String(max_length=500)


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    customer_id = Identifier()
    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    phone = String(max_length=30)
    items = HasMany(OrderItem)
    shipping_address = ValueObject(ShippingAddress, required=True)
    billing_address = ValueObject(ShippingAddress, required=True)
    pricing = ValueObject(OrderPricing, required=True)
    shipping_method = String(required=True, max_length=50)
    payment_method = String(choices=PaymentMethod, default=PaymentMethod.CREDIT_CARD.value)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    placed_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(
        cls,
        contact,
        items_data,
        shipping_address,
        pricing,
        shipping_method,
        billing_address=None,
        payment_method=PaymentMethod.CREDIT_CARD.value,
        customer_id=None,
    ):
        """Record a new order from checkout data.

        Args:
            contact: Dict with first_name, last_name, email and optional phone.
            items_data: List of line item dicts (product_id, name, unit_price,
                        quantity, size, color, image_url).
            shipping_address: Dict with street, city, state, postal_code, country.
            pricing: ``PricingResult`` computed for the items.
            shipping_method: Id of the chosen shipping method.
            billing_address: Same shape as the shipping address; defaults to it.
        """
        now = datetime.now(UTC)
        shipping = ShippingAddress(**shipping_address)
        billing = ShippingAddress(**billing_address) if billing_address else shipping

        order = cls(
            customer_id=customer_id,
            first_name=contact.get("first_name"),
            last_name=contact.get("last_name"),
            email=contact.get("email"),
            phone=contact.get("phone"),
            shipping_address=shipping,
            billing_address=billing,
            pricing=OrderPricing(
                subtotal=pricing.subtotal,
                discount=pricing.discount,
                shipping=pricing.shipping,
                tax=pricing.tax,
                total=pricing.total,
                promo_code=pricing.promo_code if pricing.promo_applied else None,
            ),
            shipping_method=shipping_method,
            payment_method=payment_method,
            status=OrderStatus.PENDING.value,
            placed_at=now,
            updated_at=now,
        )

        for item in items_data:
            order.add_items(
                OrderItem(
                    product_id=item["product_id"],
                    name=item.get("name"),
                    unit_price=item["unit_price"],
                    quantity=item["quantity"],
                    size=item.get("size"),
                    color=item.get("color"),
                    image_url=item.get("image_url"),
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_id=str(customer_id) if customer_id else None,
                email=order.email,
                item_count=sum(item.quantity for item in order.items),
                subtotal=pricing.subtotal,
                discount=pricing.discount,
                shipping=pricing.shipping,
                tax=pricing.tax,
                total=pricing.total,
                shipping_method=shipping_method,
                payment_method=payment_method,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Tracking
    # -------------------------------------------------------------------
    def update_status(self, new_status):
        """Move the order to ``new_status`` along the fulfilment lifecycle."""
        wanted = str(new_status or "").strip().lower()
        target = next((status for status in OrderStatus if status.value.lower() == wanted), None)
        if target is None:
            raise ValidationError({"status": [f"Unknown order status: {new_status}"]})

        current = OrderStatus(self.status)
        if target not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target.value}"]})

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=current.value,
                new_status=target.value,
                changed_at=now,
            )
        )
