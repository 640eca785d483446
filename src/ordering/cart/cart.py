"""Shopping Cart aggregate — a shopper's line items keyed by product, size and color.

Adding the same product in the same size and color merges into one line
item; a different size or color is its own line. Quantity changes that would
take a line below one are ignored rather than deleting the line, and invalid
keys are no-ops. Totals are computed from the current items on every read.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from ordering.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated
from ordering.domain import logger, ordering
from ordering.pricing.engine import subtotal_of


def _normalize(value):
    """Blank size/color values are the same as no selection."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def line_key(product_id, size=None, color=None):
    return (str(product_id), _normalize(size), _normalize(color))


@ordering.entity(part_of="ShoppingCart")
class LineItem:
    product_id = Identifier(required=True)
    name = String(max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    image_url = String(max_length=500)
    quantity = Integer(required=True, min_value=1)
    size = String(max_length=50)
    color = String(max_length=50)
    added_at = DateTime()

    @property
    def key(self):
        return line_key(self.product_id, self.size, self.color)

    @property
    def line_total(self):
        return self.unit_price * self.quantity

    def to_dict(self):
        return {
            "product_id": str(self.product_id),
            "name": self.name,
            "unit_price": self.unit_price,
            "image_url": self.image_url,
            "quantity": self.quantity,
            "size": self.size,
            "color": self.color,
        }


@ordering.aggregate
class ShoppingCart:
    customer_id = Identifier()  # Nullable for guest carts
    session_id = String(max_length=255)  # For guest cart identification
    items = HasMany(LineItem)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, customer_id=None, session_id=None):
        now = datetime.now(UTC)
        return cls(
            customer_id=customer_id,
            session_id=session_id,
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------
    @property
    def total(self):
        """Subtotal of the current items; promotions apply at checkout."""
        return subtotal_of(self.items)

    @property
    def count(self):
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self):
        return not self.items

    def find_item(self, product_id, size=None, color=None):
        key = line_key(product_id, size, color)
        return next((i for i in self.items if i.key == key), None)

    def line_items(self):
        """Snapshot of the items as plain dicts, in the order they were added."""
        return [item.to_dict() for item in self.items]

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product_id, unit_price, quantity=1, name=None, image_url=None, size=None, color=None):
        """Add a line item, or grow the existing line with the same key.

        A quantity below one is ignored.
        """
        if quantity is None or quantity < 1:
            logger.debug("cart_add_ignored", cart_id=str(self.id), product_id=str(product_id), quantity=quantity)
            return

        size, color = _normalize(size), _normalize(color)
        existing = self.find_item(product_id, size, color)
        now = datetime.now(UTC)

        if existing:
            existing.quantity += quantity
            line_quantity = existing.quantity
        else:
            self.add_items(
                LineItem(
                    product_id=product_id,
                    name=name,
                    unit_price=unit_price,
                    image_url=image_url,
                    quantity=quantity,
                    size=size,
                    color=color,
                    added_at=now,
                )
            )
            line_quantity = quantity

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                product_id=str(product_id),
                size=size,
                color=color,
                quantity=quantity,
                line_quantity=line_quantity,
            )
        )

    def add_product(self, product, quantity=1, size=None, color=None):
        """Add a catalog product, capturing its current price, name and image."""
        self.add_item(
            product_id=str(product.id),
            unit_price=product.price,
            quantity=quantity,
            name=product.name,
            image_url=product.image_url,
            size=size,
            color=color,
        )

    def update_quantity(self, product_id, size, color, new_quantity):
        """Set a line's quantity. Below one, or for an unknown line, nothing changes."""
        item = self.find_item(product_id, size, color)
        if item is None or new_quantity is None or new_quantity < 1:
            logger.debug(
                "cart_quantity_update_ignored",
                cart_id=str(self.id),
                product_id=str(product_id),
                new_quantity=new_quantity,
            )
            return

        previous_quantity = item.quantity
        item.quantity = new_quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                product_id=str(product_id),
                size=item.size,
                color=item.color,
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )

    def remove_item(self, product_id, size=None, color=None):
        """Remove the matching line; does nothing if it is not in the cart."""
        item = self.find_item(product_id, size, color)
        if item is None:
            return

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                product_id=str(product_id),
                size=item.size,
                color=item.color,
            )
        )

    def clear(self):
        removed = list(self.items)
        for item in removed:
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCleared(
                cart_id=str(self.id),
                items_removed=len(removed),
            )
        )
