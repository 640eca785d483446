"""Wishlist aggregate — saved products, at most one entry per product."""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, HasMany, Identifier, String

from ordering.domain import ordering
from ordering.wishlist.events import WishlistCleared, WishlistEntryAdded, WishlistEntryRemoved


@ordering.entity(part_of="Wishlist")
class WishlistEntry:
    product_id = Identifier(required=True)
    name = String(max_length=255)
    price = Float(min_value=0.0)
    image_url = String(max_length=500)
    added_at = DateTime()


@ordering.aggregate
class Wishlist:
    customer_id = Identifier()
    session_id = String(max_length=255)
    entries = HasMany(WishlistEntry)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, customer_id=None, session_id=None):
        now = datetime.now(UTC)
        return cls(
            customer_id=customer_id,
            session_id=session_id,
            created_at=now,
            updated_at=now,
        )

    @property
    def count(self):
        return len(self.entries)

    @property
    def product_ids(self):
        return [str(entry.product_id) for entry in self.entries]

    def _entry_for(self, product_id):
        return next((e for e in self.entries if str(e.product_id) == str(product_id)), None)

    def is_present(self, product_id):
        return self._entry_for(product_id) is not None

    def toggle(self, product):
        """Save ``product`` if absent, otherwise take it off. Returns True when saved."""
        return self.toggle_entry(
            product_id=str(product.id),
            name=product.name,
            price=product.price,
            image_url=product.image_url,
        )

    def toggle_entry(self, product_id, name=None, price=None, image_url=None):
        if self.is_present(product_id):
            self.remove(product_id)
            return False

        now = datetime.now(UTC)
        self.add_entries(
            WishlistEntry(
                product_id=product_id,
                name=name,
                price=price,
                image_url=image_url,
                added_at=now,
            )
        )
        self.updated_at = now

        self.raise_(WishlistEntryAdded(wishlist_id=str(self.id), product_id=str(product_id)))
        return True

    def remove(self, product_id):
        """Take ``product_id`` off the wishlist; does nothing if it is not saved."""
        entry = self._entry_for(product_id)
        if entry is None:
            return

        self.remove_entries(entry)
        self.updated_at = datetime.now(UTC)

        self.raise_(WishlistEntryRemoved(wishlist_id=str(self.id), product_id=str(product_id)))

    def clear(self):
        removed = list(self.entries)
        for entry in removed:
            self.remove_entries(entry)
        self.updated_at = datetime.now(UTC)

        self.raise_(WishlistCleared(wishlist_id=str(self.id), entries_removed=len(removed)))
