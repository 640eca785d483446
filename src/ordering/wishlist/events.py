"""Domain events for the Wishlist aggregate."""

from protean.fields import Identifier, Integer

from ordering.domain import ordering


@ordering.event(part_of="Wishlist")
class WishlistEntryAdded:
    """A product was saved to the wishlist."""

    __version__ = 1

    wishlist_id = Identifier(required=True)
    product_id = Identifier(required=True)


@ordering.event(part_of="Wishlist")
class WishlistEntryRemoved:
    """A product was taken off the wishlist."""

    __version__ = 1

    wishlist_id = Identifier(required=True)
    product_id = Identifier(required=True)


@ordering.event(part_of="Wishlist")
class WishlistCleared:
    __version__ = 1

    wishlist_id = Identifier(required=True)
    entries_removed = Integer(required=True)
