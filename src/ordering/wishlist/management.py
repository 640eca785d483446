"""Wishlist management — commands and handler."""

from protean import handle
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.wishlist.wishlist import Wishlist


@ordering.command(part_of="Wishlist")
class CreateWishlist:
    customer_id = Identifier()
    session_id = String(max_length=255)


@ordering.command(part_of="Wishlist")
class ToggleWishlistEntry:
    """Save a product to the wishlist, or take it off if already saved."""

    wishlist_id = Identifier(required=True)
    product_id = Identifier(required=True)
    name = String(max_length=255)
    price = Float(min_value=0.0)
    image_url = String(max_length=500)


@ordering.command(part_of="Wishlist")
class RemoveFromWishlist:
    wishlist_id = Identifier(required=True)
    product_id = Identifier(required=True)


@ordering.command(part_of="Wishlist")
class ClearWishlist:
    wishlist_id = Identifier(required=True)


@ordering.command_handler(part_of=Wishlist)
class ManageWishlistHandler:
    @handle(CreateWishlist)
    def create_wishlist(self, command):
        wishlist = Wishlist.create(
            customer_id=command.customer_id,
            session_id=command.session_id,
        )
        current_domain.repository_for(Wishlist).add(wishlist)
        return str(wishlist.id)

    @handle(ToggleWishlistEntry)
    def toggle_entry(self, command):
        repo = current_domain.repository_for(Wishlist)
        wishlist = repo.get(command.wishlist_id)
        saved = wishlist.toggle_entry(
            product_id=command.product_id,
            name=command.name,
            price=command.price,
            image_url=command.image_url,
        )
        repo.add(wishlist)
        return saved

    @handle(RemoveFromWishlist)
    def remove_from_wishlist(self, command):
        repo = current_domain.repository_for(Wishlist)
        wishlist = repo.get(command.wishlist_id)
        wishlist.remove(command.product_id)
        repo.add(wishlist)

    @handle(ClearWishlist)
    def clear_wishlist(self, command):
        repo = current_domain.repository_for(Wishlist)
        wishlist = repo.get(command.wishlist_id)
        wishlist.clear()
        repo.add(wishlist)
