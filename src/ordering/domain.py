"""Ordering bounded context — carts, wishlists, pricing and checkout.

Carts and wishlists are per-shopper stores of line items and saved
products. Pricing is computed on demand from a cart's current items, and
checkout hands the priced cart to the order sink.
"""

from protean.domain import Domain

from ordering.utils.logging import logger

ordering = Domain(name="ordering")

__all__ = ["ordering", "logger"]
