"""Facet selections and sort keys for browsing the catalog."""

from enum import Enum

from protean.fields import Boolean, Float, List, String, Text

from catalogue.domain import catalogue

# Price window the storefront opens its filter panel with
DEFAULT_PRICE_RANGE = (0.0, 500.0)


class SortKey(Enum):
    """Orderings offered on listing and search pages."""

    RELEVANCE = "relevance"
    PRICE_LOW_HIGH = "price-low-high"
    PRICE_HIGH_LOW = "price-high-low"
    RATING = "rating"
    NEWEST = "newest"

    @classmethod
    def parse(cls, value):
        """Resolve a sort key from its wire value.

        Unknown or empty values fall back to relevance, which keeps the
        catalog's own order. ``featured`` is the label the listing page uses
        for that default.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.RELEVANCE


@catalogue.value_object
class FacetSelection:
    """One shopper's current set of filter constraints.

    Every field left empty means "no constraint" on that axis. Either price
    bound may be omitted to leave that side of the range open.
    """

    price_min: Float()
    price_max: Float()
    categories: List(content_type=String, default=list)
    colors: List(content_type=String, default=list)
    sizes: List(content_type=String, default=list)
    featured: Boolean(default=False)
    trending: Boolean(default=False)
    new_arrival: Boolean(default=False)
    query: Text()

    @classmethod
    def default(cls, **kwargs):
        """Selection with the storefront's opening price window applied."""
        price_min, price_max = DEFAULT_PRICE_RANGE
        kwargs.setdefault("price_min", price_min)
        kwargs.setdefault("price_max", price_max)
        return cls(**kwargs)

    @property
    def price_range(self):
        return (self.price_min, self.price_max)

    @property
    def is_empty(self):
        return (
            self.price_min is None
            and self.price_max is None
            and not self.categories
            and not self.colors
            and not self.sizes
            and not self.featured
            and not self.trending
            and not self.new_arrival
            and not (self.query or "").strip()
        )


@catalogue.value_object
class FacetOptions:
    """Distinct facet values present in a set of products, in first-seen order."""

    categories: List(content_type=String, default=list)
    colors: List(content_type=String, default=list)
    sizes: List(content_type=String, default=list)
    price_floor: Float()
    price_ceiling: Float()
