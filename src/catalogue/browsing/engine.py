"""Catalog filter/sort pipeline.

Everything here is a pure function of its arguments: the catalog is handed
in already loaded, nothing is mutated and nothing raises on odd facet
values. An inverted price range simply matches no product.
"""

from catalogue.browsing.facets import FacetOptions, FacetSelection, SortKey

_SEARCHABLE_FIELDS = ("name", "description", "category", "subcategory")

_FLAG_FACETS = (
    ("featured", "featured"),
    ("trending", "trending"),
    ("new_arrival", "new_arrival"),
)


def _within_price_range(product, facets):
    if facets.price_min is not None and product.price < facets.price_min:
        return False
    if facets.price_max is not None and product.price > facets.price_max:
        return False
    return True


def _intersects(values, selected):
    return not selected or any(value in selected for value in values or [])


def matches_query(product, query):
    """Case-insensitive substring match against the searchable text fields."""
    needle = (query or "").strip().lower()
    if not needle:
        return True
    return any(needle in (getattr(product, field, None) or "").lower() for field in _SEARCHABLE_FIELDS)


def matches(product, facets):
    """Whether ``product`` satisfies every facet in ``facets``.

    Facets combine with AND across axes; within categories, colors and sizes
    any one selected value is enough.
    """
    if not _within_price_range(product, facets):
        return False

    if facets.categories and product.category not in facets.categories:
        return False

    if not _intersects(product.colors, facets.colors):
        return False

    if not _intersects(product.sizes, facets.sizes):
        return False

    for facet_flag, product_flag in _FLAG_FACETS:
        if getattr(facets, facet_flag) and not getattr(product, product_flag):
            return False

    return matches_query(product, facets.query)


def _created_at_key(product):
    created_at = product.created_at
    return created_at.timestamp() if created_at is not None else float("-inf")


def sort_products(products, sort_key=SortKey.RELEVANCE):
    """Return ``products`` ordered by ``sort_key``.

    Sorting is stable in both directions: products that tie keep the
    relative order they arrived in.
    """
    sort_key = SortKey.parse(sort_key)
    products = list(products)

    if sort_key == SortKey.PRICE_LOW_HIGH:
        return sorted(products, key=lambda p: p.price)
    if sort_key == SortKey.PRICE_HIGH_LOW:
        return sorted(products, key=lambda p: p.price, reverse=True)
    if sort_key == SortKey.RATING:
        return sorted(products, key=lambda p: p.rating or 0.0, reverse=True)
    if sort_key == SortKey.NEWEST:
        return sorted(products, key=_created_at_key, reverse=True)
    return products


def filter_and_sort(products, facets=None, sort_key=SortKey.RELEVANCE):
    """Filter ``products`` by ``facets`` and order the survivors by ``sort_key``."""
    facets = facets if facets is not None else FacetSelection()
    return sort_products((p for p in products if matches(p, facets)), sort_key)


def available_facets(products):
    """Collect the facet values a filter panel should offer for ``products``."""
    categories, colors, sizes = {}, {}, {}
    prices = []
    for product in products:
        categories.setdefault(product.category, None)
        colors.update(dict.fromkeys(product.colors or []))
        sizes.update(dict.fromkeys(product.sizes or []))
        prices.append(product.price)

    return FacetOptions(
        categories=list(categories),
        colors=list(colors),
        sizes=list(sizes),
        price_floor=min(prices) if prices else None,
        price_ceiling=max(prices) if prices else None,
    )
