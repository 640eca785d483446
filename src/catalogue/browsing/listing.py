"""Catalog source — loads products from the repository for browsing.

These are the only browsing functions that touch storage; each hands the
loaded products to the pure pipeline in ``catalogue.browsing.engine``.
"""

from protean.utils.globals import current_domain

from catalogue.browsing.engine import filter_and_sort, matches_query
from catalogue.browsing.facets import SortKey
from catalogue.product.product import Product

# Upper bound on one catalog load; the storefront filters the whole working set
CATALOG_LOAD_LIMIT = 1000


def all_products():
    repo = current_domain.repository_for(Product)
    return list(repo._dao.query.limit(CATALOG_LOAD_LIMIT).all().items)


def _flagged(flag, limit=None):
    products = [p for p in all_products() if getattr(p, flag)]
    return products[:limit] if limit else products


def featured_products(limit=None):
    return _flagged("featured", limit)


def trending_products(limit=None):
    return _flagged("trending", limit)


def new_arrivals(limit=None):
    return _flagged("new_arrival", limit)


def products_in_category(category):
    """Products whose category matches ``category`` ignoring case."""
    wanted = (category or "").lower()
    return [p for p in all_products() if (p.category or "").lower() == wanted]


def search_products(query):
    """Products matching a free-text query; an empty query matches nothing."""
    if not (query or "").strip():
        return []
    return [p for p in all_products() if matches_query(p, query)]


def browse(facets=None, sort_key=SortKey.RELEVANCE):
    return filter_and_sort(all_products(), facets, sort_key)
