"""FastAPI endpoints for the Catalogue domain."""

from fastapi import APIRouter, Query
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    AddProductRequest,
    FacetOptionsResponse,
    ProductIdResponse,
    ProductListResponse,
    ProductResponse,
)
from catalogue.browsing import listing
from catalogue.browsing.engine import available_facets, filter_and_sort
from catalogue.browsing.facets import FacetSelection, SortKey
from catalogue.product.creation import AddProduct
from catalogue.product.product import Product

product_router = APIRouter(prefix="/products", tags=["products"])


def _facets(
    min_price: float | None,
    max_price: float | None,
    category: list[str] | None,
    color: list[str] | None,
    size: list[str] | None,
    featured: bool,
    trending: bool,
    new: bool,
    q: str | None = None,
) -> FacetSelection:
    return FacetSelection(
        price_min=min_price,
        price_max=max_price,
        categories=category or [],
        colors=color or [],
        sizes=size or [],
        featured=featured,
        trending=trending,
        new_arrival=new,
        query=q,
    )


# --- Product endpoints ---


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: AddProductRequest) -> ProductIdResponse:
    command = AddProduct(**body.model_dump())
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.get("", response_model=ProductListResponse)
async def list_products(
    min_price: float | None = None,
    max_price: float | None = None,
    category: list[str] | None = Query(None),
    color: list[str] | None = Query(None),
    size: list[str] | None = Query(None),
    featured: bool = False,
    trending: bool = False,
    new: bool = False,
    q: str | None = None,
    sort: str = SortKey.RELEVANCE.value,
) -> ProductListResponse:
    facets = _facets(min_price, max_price, category, color, size, featured, trending, new, q=q)
    return ProductListResponse.from_products(listing.browse(facets, SortKey.parse(sort)))


@product_router.get("/search", response_model=ProductListResponse)
async def search_products(
    q: str = "",
    min_price: float | None = None,
    max_price: float | None = None,
    category: list[str] | None = Query(None),
    color: list[str] | None = Query(None),
    size: list[str] | None = Query(None),
    sort: str = SortKey.RELEVANCE.value,
) -> ProductListResponse:
    facets = _facets(min_price, max_price, category, color, size, False, False, False)
    products = filter_and_sort(listing.search_products(q), facets, SortKey.parse(sort))
    return ProductListResponse.from_products(products)


@product_router.get("/facets", response_model=FacetOptionsResponse)
async def facet_options() -> FacetOptionsResponse:
    options = available_facets(listing.all_products())
    return FacetOptionsResponse(
        categories=options.categories,
        colors=options.colors,
        sizes=options.sizes,
        price_floor=options.price_floor,
        price_ceiling=options.price_ceiling,
    )


@product_router.get("/featured", response_model=ProductListResponse)
async def featured_products(limit: int | None = Query(None, ge=1)) -> ProductListResponse:
    return ProductListResponse.from_products(listing.featured_products(limit))


@product_router.get("/trending", response_model=ProductListResponse)
async def trending_products(limit: int | None = Query(None, ge=1)) -> ProductListResponse:
    return ProductListResponse.from_products(listing.trending_products(limit))


@product_router.get("/new", response_model=ProductListResponse)
async def new_arrivals(limit: int | None = Query(None, ge=1)) -> ProductListResponse:
    return ProductListResponse.from_products(listing.new_arrivals(limit))


@product_router.get("/category/{category}", response_model=ProductListResponse)
async def products_in_category(category: str) -> ProductListResponse:
    return ProductListResponse.from_products(listing.products_in_category(category))


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse.from_product(product)
