"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

# --- Product Request Schemas ---


class AddProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Linen Wrap Dress",
                    "description": "Breathable linen midi dress with a tie waist.",
                    "price": 89.99,
                    "compare_at_price": 119.99,
                    "image_url": "https://cdn.example.com/wrap-dress.jpg",
                    "category": "Women",
                    "subcategory": "Dresses",
                    "colors": ["Sand", "Olive"],
                    "sizes": ["XS", "S", "M", "L"],
                    "featured": True,
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    description: str | None = None
    price: float = Field(..., ge=0)
    compare_at_price: float | None = Field(None, ge=0)
    image_url: str | None = Field(None, max_length=500)
    image_urls: list[str] = Field(default_factory=list)
    category: str = Field(..., max_length=100)
    subcategory: str | None = Field(None, max_length=100)
    colors: list[str] = Field(default_factory=list)
    sizes: list[str] = Field(default_factory=list)
    rating: float = Field(0.0, ge=0, le=5)
    review_count: int = Field(0, ge=0)
    featured: bool = False
    trending: bool = False
    new_arrival: bool = False
    in_stock: bool = True


# --- Response Schemas ---


class ProductIdResponse(BaseModel):
    product_id: str


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float
    compare_at_price: float | None = None
    is_on_sale: bool = False
    savings: float = 0.0
    image_url: str | None = None
    image_urls: list[str] = Field(default_factory=list)
    category: str
    subcategory: str | None = None
    colors: list[str] = Field(default_factory=list)
    sizes: list[str] = Field(default_factory=list)
    rating: float = 0.0
    review_count: int = 0
    featured: bool = False
    trending: bool = False
    new_arrival: bool = False
    in_stock: bool = True
    created_at: datetime | None = None

    @classmethod
    def from_product(cls, product) -> ProductResponse:
        return cls(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price,
            compare_at_price=product.compare_at_price,
            is_on_sale=product.is_on_sale,
            savings=round(product.savings, 2),
            image_url=product.image_url,
            image_urls=list(product.image_urls or []),
            category=product.category,
            subcategory=product.subcategory,
            colors=list(product.colors or []),
            sizes=list(product.sizes or []),
            rating=product.rating or 0.0,
            review_count=product.review_count or 0,
            featured=bool(product.featured),
            trending=bool(product.trending),
            new_arrival=bool(product.new_arrival),
            in_stock=bool(product.in_stock),
            created_at=product.created_at,
        )


class ProductListResponse(BaseModel):
    count: int
    products: list[ProductResponse]

    @classmethod
    def from_products(cls, products) -> ProductListResponse:
        return cls(
            count=len(products),
            products=[ProductResponse.from_product(p) for p in products],
        )


class FacetOptionsResponse(BaseModel):
    categories: list[str]
    colors: list[str]
    sizes: list[str]
    price_floor: float | None = None
    price_ceiling: float | None = None
