"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class AddressSchema(BaseModel):
    street: str
    city: str
    state: str | None = None
    postal_code: str
    country: str


class LineItemSchema(BaseModel):
    product_id: str
    name: str | None = None
    unit_price: float
    image_url: str | None = None
    quantity: int
    size: str | None = None
    color: str | None = None


class WishlistEntrySchema(BaseModel):
    product_id: str
    name: str | None = None
    price: float | None = None
    image_url: str | None = None


# ---------------------------------------------------------------------------
# Cart Request Schemas
# ---------------------------------------------------------------------------
class CreateCartRequest(BaseModel):
    customer_id: str | None = None
    session_id: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "cust-001",
                    "session_id": None,
                }
            ]
        }
    }


class AddToCartRequest(BaseModel):
    product_id: str
    unit_price: float = Field(ge=0)
    quantity: int = Field(ge=1, default=1)
    name: str | None = None
    image_url: str | None = None
    size: str | None = None
    color: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "prod-001",
                    "unit_price": 89.99,
                    "quantity": 1,
                    "name": "Linen Wrap Dress",
                    "size": "M",
                    "color": "Sand",
                }
            ]
        }
    }


class UpdateCartQuantityRequest(BaseModel):
    product_id: str
    size: str | None = None
    color: str | None = None
    quantity: int


class QuoteRequest(BaseModel):
    promo_code: str | None = None
    shipping_method: str | None = None


class CheckoutRequest(BaseModel):
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    shipping: AddressSchema
    billing: AddressSchema | None = None  # Same as shipping when omitted
    shipping_method: str = "standard"
    payment_method: str = "credit-card"
    promo_code: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "first_name": "Ada",
                    "last_name": "Lovelace",
                    "email": "ada@example.com",
                    "phone": "555-0100",
                    "shipping": {
                        "street": "123 Main St",
                        "city": "Springfield",
                        "state": "IL",
                        "postal_code": "62701",
                        "country": "United States",
                    },
                    "shipping_method": "express",
                    "payment_method": "credit-card",
                    "promo_code": "DISCOUNT10",
                }
            ]
        }
    }


class UpdateOrderStatusRequest(BaseModel):
    status: str = Field(..., min_length=1, max_length=50)


# ---------------------------------------------------------------------------
# Wishlist Request Schemas
# ---------------------------------------------------------------------------
class CreateWishlistRequest(BaseModel):
    customer_id: str | None = None
    session_id: str | None = None


class ToggleWishlistRequest(BaseModel):
    product_id: str
    name: str | None = None
    price: float | None = Field(None, ge=0)
    image_url: str | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CartIdResponse(BaseModel):
    cart_id: str


class WishlistIdResponse(BaseModel):
    wishlist_id: str


class CartResponse(BaseModel):
    cart_id: str
    items: list[LineItemSchema]
    count: int
    total: float

    @classmethod
    def from_cart(cls, cart) -> "CartResponse":
        return cls(
            cart_id=str(cart.id),
            items=[LineItemSchema(**item) for item in cart.line_items()],
            count=cart.count,
            total=cart.total,
        )


class QuoteResponse(BaseModel):
    subtotal: float
    discount: float
    shipping: float
    tax: float
    total: float
    display: dict[str, float]
    shipping_method: str | None = None
    promo_code: str | None = None
    promo_status: str
    promo_reason: str | None = None

    @classmethod
    def from_pricing(cls, pricing) -> "QuoteResponse":
        return cls(
            subtotal=pricing.subtotal,
            discount=pricing.discount,
            shipping=pricing.shipping,
            tax=pricing.tax,
            total=pricing.total,
            display=pricing.presented(),
            shipping_method=pricing.shipping_method_id,
            promo_code=pricing.promo_code,
            promo_status=pricing.promo_status,
            promo_reason=pricing.promo_reason,
        )


class CheckoutResponse(BaseModel):
    status: str
    order_id: str | None = None
    redirect_to: str | None = None
    total: float | None = None


class ShippingMethodResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    fee: float
    free_shipping_threshold: float


class WishlistResponse(BaseModel):
    wishlist_id: str
    entries: list[WishlistEntrySchema]
    count: int

    @classmethod
    def from_wishlist(cls, wishlist) -> "WishlistResponse":
        return cls(
            wishlist_id=str(wishlist.id),
            entries=[
                WishlistEntrySchema(
                    product_id=str(entry.product_id),
                    name=entry.name,
                    price=entry.price,
                    image_url=entry.image_url,
                )
                for entry in wishlist.entries
            ],
            count=wishlist.count,
        )


class ToggleWishlistResponse(WishlistResponse):
    saved: bool


class OrderResponse(BaseModel):
    order_id: str
    status: str
    customer_id: str | None = None
    email: str
    items: list[LineItemSchema]
    shipping_address: AddressSchema
    billing_address: AddressSchema
    shipping_method: str
    payment_method: str
    subtotal: float
    discount: float
    shipping: float
    tax: float
    total: float
    placed_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_order(cls, order) -> "OrderResponse":
        def _address(address):
            return AddressSchema(
                street=address.street,
                city=address.city,
                state=address.state,
                postal_code=address.postal_code,
                country=address.country,
            )

        return cls(
            order_id=str(order.id),
            status=order.status,
            customer_id=str(order.customer_id) if order.customer_id else None,
            email=order.email,
            items=[
                LineItemSchema(
                    product_id=str(item.product_id),
                    name=item.name,
                    unit_price=item.unit_price,
                    image_url=item.image_url,
                    quantity=item.quantity,
                    size=item.size,
                    color=item.color,
                )
                for item in order.items
            ],
            shipping_address=_address(order.shipping_address),
            billing_address=_address(order.billing_address),
            shipping_method=order.shipping_method,
            payment_method=order.payment_method,
            subtotal=order.pricing.subtotal,
            discount=order.pricing.discount,
            shipping=order.pricing.shipping,
            tax=order.pricing.tax,
            total=order.pricing.total,
            placed_at=order.placed_at,
            updated_at=order.updated_at,
        )
