"""FastAPI routes for the Ordering domain — carts, wishlists, checkout and orders."""

import json

from fastapi import APIRouter
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    AddToCartRequest,
    CartIdResponse,
    CartResponse,
    CheckoutRequest,
    CheckoutResponse,
    CreateCartRequest,
    CreateWishlistRequest,
    OrderResponse,
    QuoteRequest,
    QuoteResponse,
    ShippingMethodResponse,
    ToggleWishlistRequest,
    ToggleWishlistResponse,
    UpdateCartQuantityRequest,
    UpdateOrderStatusRequest,
    WishlistIdResponse,
    WishlistResponse,
)
from ordering.cart.cart import ShoppingCart
from ordering.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from ordering.cart.management import ClearCart, CreateCart
from ordering.checkout.placement import PlaceOrder
from ordering.order.order import Order
from ordering.order.tracking import UpdateOrderStatus, orders_for_customer
from ordering.pricing.engine import price_cart
from ordering.pricing.settings import get_pricing_settings
from ordering.wishlist.management import (
    ClearWishlist,
    CreateWishlist,
    RemoveFromWishlist,
    ToggleWishlistEntry,
)
from ordering.wishlist.wishlist import Wishlist


def _cart_response(cart_id: str) -> CartResponse:
    cart = current_domain.repository_for(ShoppingCart).get(cart_id)
    return CartResponse.from_cart(cart)


def _wishlist_response(wishlist_id: str) -> WishlistResponse:
    wishlist = current_domain.repository_for(Wishlist).get(wishlist_id)
    return WishlistResponse.from_wishlist(wishlist)


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


@cart_router.post("", status_code=201, response_model=CartIdResponse)
async def create_cart(body: CreateCartRequest) -> CartIdResponse:
    command = CreateCart(
        customer_id=body.customer_id,
        session_id=body.session_id,
    )
    result = current_domain.process(command, asynchronous=False)
    return CartIdResponse(cart_id=result)


@cart_router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str) -> CartResponse:
    return _cart_response(cart_id)


@cart_router.post("/{cart_id}/items", response_model=CartResponse)
async def add_cart_item(cart_id: str, body: AddToCartRequest) -> CartResponse:
    command = AddToCart(
        cart_id=cart_id,
        product_id=body.product_id,
        unit_price=body.unit_price,
        quantity=body.quantity,
        name=body.name,
        image_url=body.image_url,
        size=body.size,
        color=body.color,
    )
    current_domain.process(command, asynchronous=False)
    return _cart_response(cart_id)


@cart_router.put("/{cart_id}/items", response_model=CartResponse)
async def update_cart_item_quantity(cart_id: str, body: UpdateCartQuantityRequest) -> CartResponse:
    command = UpdateCartQuantity(
        cart_id=cart_id,
        product_id=body.product_id,
        size=body.size,
        color=body.color,
        new_quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return _cart_response(cart_id)


@cart_router.delete("/{cart_id}/items", response_model=CartResponse)
async def remove_cart_item(
    cart_id: str, product_id: str, size: str | None = None, color: str | None = None
) -> CartResponse:
    command = RemoveFromCart(
        cart_id=cart_id,
        product_id=product_id,
        size=size,
        color=color,
    )
    current_domain.process(command, asynchronous=False)
    return _cart_response(cart_id)


@cart_router.delete("/{cart_id}", response_model=CartResponse)
async def clear_cart(cart_id: str) -> CartResponse:
    current_domain.process(ClearCart(cart_id=cart_id), asynchronous=False)
    return _cart_response(cart_id)


@cart_router.post("/{cart_id}/quote", response_model=QuoteResponse)
async def quote_cart(cart_id: str, body: QuoteRequest) -> QuoteResponse:
    """Price the cart as it stands, with an optional promo code and shipping method."""
    settings = get_pricing_settings()
    shipping_method = None
    if body.shipping_method:
        shipping_method = settings.shipping_method(body.shipping_method)
        if shipping_method is None:
            raise ValidationError({"shipping_method": [f"Unknown shipping method: {body.shipping_method}"]})

    cart = current_domain.repository_for(ShoppingCart).get(cart_id)
    pricing = price_cart(cart.items, promo_code=body.promo_code, shipping_method=shipping_method, settings=settings)
    return QuoteResponse.from_pricing(pricing)


@cart_router.post("/{cart_id}/checkout", response_model=CheckoutResponse)
async def checkout_cart(cart_id: str, body: CheckoutRequest) -> CheckoutResponse:
    """Place an order for the cart.

    An empty cart is answered with a redirect back to browsing.
    """
    command = PlaceOrder(
        cart_id=cart_id,
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        phone=body.phone,
        shipping_address=json.dumps(body.shipping.model_dump()),
        billing_address=json.dumps(body.billing.model_dump()) if body.billing else None,
        shipping_method=body.shipping_method,
        payment_method=body.payment_method,
        promo_code=body.promo_code,
    )
    result = current_domain.process(command, asynchronous=False)
    return CheckoutResponse(
        status=result.status,
        order_id=str(result.order_id) if result.order_id else None,
        redirect_to=result.redirect_to,
        total=result.total,
    )


# ---------------------------------------------------------------------------
# Shipping Methods Router
# ---------------------------------------------------------------------------
shipping_router = APIRouter(prefix="/shipping-methods", tags=["shipping"])


@shipping_router.get("", response_model=list[ShippingMethodResponse])
async def list_shipping_methods() -> list[ShippingMethodResponse]:
    return [
        ShippingMethodResponse(
            id=method.method_id,
            name=method.name,
            description=method.description,
            fee=method.fee,
            free_shipping_threshold=method.free_shipping_threshold,
        )
        for method in get_pricing_settings().shipping_methods.values()
    ]


# ---------------------------------------------------------------------------
# Wishlist Router
# ---------------------------------------------------------------------------
wishlist_router = APIRouter(prefix="/wishlists", tags=["wishlists"])


@wishlist_router.post("", status_code=201, response_model=WishlistIdResponse)
async def create_wishlist(body: CreateWishlistRequest) -> WishlistIdResponse:
    command = CreateWishlist(
        customer_id=body.customer_id,
        session_id=body.session_id,
    )
    result = current_domain.process(command, asynchronous=False)
    return WishlistIdResponse(wishlist_id=result)


@wishlist_router.get("/{wishlist_id}", response_model=WishlistResponse)
async def get_wishlist(wishlist_id: str) -> WishlistResponse:
    return _wishlist_response(wishlist_id)


@wishlist_router.post("/{wishlist_id}/toggle", response_model=ToggleWishlistResponse)
async def toggle_wishlist_entry(wishlist_id: str, body: ToggleWishlistRequest) -> ToggleWishlistResponse:
    command = ToggleWishlistEntry(
        wishlist_id=wishlist_id,
        product_id=body.product_id,
        name=body.name,
        price=body.price,
        image_url=body.image_url,
    )
    saved = current_domain.process(command, asynchronous=False)
    view = _wishlist_response(wishlist_id)
    return ToggleWishlistResponse(**view.model_dump(), saved=bool(saved))


@wishlist_router.delete("/{wishlist_id}/entries/{product_id}", response_model=WishlistResponse)
async def remove_wishlist_entry(wishlist_id: str, product_id: str) -> WishlistResponse:
    current_domain.process(
        RemoveFromWishlist(wishlist_id=wishlist_id, product_id=product_id),
        asynchronous=False,
    )
    return _wishlist_response(wishlist_id)


@wishlist_router.delete("/{wishlist_id}", response_model=WishlistResponse)
async def clear_wishlist(wishlist_id: str) -> WishlistResponse:
    current_domain.process(ClearWishlist(wishlist_id=wishlist_id), asynchronous=False)
    return _wishlist_response(wishlist_id)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("", response_model=list[OrderResponse])
async def list_orders(customer_id: str) -> list[OrderResponse]:
    return [OrderResponse.from_order(order) for order in orders_for_customer(customer_id)]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    order = current_domain.repository_for(Order).get(order_id)
    return OrderResponse.from_order(order)


@order_router.put("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> OrderResponse:
    current_domain.process(UpdateOrderStatus(order_id=order_id, status=body.status), asynchronous=False)
    order = current_domain.repository_for(Order).get(order_id)
    return OrderResponse.from_order(order)
