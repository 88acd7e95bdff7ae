"""FastAPI routes for the Storefront: products, carts, checkout and admin."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from storefront.api.schemas import AddToCartRequest, CheckoutRequest, EnvelopeResponse
from storefront.service import Result, StorefrontService
from storefront.utils.logging import add_context

STATUS_BY_KIND = {
    "validation": 400,
    "not_found": 404,
    "state": 400,
    "discount": 400,
}


def get_service(request: Request) -> StorefrontService:
    return StorefrontService(request.app.state.storefront)


def _respond(result: Result) -> JSONResponse:
    status_code = 200 if result.success else STATUS_BY_KIND.get(result.kind, 400)
    return JSONResponse(status_code=status_code, content=result.to_dict())


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/api/products", tags=["products"])


@product_router.get("", response_model=EnvelopeResponse)
async def list_products(service: StorefrontService = Depends(get_service)) -> JSONResponse:
    return _respond(service.list_products())


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/api/cart", tags=["cart"])


@cart_router.post("/{user_id}/add", response_model=EnvelopeResponse)
async def add_to_cart(
    user_id: str,
    body: AddToCartRequest,
    service: StorefrontService = Depends(get_service),
) -> JSONResponse:
    add_context(user_id=user_id)
    return _respond(service.add_to_cart(user_id, body.product_id, body.quantity))


@cart_router.get("/{user_id}", response_model=EnvelopeResponse)
async def get_cart(user_id: str, service: StorefrontService = Depends(get_service)) -> JSONResponse:
    return _respond(service.get_cart(user_id))


@cart_router.delete("/{user_id}/clear", response_model=EnvelopeResponse)
async def clear_cart(user_id: str, service: StorefrontService = Depends(get_service)) -> JSONResponse:
    add_context(user_id=user_id)
    return _respond(service.clear_cart(user_id))


# ---------------------------------------------------------------------------
# Checkout Router
# ---------------------------------------------------------------------------
checkout_router = APIRouter(prefix="/api/checkout", tags=["checkout"])


@checkout_router.post("", response_model=EnvelopeResponse)
async def checkout(body: CheckoutRequest, service: StorefrontService = Depends(get_service)) -> JSONResponse:
    """Place an order from the user's cart.

    1. Validate the cart and optional discount code
    2. Record the order and consume the code
    3. Report any discount code issued for reaching an order milestone
    """
    add_context(user_id=body.user_id)
    return _respond(service.checkout(body.user_id, body.discount_code))


# ---------------------------------------------------------------------------
# Admin Router
# ---------------------------------------------------------------------------
admin_router = APIRouter(prefix="/api/admin", tags=["admin"])


@admin_router.post("/discount-codes/generate", response_model=EnvelopeResponse)
async def generate_discount_code(service: StorefrontService = Depends(get_service)) -> JSONResponse:
    return _respond(service.admin_generate_discount_code())


@admin_router.get("/stats", response_model=EnvelopeResponse)
async def stats(service: StorefrontService = Depends(get_service)) -> JSONResponse:
    return _respond(service.admin_stats())


@admin_router.get("/orders", response_model=EnvelopeResponse)
async def list_orders(service: StorefrontService = Depends(get_service)) -> JSONResponse:
    return _respond(service.admin_list_orders())
