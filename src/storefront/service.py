"""Storefront service: the operations offered to the request layer.

Each operation returns a ``Result`` envelope instead of raising:

    {"success": True, "data": ...}
    {"success": False, "error": "Cart is empty", "kind": "state"}

Money is rendered here, and only here, as strings with two decimals.
"""

from typing import Any

from pydantic import BaseModel

from storefront.cart.cart import Cart
from storefront.catalogue.product import Product
from storefront.domain import Storefront
from storefront.exceptions import StorefrontError
from storefront.order.order import Order
from storefront.shared.money import format_money


class Result(BaseModel):
    success: bool
    data: Any = None
    error: str | None = None
    kind: str | None = None
    code: str | None = None

    @classmethod
    def ok(cls, data=None) -> "Result":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, exc: StorefrontError) -> "Result":
        return cls(success=False, error=exc.message, kind=exc.kind, code=exc.code)

    def to_dict(self) -> dict:
        if self.success:
            return {"success": True, "data": self.data}
        return {"success": False, "error": self.error, "kind": self.kind, "code": self.code}


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------
def product_view(product: Product) -> dict:
    return {"id": product.id, "name": product.name, "price": float(product.price)}


def cart_view(cart: Cart) -> dict:
    return {
        "userId": cart.user_id,
        "items": [
            {
                "id": item.product_id,
                "name": item.name,
                "price": float(item.price),
                "quantity": item.quantity,
            }
            for item in cart.items
        ],
        "itemCount": cart.item_count,
        "total": format_money(cart.total),
    }


def order_summary(order: Order) -> dict:
    return {
        "orderId": order.order_id,
        "userId": order.user_id,
        "itemCount": order.item_count,
        "subtotal": format_money(order.subtotal),
        "discountCode": order.discount_code,
        "discountAmount": format_money(order.discount_amount),
        "total": format_money(order.total),
        "createdAt": order.created_at.isoformat(),
    }


def order_view(order: Order) -> dict:
    return {
        **order_summary(order),
        "discountPercent": order.discount_percent,
        "items": [
            {
                "id": item.product_id,
                "name": item.name,
                "price": float(item.price),
                "quantity": item.quantity,
            }
            for item in order.items
        ],
    }


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------
class StorefrontService:
    def __init__(self, storefront: Storefront):
        self.storefront = storefront

    def list_products(self) -> Result:
        return Result.ok([product_view(p) for p in self.storefront.list_products()])

    def add_to_cart(self, user_id, product_id, quantity) -> Result:
        try:
            cart = self.storefront.add_to_cart(user_id, product_id, quantity)
        except StorefrontError as exc:
            return Result.fail(exc)

        item = cart.item_for(product_id)
        return Result.ok({"message": f"{item.name} added to cart", "cart": cart_view(cart)})

    def get_cart(self, user_id) -> Result:
        try:
            cart = self.storefront.get_cart(user_id)
        except StorefrontError as exc:
            return Result.fail(exc)
        return Result.ok(cart_view(cart))

    def clear_cart(self, user_id) -> Result:
        try:
            self.storefront.clear_cart(user_id)
        except StorefrontError as exc:
            return Result.fail(exc)
        return Result.ok({"message": "Cart cleared"})

    def checkout(self, user_id, discount_code=None) -> Result:
        try:
            result = self.storefront.checkout(user_id, discount_code)
        except StorefrontError as exc:
            return Result.fail(exc)

        return Result.ok(
            {
                "message": "Order placed successfully",
                "order": order_summary(result.order),
                "newDiscountCodeGenerated": result.new_discount_code,
            }
        )

    def admin_generate_discount_code(self) -> Result:
        try:
            code = self.storefront.generate_discount_code()
        except StorefrontError as exc:
            return Result.fail(exc)
        return Result.ok({"code": code})

    def admin_stats(self) -> Result:
        stats = self.storefront.compute_stats()
        return Result.ok(
            {
                "totalOrders": stats.total_orders,
                "totalItemsPurchased": stats.total_items_purchased,
                "totalPurchaseAmount": format_money(stats.total_purchase_amount),
                "totalDiscountAmount": format_money(stats.total_discount_amount),
                "discountCodes": {
                    "total": stats.discount_codes_total,
                    "available": stats.discount_codes_available,
                },
            }
        )

    def admin_list_orders(self) -> Result:
        return Result.ok([order_view(order) for order in self.storefront.list_orders()])
