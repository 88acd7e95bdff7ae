"""Checkout: converts a user's cart into an order.

Flow:
    1. Reject a missing user or an empty cart
    2. Validate the discount code, if one was supplied
    3. Price the cart (subtotal, discount, total)
    4. Append the order to the ledger
    5. Consume the discount code
    6. Issue a new code when the order count reaches a multiple of N
    7. Empty the cart

Steps 1-3 only read state. Nothing is written until all of them pass, so a
rejected checkout leaves cart, ledger and registry exactly as they were.
"""

from dataclasses import dataclass

import structlog

from storefront.cart.store import CartStore, require_user_id
from storefront.discount.registry import DiscountCodeRegistry
from storefront.exceptions import DiscountError, StateError, ValidationError
from storefront.order.ledger import OrderLedger
from storefront.order.order import Order

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CheckoutResult:
    order: Order
    new_discount_code: str | None = None


class CheckoutProcessor:
    def __init__(
        self,
        carts: CartStore,
        registry: DiscountCodeRegistry,
        ledger: OrderLedger,
        nth_order_for_discount: int,
    ):
        self.carts = carts
        self.registry = registry
        self.ledger = ledger
        self.nth_order_for_discount = nth_order_for_discount

    def checkout(self, user_id, discount_code=None) -> CheckoutResult:
        if not user_id:
            raise ValidationError({"user_id": ["Missing required field: userId"]}, code="missing_fields")
        require_user_id(user_id)

        cart = self.carts.get(user_id)
        if cart is None or cart.is_empty:
            logger.warning("Checkout rejected", user_id=user_id, reason="cart_empty")
            raise StateError({"cart": ["Cart is empty"]}, code="cart_empty")

        discount_percent = 0
        applied_code = None
        if discount_code:
            if not self.registry.is_valid(discount_code):
                logger.warning(
                    "Checkout rejected",
                    user_id=user_id,
                    reason="invalid_discount_code",
                    discount_code=discount_code,
                )
                raise DiscountError(
                    {"discount_code": ["Invalid or already used discount code"]},
                    code="invalid_discount_code",
                )
            discount_percent = self.registry.details_of(discount_code).discount_percent
            applied_code = discount_code

        order = Order.place(
            number=self.ledger.next_number(),
            user_id=user_id,
            cart_items=cart.items,
            discount_code=applied_code,
            discount_percent=discount_percent,
        )
        self.ledger.append(order)

        if applied_code:
            self.registry.mark_used(applied_code)

        new_code = self.registry.trigger_check(self.ledger.count(), self.nth_order_for_discount)

        self.carts.clear(user_id)

        logger.info(
            "Order placed",
            order_id=order.order_id,
            user_id=user_id,
            item_count=order.item_count,
            total=str(order.total),
            discount_code=applied_code,
            new_discount_code=new_code,
        )
        return CheckoutResult(order=order, new_discount_code=new_code)
