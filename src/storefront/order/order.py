"""Order: an immutable record of a completed checkout.

Items are a deep snapshot of the cart lines at checkout time, so emptying or
refilling the cart afterwards never changes a placed order. Pricing is held
at full precision:

    discount_amount = subtotal * discount_percent / 100
    total           = subtotal - discount_amount
"""

from datetime import UTC, datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from storefront.shared.money import ZERO, percent_of


def format_order_id(number: int) -> str:
    return f"ORDER-{number:06d}"


class OrderItem(BaseModel):
    product_id: int
    name: str
    price: Decimal
    quantity: int = Field(ge=1)

    model_config = {"frozen": True}

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


class Order(BaseModel):
    order_id: str
    number: int = Field(ge=1)
    user_id: str
    items: tuple[OrderItem, ...]
    subtotal: Decimal
    discount_code: str | None = None
    discount_percent: int = Field(default=0, ge=0, le=100)
    discount_amount: Decimal = ZERO
    total: Decimal
    created_at: datetime

    model_config = {"frozen": True}

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, number, user_id, cart_items, discount_code=None, discount_percent=0):
        """Build an order from cart lines, pricing it at full precision."""
        items = tuple(
            OrderItem(
                product_id=item.product_id,
                name=item.name,
                price=item.price,
                quantity=item.quantity,
            )
            for item in cart_items
        )
        subtotal = sum((item.line_total for item in items), ZERO)
        discount_amount = percent_of(subtotal, discount_percent)

        return cls(
            order_id=format_order_id(number),
            number=number,
            user_id=user_id,
            items=items,
            subtotal=subtotal,
            discount_code=discount_code,
            discount_percent=discount_percent,
            discount_amount=discount_amount,
            total=subtotal - discount_amount,
            created_at=datetime.now(UTC),
        )

    @property
    def item_count(self) -> int:
        """Number of distinct lines."""
        return len(self.items)

    @property
    def units(self) -> int:
        """Number of units across all lines."""
        return sum(item.quantity for item in self.items)
