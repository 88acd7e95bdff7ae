"""Shopping cart: a per-user, mutable staging area of line items.

A cart is created lazily on first access and is never deleted: checkout and
clear only empty its item list. Lines are unique by product; adding a product
that is already in the cart increases the line's quantity.
"""

from datetime import UTC, datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from storefront.catalogue.product import Product
from storefront.shared.money import ZERO


class CartItem(BaseModel):
    product_id: int
    name: str
    price: Decimal  # Snapshot taken when the product was first added
    quantity: int = Field(ge=1)

    model_config = {"validate_assignment": True}

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


class Cart(BaseModel):
    user_id: str
    items: list[CartItem] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, user_id):
        return cls(user_id=user_id)

    def add_item(self, product: Product, quantity: int) -> CartItem:
        """Add a product to the cart (or increase quantity if already present)."""
        existing = self.item_for(product.id)
        if existing:
            existing.quantity += quantity
            return existing

        item = CartItem(
            product_id=product.id,
            name=product.name,
            price=product.price,
            quantity=quantity,
        )
        self.items.append(item)
        return item

    def item_for(self, product_id) -> CartItem | None:
        return next((i for i in self.items if i.product_id == product_id), None)

    def clear(self) -> None:
        self.items = []

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def item_count(self) -> int:
        """Number of distinct lines, not units."""
        return len(self.items)

    @property
    def total(self) -> Decimal:
        return sum((item.line_total for item in self.items), ZERO)
