"""Cart store: holds one cart per user for the lifetime of the process."""

import structlog

from storefront.cart.cart import Cart
from storefront.catalogue.product import ProductCatalog
from storefront.exceptions import NotFoundError, ValidationError

logger = structlog.get_logger(__name__)


def _is_missing(value) -> bool:
    return value is None or value == ""


def require_user_id(user_id) -> None:
    if not isinstance(user_id, str):
        raise ValidationError({"user_id": ["userId must be a string"]}, code="invalid_user_id")


class CartStore:
    """Per-user carts, validated against the injected catalogue.

    Not thread-safe on its own; the ``Storefront`` engine serializes access.
    """

    def __init__(self, catalog: ProductCatalog):
        self.catalog = catalog
        self._carts: dict[str, Cart] = {}

    def get(self, user_id) -> Cart | None:
        """Look up a cart without creating one."""
        return self._carts.get(user_id)

    def get_or_create(self, user_id) -> Cart:
        require_user_id(user_id)
        cart = self._carts.get(user_id)
        if cart is None:
            cart = Cart.create(user_id)
            self._carts[user_id] = cart
        return cart

    def add_item(self, user_id, product_id, quantity) -> Cart:
        if any(_is_missing(value) for value in (user_id, product_id, quantity)):
            raise ValidationError(
                {"_entity": ["Missing required fields: userId, productId, quantity"]},
                code="missing_fields",
            )
        require_user_id(user_id)

        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]}, code="invalid_quantity")

        product = None if isinstance(product_id, bool) else self.catalog.get(product_id)
        if product is None:
            raise NotFoundError({"product_id": ["Product not found"]}, code="product_not_found")

        cart = self.get_or_create(user_id)
        item = cart.add_item(product, quantity)

        logger.info(
            "Item added to cart",
            user_id=user_id,
            product_id=product.id,
            added=quantity,
            line_quantity=item.quantity,
        )
        return cart

    def clear(self, user_id) -> None:
        require_user_id(user_id)
        cart = self._carts.get(user_id)
        if cart is not None:
            cart.clear()
            logger.info("Cart cleared", user_id=user_id)

    @staticmethod
    def total(cart: Cart):
        return cart.total

    def __len__(self):
        return len(self._carts)
