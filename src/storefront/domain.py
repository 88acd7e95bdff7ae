"""Storefront engine: composition root of the order-processing core.

Owns the in-memory store (carts, discount codes, orders) and the lock that
serializes every mutation. One engine is built at application startup; tests
build their own and wipe it with ``_data_reset``.
"""

import threading

import structlog

from storefront.cart.cart import Cart
from storefront.cart.store import CartStore
from storefront.catalogue.product import Product, ProductCatalog
from storefront.checkout.processor import CheckoutProcessor, CheckoutResult
from storefront.config import StorefrontConfig
from storefront.discount.registry import DiscountCodeRegistry
from storefront.order.ledger import OrderLedger
from storefront.order.order import Order
from storefront.stats.aggregator import StatsAggregator, StoreStats

logger = structlog.get_logger(__name__)


class Storefront:
    def __init__(self, config: StorefrontConfig | None = None, catalog: ProductCatalog | None = None):
        self.config = config or StorefrontConfig()
        self.catalog = catalog or ProductCatalog.default()
        self._lock = threading.RLock()
        self._build_store()

    def _build_store(self) -> None:
        self.carts = CartStore(self.catalog)
        self.registry = DiscountCodeRegistry()
        self.ledger = OrderLedger()
        self.checkout_processor = CheckoutProcessor(
            carts=self.carts,
            registry=self.registry,
            ledger=self.ledger,
            nth_order_for_discount=self.config.nth_order_for_discount,
        )
        self.stats = StatsAggregator(self.ledger, self.registry)

    def _data_reset(self) -> None:
        """Discard all carts, codes and orders. Test use only."""
        with self._lock:
            self._build_store()

    # -------------------------------------------------------------------
    # Catalogue
    # -------------------------------------------------------------------
    def list_products(self) -> tuple[Product, ...]:
        return self.catalog.all()

    # -------------------------------------------------------------------
    # Cart
    # -------------------------------------------------------------------
    def add_to_cart(self, user_id, product_id, quantity) -> Cart:
        with self._lock:
            cart = self.carts.add_item(user_id, product_id, quantity)
            return cart.model_copy(deep=True)

    def get_cart(self, user_id) -> Cart:
        with self._lock:
            return self.carts.get_or_create(user_id).model_copy(deep=True)

    def clear_cart(self, user_id) -> None:
        with self._lock:
            self.carts.clear(user_id)

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def checkout(self, user_id, discount_code=None) -> CheckoutResult:
        with self._lock:
            return self.checkout_processor.checkout(user_id, discount_code)

    # -------------------------------------------------------------------
    # Administration
    # -------------------------------------------------------------------
    def generate_discount_code(self) -> str:
        with self._lock:
            order_count = self.ledger.count()
            code = self.registry.force_generate(order_count, self.config.nth_order_for_discount)
            logger.info("Discount code generated by admin", code=code, order_count=order_count)
            return code

    def compute_stats(self) -> StoreStats:
        with self._lock:
            return self.stats.compute()

    def list_orders(self) -> tuple[Order, ...]:
        with self._lock:
            return self.ledger.all()
