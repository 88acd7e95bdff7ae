"""Store statistics: computed from the ledger and registry on every call."""

from dataclasses import dataclass
from decimal import Decimal

from storefront.discount.registry import DiscountCodeRegistry
from storefront.order.ledger import OrderLedger
from storefront.shared.money import ZERO


@dataclass(frozen=True)
class StoreStats:
    total_orders: int
    total_items_purchased: int
    total_purchase_amount: Decimal
    total_discount_amount: Decimal
    discount_codes_total: int
    discount_codes_available: int


class StatsAggregator:
    def __init__(self, ledger: OrderLedger, registry: DiscountCodeRegistry):
        self.ledger = ledger
        self.registry = registry

    def compute(self) -> StoreStats:
        orders = self.ledger.all()
        return StoreStats(
            total_orders=len(orders),
            total_items_purchased=sum(order.units for order in orders),
            total_purchase_amount=sum((order.total for order in orders), ZERO),
            total_discount_amount=sum((order.discount_amount for order in orders), ZERO),
            discount_codes_total=self.registry.size(),
            discount_codes_available=self.registry.available(),
        )
