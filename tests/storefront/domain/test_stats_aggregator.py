from decimal import Decimal

import pytest
from storefront.cart.cart import CartItem
from storefront.discount.registry import DiscountCodeRegistry
from storefront.order.ledger import OrderLedger
from storefront.order.order import Order
from storefront.stats.aggregator import StatsAggregator


@pytest.fixture()
def ledger():
    return OrderLedger()


@pytest.fixture()
def registry():
    return DiscountCodeRegistry()


@pytest.fixture()
def aggregator(ledger, registry):
    return StatsAggregator(ledger, registry)


def _append(ledger, lines, percent=0, code=None):
    items = [CartItem(product_id=pid, name="P", price=Decimal(price), quantity=qty) for pid, price, qty in lines]
    ledger.append(
        Order.place(
            number=ledger.next_number(),
            user_id="u",
            cart_items=items,
            discount_code=code,
            discount_percent=percent,
        )
    )


def test_empty_store(aggregator):
    stats = aggregator.compute()
    assert stats.total_orders == 0
    assert stats.total_items_purchased == 0
    assert stats.total_purchase_amount == 0
    assert stats.total_discount_amount == 0
    assert stats.discount_codes_total == 0
    assert stats.discount_codes_available == 0


def test_totals_over_orders(aggregator, ledger):
    _append(ledger, [(1, "999.99", 2)])
    _append(ledger, [(1, "999.99", 2)])

    stats = aggregator.compute()
    assert stats.total_orders == 2
    assert stats.total_items_purchased == 4
    assert stats.total_purchase_amount == Decimal("3999.96")


def test_discount_amounts_summed(aggregator, ledger):
    _append(ledger, [(2, "29.99", 1)], percent=10, code="UNIBLOX-0001")
    _append(ledger, [(3, "79.99", 1)])

    stats = aggregator.compute()
    assert stats.total_discount_amount == Decimal("2.999")
    assert stats.total_purchase_amount == Decimal("26.991") + Decimal("79.99")


def test_reflects_current_state_on_every_call(aggregator, ledger, registry):
    assert aggregator.compute().discount_codes_total == 0

    code = registry.generate()
    registry.generate()
    assert aggregator.compute().discount_codes_available == 2

    registry.mark_used(code)
    _append(ledger, [(1, "1.00", 3)])
    stats = aggregator.compute()
    assert stats.discount_codes_total == 2
    assert stats.discount_codes_available == 1
    assert stats.total_orders == 1
