"""Concurrent checkouts against one engine must behave like some serial order."""

from concurrent.futures import ThreadPoolExecutor

from storefront.exceptions import DiscountError

USERS = 30


def _buy(storefront, user_id):
    storefront.add_to_cart(user_id, 2, 1)
    return storefront.checkout(user_id)


def test_parallel_checkouts_get_unique_increasing_ids(storefront):
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda n: _buy(storefront, f"user-{n}"), range(USERS)))

    numbers = sorted(r.order.number for r in results)
    assert numbers == list(range(1, USERS + 1))

    orders = storefront.list_orders()
    assert [o.number for o in orders] == list(range(1, USERS + 1))

    issued = [r.new_discount_code for r in results if r.new_discount_code]
    assert len(issued) == USERS // 3
    assert len(set(issued)) == len(issued)
    assert storefront.compute_stats().discount_codes_total == USERS // 3


def test_code_redeemed_by_exactly_one_racing_checkout(storefront):
    for n in range(3):
        _buy(storefront, f"seed-{n}")
    code = "UNIBLOX-0001"

    racers = [f"racer-{n}" for n in range(10)]
    for user_id in racers:
        storefront.add_to_cart(user_id, 1, 1)

    def attempt(user_id):
        try:
            storefront.checkout(user_id, code)
        except DiscountError:
            return False
        return True

    with ThreadPoolExecutor(max_workers=10) as pool:
        outcomes = list(pool.map(attempt, racers))

    assert outcomes.count(True) == 1
    discounted = [o for o in storefront.list_orders() if o.discount_code == code]
    assert len(discounted) == 1
