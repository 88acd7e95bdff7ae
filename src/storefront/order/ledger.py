"""Order ledger: append-only history of placed orders."""

from storefront.exceptions import StateError
from storefront.order.order import Order


class OrderLedger:
    """Orders in placement order. There is no update or delete.

    Order numbers come from a monotonic counter, never from the clock, so two
    checkouts in the same instant still get distinct, increasing ids. Not
    thread-safe on its own; the ``Storefront`` engine serializes access.
    """

    def __init__(self):
        self._orders: list[Order] = []
        self._last_number = 0

    def next_number(self) -> int:
        """Number the next order will carry. Allocation happens on ``append``."""
        return self._last_number + 1

    def append(self, order: Order) -> None:
        if order.number <= self._last_number:
            raise StateError(
                {"order_id": [f"Order {order.order_id} is out of sequence"]},
                code="order_out_of_sequence",
            )
        self._orders.append(order)
        self._last_number = order.number

    def count(self) -> int:
        return len(self._orders)

    def all(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    def __len__(self):
        return self.count()

    def __iter__(self):
        return iter(self.all())
