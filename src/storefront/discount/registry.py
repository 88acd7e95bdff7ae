"""Discount code registry: issues, validates and invalidates discount codes.

Codes are numbered sequentially (``UNIBLOX-0001``, ``UNIBLOX-0002``, ...) and
indexed by their code string. Whether a code can still be redeemed is decided
solely by the record's ``is_used`` flag.
"""

import structlog

from storefront.discount.code import DiscountCode
from storefront.exceptions import StateError, ValidationError

logger = structlog.get_logger(__name__)


class DiscountCodeRegistry:
    """Not thread-safe on its own; the ``Storefront`` engine serializes access."""

    def __init__(self):
        self._codes: dict[str, DiscountCode] = {}
        self._sequence = 0

    def generate(self) -> str:
        self._sequence += 1
        record = DiscountCode.issue(self._sequence)
        self._codes[record.code] = record

        logger.info(
            "Discount code generated",
            code=record.code,
            discount_percent=record.discount_percent,
        )
        return record.code

    def is_valid(self, code) -> bool:
        record = self.details_of(code)
        return record is not None and not record.is_used

    def details_of(self, code) -> DiscountCode | None:
        if not isinstance(code, str):
            return None
        return self._codes.get(code)

    def mark_used(self, code) -> None:
        record = self.details_of(code)
        if record is None:
            raise ValidationError({"code": [f"Unknown discount code {code}"]}, code="unknown_code")
        if record.mark_used():
            logger.info("Discount code used", code=code)

    @staticmethod
    def _on_milestone(total_order_count: int, nth_order: int) -> bool:
        if nth_order < 1:
            raise ValidationError({"nth_order": ["Trigger threshold must be at least 1"]})
        return total_order_count > 0 and total_order_count % nth_order == 0

    def trigger_check(self, total_order_count: int, nth_order: int) -> str | None:
        """Generate a code when the order count lands on a multiple of ``nth_order``."""
        if self._on_milestone(total_order_count, nth_order):
            code = self.generate()
            logger.info(
                "Discount code issued for order milestone",
                code=code,
                order_count=total_order_count,
            )
            return code
        return None

    def force_generate(self, total_order_count: int, nth_order: int) -> str:
        """Administrative generation, allowed only while the milestone condition holds."""
        if not self._on_milestone(total_order_count, nth_order):
            raise StateError(
                {"_entity": ["Discount code generation condition not met"]},
                code="condition_not_met",
            )
        return self.generate()

    def all(self) -> tuple[DiscountCode, ...]:
        return tuple(self._codes.values())

    def size(self) -> int:
        return len(self._codes)

    def available(self) -> int:
        return sum(1 for record in self._codes.values() if not record.is_used)

    def __len__(self):
        return self.size()
