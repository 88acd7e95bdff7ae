"""Discount code: a single-use token granting a fixed percentage off an order."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field

CODE_PREFIX = "UNIBLOX"
DISCOUNT_PERCENT = 10


def format_code(sequence: int) -> str:
    return f"{CODE_PREFIX}-{sequence:04d}"


class DiscountCode(BaseModel):
    id: int = Field(ge=1)
    code: str
    discount_percent: int = Field(default=DISCOUNT_PERCENT, ge=0, le=100)
    is_used: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def issue(cls, sequence: int) -> "DiscountCode":
        return cls(id=sequence, code=format_code(sequence))

    def mark_used(self) -> bool:
        """Consume the code. Returns False when it was already used."""
        if self.is_used:
            return False
        self.is_used = True
        return True
