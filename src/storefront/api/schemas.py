"""Pydantic request/response schemas for the Storefront API.

These are external contracts. Request fields are optional on purpose: an
absent field reaches the core as ``None`` and the core decides whether that
is a validation error, so HTTP and in-process callers see the same rules.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class AddToCartRequest(_CamelModel):
    product_id: int | None = None
    quantity: int | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"examples": [{"productId": 1, "quantity": 2}]},
    )


class CheckoutRequest(_CamelModel):
    user_id: str | None = None
    discount_code: str | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"examples": [{"userId": "user-1", "discountCode": "UNIBLOX-0001"}]},
    )


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class EnvelopeResponse(BaseModel):
    success: bool
    data: Any = None
    error: str | None = None
    kind: str | None = None
    code: str | None = None


class HealthResponse(BaseModel):
    status: str = "ok"
