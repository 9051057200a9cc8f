"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from deliveryfee.api.formatting import format_distance, format_money
from deliveryfee.domain.entities import Coordinate, DeliveryRequest, PriceBreakdown

# Major units with up to two decimals, "." as decimal separator
CART_VALUE_PATTERN = re.compile(r"^\d{1,7}(\.\d{1,2})?$")


# ── Requests ──────────────────────────────────────────────────────────


class DeliveryPriceRequest(BaseModel):
    venue_slug: str = Field(..., min_length=1, pattern=r"^[a-zA-Z-]+$")
    cart_value: str = Field(
        ...,
        description="Cart value in major currency units, e.g. '10' or '8.50'.",
        examples=["10.00"],
    )
    user_latitude: float = Field(..., ge=-90, le=90)
    user_longitude: float = Field(..., ge=-180, le=180)

    @field_validator("cart_value", mode="before")
    @classmethod
    def _cart_value_format(cls, value: Any) -> str:
        if isinstance(value, bool):
            raise ValueError("cart_value must be a number")
        if isinstance(value, (int, float)):
            value = str(value)
        if not isinstance(value, str):
            raise ValueError("cart_value must be a string or number")
        value = value.strip()
        if not CART_VALUE_PATTERN.match(value):
            raise ValueError("cart_value must be a non-negative amount with at most two decimals")
        return value

    @property
    def cart_value_minor_units(self) -> int:
        return int(Decimal(self.cart_value) * 100)

    def to_domain(self) -> DeliveryRequest:
        return DeliveryRequest(
            venue_slug=self.venue_slug,
            cart_value=self.cart_value_minor_units,
            user_location=Coordinate(
                latitude=self.user_latitude, longitude=self.user_longitude
            ),
        )


# ── Responses ─────────────────────────────────────────────────────────


class FormattedBreakdown(BaseModel):
    cart_value: str
    small_order_surcharge: str
    delivery_fee: str
    delivery_distance: str
    total_price: str


class PriceBreakdownResponse(BaseModel):
    """Amounts in minor currency units plus their display strings."""

    cart_value: int
    small_order_surcharge: int
    delivery_fee: int
    delivery_distance: int
    total_price: int
    formatted: FormattedBreakdown

    @classmethod
    def from_breakdown(
        cls, breakdown: PriceBreakdown, currency_symbol: str
    ) -> "PriceBreakdownResponse":
        return cls(
            cart_value=breakdown.cart_value,
            small_order_surcharge=breakdown.small_order_surcharge,
            delivery_fee=breakdown.delivery_fee,
            delivery_distance=breakdown.delivery_distance,
            total_price=breakdown.total_price,
            formatted=FormattedBreakdown(
                cart_value=format_money(breakdown.cart_value, currency_symbol),
                small_order_surcharge=format_money(
                    breakdown.small_order_surcharge, currency_symbol
                ),
                delivery_fee=format_money(breakdown.delivery_fee, currency_symbol),
                delivery_distance=format_distance(breakdown.delivery_distance),
                total_price=format_money(breakdown.total_price, currency_symbol),
            ),
        )


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
    code: str
    errors: Optional[list[dict[str, Any]]] = None
