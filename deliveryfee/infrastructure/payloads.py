"""
Pydantic models for the venue API payloads.

Only the fields the calculator needs are declared; everything else in the
upstream documents is ignored.  Parsing fails loudly on missing or mistyped
fields so malformed venues never reach the pricing engine.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from deliveryfee.domain.entities import (
    Coordinate,
    DistanceRange,
    VenuePricingConfig,
)


# ── /static ───────────────────────────────────────────────────────────


class LocationPayload(BaseModel):
    # GeoJSON order: [longitude, latitude]
    coordinates: tuple[float, float]


class StaticVenueRaw(BaseModel):
    location: LocationPayload


class StaticVenuePayload(BaseModel):
    venue_raw: StaticVenueRaw

    def to_coordinate(self) -> Coordinate:
        longitude, latitude = self.venue_raw.location.coordinates
        return Coordinate(latitude=latitude, longitude=longitude)


# ── /dynamic ──────────────────────────────────────────────────────────


class DistanceRangePayload(BaseModel):
    min: float = Field(..., ge=0)
    max: float = Field(..., ge=0)
    a: int
    b: int


class DeliveryPricingPayload(BaseModel):
    base_price: int = Field(..., ge=0)
    distance_ranges: list[DistanceRangePayload] = Field(..., min_length=1)

    @field_validator("distance_ranges")
    @classmethod
    def _ascending(cls, ranges: list[DistanceRangePayload]) -> list[DistanceRangePayload]:
        mins = [r.min for r in ranges]
        if mins != sorted(mins):
            raise ValueError("distance_ranges must be ordered by min")
        return ranges


class DeliverySpecsPayload(BaseModel):
    order_minimum_no_surcharge: int = Field(..., ge=0)
    delivery_pricing: DeliveryPricingPayload


class DynamicVenueRaw(BaseModel):
    delivery_specs: DeliverySpecsPayload


class DynamicVenuePayload(BaseModel):
    venue_raw: DynamicVenueRaw

    def to_pricing_config(self) -> VenuePricingConfig:
        specs = self.venue_raw.delivery_specs
        return VenuePricingConfig(
            order_minimum_no_surcharge=specs.order_minimum_no_surcharge,
            base_price=specs.delivery_pricing.base_price,
            distance_ranges=tuple(
                DistanceRange(min=r.min, max=r.max, a=r.a, b=r.b)
                for r in specs.delivery_pricing.distance_ranges
            ),
        )
