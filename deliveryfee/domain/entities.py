"""
Domain value objects.

Every object here is created at the start of one calculation, consumed
immediately and then discarded, so all of them are frozen.  Money is kept
in **minor currency units** (cents) as ``int``; distances are meters.
"""

from __future__ import annotations

from dataclasses import dataclass


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class DistanceRange:
    """One tier of the delivery-fee schedule, covering ``[min, max)`` meters.

    ``max == 0`` means the tier has no upper bound and delivery is not
    possible from ``min`` onwards.  ``a`` is a flat addend and ``b`` is
    charged per 10 meters, both in minor units.
    """

    min: float
    max: float
    a: int
    b: int

    @property
    def is_open_ended(self) -> bool:
        return self.max == 0

    def contains(self, distance_m: float) -> bool:
        return self.min <= distance_m < self.max


@dataclass(frozen=True)
class VenuePricingConfig:
    order_minimum_no_surcharge: int
    base_price: int
    distance_ranges: tuple[DistanceRange, ...]


@dataclass(frozen=True)
class Venue:
    slug: str
    coordinates: Coordinate
    pricing: VenuePricingConfig


@dataclass(frozen=True)
class DeliveryRequest:
    venue_slug: str
    cart_value: int
    user_location: Coordinate


@dataclass(frozen=True)
class PriceBreakdown:
    cart_value: int
    small_order_surcharge: int
    delivery_fee: int
    delivery_distance: int
    total_price: int
