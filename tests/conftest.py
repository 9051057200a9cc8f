"""
Shared test fixtures.

The venue API is replaced by ``httpx.MockTransport`` so tests run without
network access.  Coordinates and pricing mirror the Helsinki test venue.
"""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from deliveryfee.domain.entities import (
    Coordinate,
    DistanceRange,
    VenuePricingConfig,
)

BASE_URL = "https://venues.test/home-assignment-api/v1/venues/"
VENUE_SLUG = "home-assignment-venue-helsinki"

# ── Helsinki fixture points ───────────────────────────────────────────

VENUE_LOCATION = Coordinate(latitude=60.17094, longitude=24.93087)
USER_200M = Coordinate(latitude=60.169757, longitude=24.928135)  # ~200 m
USER_1000M = Coordinate(latitude=60.1700, longitude=24.9122)  # beyond 1 km

HELSINKI_RANGES = [
    {"min": 0, "max": 500, "a": 0, "b": 0},
    {"min": 500, "max": 1000, "a": 100, "b": 1},
    {"min": 1000, "max": 0, "a": 0, "b": 0},
]


def static_payload(location: Coordinate = VENUE_LOCATION) -> dict[str, Any]:
    return {
        "venue_raw": {
            "location": {"coordinates": [location.longitude, location.latitude]}
        }
    }


def dynamic_payload(
    order_minimum_no_surcharge: int = 1000,
    base_price: int = 190,
    distance_ranges: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    return {
        "venue_raw": {
            "delivery_specs": {
                "order_minimum_no_surcharge": order_minimum_no_surcharge,
                "delivery_pricing": {
                    "base_price": base_price,
                    "distance_ranges": (
                        HELSINKI_RANGES if distance_ranges is None else distance_ranges
                    ),
                },
            }
        }
    }


def make_config(order_minimum_no_surcharge: int = 1000) -> VenuePricingConfig:
    return VenuePricingConfig(
        order_minimum_no_surcharge=order_minimum_no_surcharge,
        base_price=190,
        distance_ranges=tuple(DistanceRange(**r) for r in HELSINKI_RANGES),
    )


class VenueApiStub:
    """Records requests and answers ``/static`` and ``/dynamic`` from canned responses."""

    def __init__(
        self,
        static: httpx.Response | Callable[[], httpx.Response],
        dynamic: httpx.Response | Callable[[], httpx.Response],
    ):
        self.static = static
        self.dynamic = dynamic
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/static"):
            answer = self.static
        elif request.url.path.endswith("/dynamic"):
            answer = self.dynamic
        else:
            return httpx.Response(404)
        return answer() if callable(answer) else answer

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def helsinki_config() -> VenuePricingConfig:
    return make_config()


@pytest.fixture
def venue_api() -> VenueApiStub:
    return VenueApiStub(
        static=httpx.Response(200, json=static_payload()),
        dynamic=httpx.Response(200, json=dynamic_payload()),
    )
