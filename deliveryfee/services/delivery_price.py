"""
Delivery price service
======================

One quote per request:

1. Fetch the venue (static, then dynamic data).
2. Compute the straight-line distance from the user to the venue.
3. Run the pricing engine.

``DataFetchError`` from step 1 short-circuits the whole quote;
``DeliveryImpossibleError`` from step 3 is passed through untouched.
"""

from __future__ import annotations

import logging

from deliveryfee.domain.distance import haversine_m
from deliveryfee.domain.entities import DeliveryRequest, PriceBreakdown
from deliveryfee.domain.pricing import PricingEngine
from deliveryfee.infrastructure.venue_client import VenueClient

logger = logging.getLogger(__name__)


class DeliveryPriceService:
    def __init__(self, venue_client: VenueClient, engine: PricingEngine | None = None):
        self.venue_client = venue_client
        self.engine = engine or PricingEngine()

    async def quote(self, request: DeliveryRequest) -> PriceBreakdown:
        venue = await self.venue_client.fetch_venue(request.venue_slug)
        distance_m = haversine_m(request.user_location, venue.coordinates)
        logger.debug("Venue %s is %.1f m from the user", venue.slug, distance_m)

        breakdown = self.engine.compute_price(
            venue.pricing, request.cart_value, distance_m
        )
        logger.info(
            "Quoted venue %s: fee=%d surcharge=%d total=%d",
            venue.slug,
            breakdown.delivery_fee,
            breakdown.small_order_surcharge,
            breakdown.total_price,
        )
        return breakdown
