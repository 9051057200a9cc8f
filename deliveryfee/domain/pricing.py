"""
Delivery Pricing Engine
=======================

Formula
-------
Total = Cart_Value + Small_Order_Surcharge + Delivery_Fee

* **Small_Order_Surcharge** = max(Order_Minimum_No_Surcharge - Cart_Value, 0)
* **Delivery_Fee** = Base_Price + a + round(b x Distance / 10), where ``a`` and
  ``b`` come from the first distance range with ``min <= Distance < max``.
* Delivery is impossible once Distance reaches ``min`` of the last range
  when that range has ``max == 0``.

All money is in minor currency units.  Only the proportional term is
rounded (half away from zero); everything else is exact integer arithmetic.

Complexity: O(number of distance ranges) per price calculation.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from .entities import PriceBreakdown, VenuePricingConfig
from .errors import DeliveryImpossibleError

logger = logging.getLogger(__name__)


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties going away from zero."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def is_delivery_possible(config: VenuePricingConfig, distance_m: float) -> bool:
    last_range = config.distance_ranges[-1]
    return not (distance_m >= last_range.min and last_range.is_open_ended)


def small_order_surcharge(order_minimum_no_surcharge: int, cart_value: int) -> int:
    return max(order_minimum_no_surcharge - cart_value, 0)


def delivery_fee(config: VenuePricingConfig, distance_m: float) -> int:
    """Base price plus the cost of the tier that contains *distance_m*.

    A distance covered by no tier (gaps or a finite last tier) is charged
    the base price alone.
    """
    for distance_range in config.distance_ranges:
        if distance_range.contains(distance_m):
            return (
                config.base_price
                + distance_range.a
                + round_half_away_from_zero(distance_range.b * distance_m / 10)
            )

    logger.warning(
        "No distance range covers %.1f m; charging base price only "
        "(check the venue's distance_ranges)",
        distance_m,
    )
    return config.base_price


# ── Engine facade ─────────────────────────────────────────────────────


class PricingEngine:
    """High-level API used by the delivery price service."""

    def compute_price(
        self,
        config: VenuePricingConfig,
        cart_value: int,
        distance_m: float,
    ) -> PriceBreakdown:
        """Return the itemised price, or raise ``DeliveryImpossibleError``."""
        if not is_delivery_possible(config, distance_m):
            raise DeliveryImpossibleError(distance_m)

        surcharge = small_order_surcharge(config.order_minimum_no_surcharge, cart_value)
        fee = delivery_fee(config, distance_m)

        return PriceBreakdown(
            cart_value=cart_value,
            small_order_surcharge=surcharge,
            delivery_fee=fee,
            delivery_distance=round_half_away_from_zero(distance_m),
            total_price=cart_value + surcharge + fee,
        )
