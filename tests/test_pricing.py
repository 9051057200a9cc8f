"""Unit tests for the delivery pricing engine."""

import logging

import pytest

from deliveryfee.domain.entities import DistanceRange, VenuePricingConfig
from deliveryfee.domain.errors import DeliveryImpossibleError
from deliveryfee.domain.pricing import (
    PricingEngine,
    delivery_fee,
    is_delivery_possible,
    round_half_away_from_zero,
    small_order_surcharge,
)
from tests.conftest import make_config


class TestRounding:
    @pytest.mark.parametrize(
        "value, expected",
        [(0.5, 1), (1.5, 2), (2.5, 3), (2.4999, 2), (-0.5, -1), (-2.5, -3), (53.81, 54)],
    )
    def test_half_away_from_zero(self, value, expected):
        assert round_half_away_from_zero(value) == expected


class TestSurcharge:
    def test_below_minimum_pays_the_difference(self):
        assert small_order_surcharge(1000, 800) == 200

    def test_at_minimum_is_zero(self):
        assert small_order_surcharge(1000, 1000) == 0

    def test_above_minimum_is_zero(self):
        assert small_order_surcharge(1000, 10000) == 0

    def test_decreases_as_cart_grows(self):
        values = [small_order_surcharge(1000, cart) for cart in range(0, 1001, 50)]
        assert values == sorted(values, reverse=True)
        assert values[-1] == 0


class TestDeliveryFee:
    def test_first_tier_is_base_price(self, helsinki_config):
        assert delivery_fee(helsinki_config, 200.0) == 190

    def test_distance_equal_to_max_selects_next_tier(self, helsinki_config):
        # 190 + 100 + round(1 * 500 / 10)
        assert delivery_fee(helsinki_config, 500.0) == 340

    def test_distance_just_below_max_stays_in_tier(self, helsinki_config):
        assert delivery_fee(helsinki_config, 499.999) == 190

    def test_proportional_term_is_rounded(self, helsinki_config):
        # 1 * 538.1 / 10 = 53.81 -> 54
        assert delivery_fee(helsinki_config, 538.1) == 344

    def test_proportional_half_rounds_up(self, helsinki_config):
        # 1 * 505 / 10 = 50.5 -> 51
        assert delivery_fee(helsinki_config, 505.0) == 341

    def test_uncovered_distance_charges_base_price(self, caplog):
        config = VenuePricingConfig(
            order_minimum_no_surcharge=1000,
            base_price=190,
            distance_ranges=(
                DistanceRange(0, 500, 0, 0),
                DistanceRange(600, 1000, 100, 1),
            ),
        )
        with caplog.at_level(logging.WARNING, logger="deliveryfee.domain.pricing"):
            assert delivery_fee(config, 550.0) == 190
        assert "No distance range covers" in caplog.text


class TestFeasibility:
    def test_inside_finite_tiers_is_possible(self, helsinki_config):
        assert is_delivery_possible(helsinki_config, 999.9)

    def test_open_ended_last_tier_min_is_impossible(self, helsinki_config):
        assert not is_delivery_possible(helsinki_config, 1000.0)

    def test_finite_last_tier_never_blocks(self):
        config = VenuePricingConfig(
            order_minimum_no_surcharge=0,
            base_price=100,
            distance_ranges=(DistanceRange(0, 1000, 0, 0),),
        )
        assert is_delivery_possible(config, 5000.0)


class TestPricingEngine:
    def setup_method(self):
        self.engine = PricingEngine()

    def test_no_surcharge_scenario(self):
        breakdown = self.engine.compute_price(make_config(10000), 10000, 200.47)
        assert breakdown.small_order_surcharge == 0
        assert breakdown.delivery_fee == 190
        assert breakdown.total_price == 10190
        assert breakdown.delivery_distance == 200

    def test_small_order_scenario(self):
        breakdown = self.engine.compute_price(make_config(1000), 800, 200.47)
        assert breakdown.small_order_surcharge == 200
        assert breakdown.delivery_fee == 190
        assert breakdown.total_price == 1190

    def test_tier_boundary_scenario(self, helsinki_config):
        breakdown = self.engine.compute_price(helsinki_config, 1000, 500.0)
        assert breakdown.delivery_fee == 340
        assert breakdown.total_price == 1340

    def test_delivery_impossible_scenario(self, helsinki_config):
        with pytest.raises(DeliveryImpossibleError) as excinfo:
            self.engine.compute_price(helsinki_config, 5000, 1004.0)
        assert excinfo.value.distance_m == 1004.0
        assert str(excinfo.value) == "Delivery is not possible for the given distance."

    def test_distance_display_rounding_does_not_affect_tier(self, helsinki_config):
        # 499.6 displays as 500 m but is still priced in the first tier
        breakdown = self.engine.compute_price(helsinki_config, 1000, 499.6)
        assert breakdown.delivery_distance == 500
        assert breakdown.delivery_fee == 190

    def test_idempotent(self, helsinki_config):
        first = self.engine.compute_price(helsinki_config, 750, 731.2)
        second = self.engine.compute_price(helsinki_config, 750, 731.2)
        assert first == second
