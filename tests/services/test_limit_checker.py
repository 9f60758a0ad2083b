"""Tests for the ordered limit checks."""

from __future__ import annotations

import pytest

from wbcheck.contracts.enums import FailReason, ItemKind
from wbcheck.contracts.loading import WeightLeverPoint
from wbcheck.services.aggregator import aggregate, build_item_set
from wbcheck.services.limit_checker import (
    check_baggage_in_wings,
    check_baggage_zones,
    check_fuel,
    check_landing_fuel,
    check_limits,
    check_max_takeoff_weight,
    check_max_wing_load,
    check_zero_fuel,
)


def _load(profile, **weights):
    return build_item_set(profile, {ItemKind(k): w for k, w in weights.items()})


def _run(profile, items):
    return check_limits(profile, items, aggregate(items), profile.envelope)


class TestIndividualChecks:
    def test_max_takeoff_weight(self, square):
        assert check_max_takeoff_weight(square, _load(square, base=900, pilot=100)) is None
        assert (
            check_max_takeoff_weight(square, _load(square, base=900, pilot=101))
            is FailReason.MAX_TAKEOFF_WEIGHT
        )

    def test_wing_load_counts_crew_and_cabin_baggage(self, square):
        items = _load(square, base=700, pilot=90, co_pilot=10, baggage_front=1)
        assert check_max_wing_load(square, items) is FailReason.MAX_WING_LOAD

    def test_wing_load_ignores_fuel_and_wing_baggage(self, square):
        items = _load(square, base=700, pilot=90, fuel=100, baggage_wings=30)
        assert check_max_wing_load(square, items) is None

    def test_wing_load_skipped_when_not_configured(self, ken):
        items = _load(ken, pilot=150, co_pilot=150)
        assert check_max_wing_load(ken, items) is None

    def test_baggage_in_wings(self, square):
        assert check_baggage_in_wings(square, _load(square, base=600, baggage_wings=30)) is None
        assert (
            check_baggage_in_wings(square, _load(square, base=600, baggage_wings=31))
            is FailReason.BAGGAGE_WINGS
        )

    def test_baggage_in_wings_absent(self, square):
        assert check_baggage_in_wings(square, _load(square, base=600)) is None

    def test_baggage_zones_front_before_back(self, square):
        items = _load(square, base=600, baggage_front=15, baggage_back=25)
        assert check_baggage_zones(square, items) is FailReason.BAGGAGE_FRONT

    def test_baggage_zone_back(self, square):
        items = _load(square, base=600, baggage_front=5, baggage_back=25)
        assert check_baggage_zones(square, items) is FailReason.BAGGAGE_BACK

    def test_combined_baggage(self, ken):
        assert check_baggage_zones(ken, _load(ken, baggage=15)) is None
        assert check_baggage_zones(ken, _load(ken, baggage=15.5)) is FailReason.BAGGAGE

    def test_fuel(self, ken):
        assert check_fuel(ken, _load(ken, fuel=129.0)) is None
        assert check_fuel(ken, _load(ken, fuel=130.0)) is FailReason.FUEL

    def test_zero_fuel_outside(self, square):
        items = _load(square, base=400, fuel=100)
        assert check_zero_fuel(square, items) is FailReason.ZERO_FUEL

    def test_zero_fuel_uses_landing_envelope(self, square_with_landing):
        # Zero-fuel lever 220 is inside the normal envelope only
        items = _load(square_with_landing, base=600, pilot=80)
        assert check_zero_fuel(square_with_landing, items) is FailReason.ZERO_FUEL

    @pytest.mark.parametrize("trip_fuel", [0.0, 100.5])
    def test_landing_fuel_out_of_range(self, square, trip_fuel):
        items = _load(square, base=600, trip_fuel=trip_fuel)
        assert check_landing_fuel(square, items) is FailReason.LANDING_FUEL

    def test_landing_fuel_absent_or_valid(self, square):
        assert check_landing_fuel(square, _load(square, base=600)) is None
        assert check_landing_fuel(square, _load(square, base=600, trip_fuel=40)) is None


class TestCheckOrder:
    def test_all_within_limits(self, square):
        assert _run(square, _load(square, base=600, pilot=80, fuel=50)) is None

    def test_mtow_before_fuel(self, square):
        items = _load(square, base=700, pilot=200, fuel=150)
        assert _run(square, items) is FailReason.MAX_TAKEOFF_WEIGHT

    def test_wing_load_before_wing_baggage(self, square):
        items = _load(square, base=700, pilot=90, co_pilot=20, baggage_wings=40)
        assert _run(square, items) is FailReason.MAX_WING_LOAD

    def test_wing_baggage_before_zones(self, square):
        items = _load(square, base=600, baggage_wings=40, baggage_back=25)
        assert _run(square, items) is FailReason.BAGGAGE_WINGS

    def test_zones_before_fuel(self, square):
        items = _load(square, base=600, baggage_back=25, fuel=150)
        assert _run(square, items) is FailReason.BAGGAGE_BACK

    def test_fuel_before_zero_fuel(self, square):
        items = _load(square, base=400, fuel=150)
        assert _run(square, items) is FailReason.FUEL

    def test_zero_fuel_before_landing_fuel(self, square):
        items = _load(square, base=400, fuel=100, trip_fuel=0)
        assert _run(square, items) is FailReason.ZERO_FUEL

    def test_landing_fuel_before_envelope(self, square):
        items = _load(square, base=600, trip_fuel=0)
        outside = WeightLeverPoint(weight=600.0, lever=250.0)
        assert check_limits(square, items, outside, square.envelope) is FailReason.LANDING_FUEL

    def test_envelope_last(self, square):
        items = _load(square, base=600, pilot=80)
        outside = WeightLeverPoint(weight=680.0, lever=250.0)
        assert (
            check_limits(square, items, outside, square.envelope)
            is FailReason.TORQUE_OUT_OF_BOUNDS
        )
