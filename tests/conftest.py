"""Shared aircraft profile fixtures."""

from __future__ import annotations

import pytest

from wbcheck.contracts.aircraft import AircraftProfile

# Lever-weight rectangle with a chamfered top; bottom edge at weight 500
TEST_ENVELOPE = [
    [200.0, 500.0],
    [240.0, 500.0],
    [240.0, 900.0],
    [230.0, 1000.0],
    [210.0, 1000.0],
    [200.0, 900.0],
]

# Same shape, left edge moved aft to lever 225
TEST_LANDING_ENVELOPE = [
    [225.0, 500.0],
    [240.0, 500.0],
    [240.0, 900.0],
    [235.0, 1000.0],
    [230.0, 1000.0],
    [225.0, 900.0],
]


@pytest.fixture
def ken_data() -> dict:
    """KEN four-seater as loaded from the profile file."""
    return {
        "name": "KEN",
        "empty_weight": 685.2,
        "levers": {
            "base": 219.4,
            "fuel": 241.3,
            "trip_fuel": 241.3,
            "pilot": 204.4,
            "co_pilot": 204.4,
            "passenger_left": 300.0,
            "passenger_right": 300.0,
            "baggage": 362.7,
        },
        "limits": {
            "max_takeoff_weight": 1055.0,
            "max_fuel_weight": 129.0,
            "max_baggage": 15.0,
        },
        "envelope": [
            [210.8, 685.2],
            [210.8, 885.0],
            [221.0, 1055.0],
            [236.2, 1055.0],
            [236.2, 1055.0],
            [236.2, 685.2],
        ],
    }


@pytest.fixture
def square_data() -> dict:
    """Synthetic profile: every lever near 220, envelope TEST_ENVELOPE."""
    return {
        "name": "TEST",
        "levers": {
            "base": 220.0,
            "fuel": 220.0,
            "trip_fuel": 220.0,
            "pilot": 220.0,
            "co_pilot": 220.0,
            "baggage_front": 210.0,
            "baggage_back": 235.0,
            "baggage_wings": 225.0,
        },
        "limits": {
            "max_takeoff_weight": 1000.0,
            "max_fuel_weight": 100.0,
            "max_wing_load": 800.0,
            "max_baggage_front": 10.0,
            "max_baggage_back": 20.0,
            "max_baggage_wings": 30.0,
        },
        "envelope": TEST_ENVELOPE,
    }


@pytest.fixture
def ken(ken_data) -> AircraftProfile:
    return AircraftProfile.model_validate(ken_data)


@pytest.fixture
def square(square_data) -> AircraftProfile:
    return AircraftProfile.model_validate(square_data)


@pytest.fixture
def square_with_landing(square_data) -> AircraftProfile:
    """``square`` with a separate, narrower landing / zero-fuel envelope."""
    square_data["landing_envelope"] = TEST_LANDING_ENVELOPE
    return AircraftProfile.model_validate(square_data)
