"""Enumerations shared across all WBCheck contracts."""

from enum import Enum


class ItemKind(str, Enum):
    """Category of a weighted contribution to the loaded aircraft.

    Not every kind applies to every aircraft: a profile only carries levers
    for the kinds it can load.
    """
    BASE = "base"
    FUEL = "fuel"
    TRIP_FUEL = "trip_fuel"
    BAGGAGE = "baggage"
    BAGGAGE_FRONT = "baggage_front"
    BAGGAGE_BACK = "baggage_back"
    BAGGAGE_WINGS = "baggage_wings"
    PILOT = "pilot"
    CO_PILOT = "co_pilot"
    PASSENGER_LEFT = "passenger_left"
    PASSENGER_RIGHT = "passenger_right"

    @classmethod
    def _missing_(cls, value: object) -> "ItemKind | None":
        # Older profile and loading files spell baggage "bagage"
        if isinstance(value, str):
            normalized = value.strip().lower()
            normalized = _LEGACY_ALIASES.get(normalized, normalized)
            for member in cls:
                if member.value == normalized:
                    return member
        return None


_LEGACY_ALIASES = {
    "bagage": "baggage",
    "bagage_front": "baggage_front",
    "bagage_back": "baggage_back",
    "bagage_wings": "baggage_wings",
}


class FailReason(str, Enum):
    """The single constraint a failed validation reports."""
    BAGGAGE = "baggage"
    BAGGAGE_FRONT = "baggage_front"
    BAGGAGE_BACK = "baggage_back"
    BAGGAGE_WINGS = "baggage_wings"
    MAX_TAKEOFF_WEIGHT = "max_takeoff_weight"
    MAX_WING_LOAD = "max_wing_load"
    FUEL = "fuel"
    ZERO_FUEL = "zero_fuel"
    LANDING_FUEL = "landing_fuel"
    TORQUE_OUT_OF_BOUNDS = "torque_out_of_bounds"


class FlightPhase(str, Enum):
    """Configuration a loading is validated for."""
    TAKEOFF = "takeoff"
    LANDING = "landing"
