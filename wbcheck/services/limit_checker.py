"""Ordered W&B limit checks.

Checks run in a fixed order and stop at the first failure; the order is part
of the contract, since a loading that violates several constraints always
reports the same one:

  1. max takeoff weight    (full aggregate weight)
  2. max wing load         (base, crew and cabin baggage)   [if configured]
  3. baggage in wings      [if configured]
  4. baggage zones         (combined, front, back)          [if configured]
  5. fuel                  (entered fuel vs max fuel)
  6. zero fuel             (fuel-excluded CG inside the zero-fuel envelope)
  7. landing fuel          (trip fuel > 0 and <= max fuel)  [if entered]
  8. envelope              (primary CG inside the envelope)

Optional limits the profile does not define are skipped, never failed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from wbcheck.contracts.aircraft import AircraftProfile, EnvelopePolygon
from wbcheck.contracts.enums import FailReason, ItemKind
from wbcheck.contracts.loading import ItemSet, WeightLeverPoint
from wbcheck.services.aggregator import ZERO_FUEL_EXCLUDED, aggregate, sum_weights
from wbcheck.services.envelope import check_envelope

logger = logging.getLogger(__name__)

# Kinds carried by the wing spar
WING_LOAD_KINDS = (
    ItemKind.BASE,
    ItemKind.PILOT,
    ItemKind.CO_PILOT,
    ItemKind.BAGGAGE_FRONT,
    ItemKind.BAGGAGE_BACK,
)

# (item kind, limit field, reason), checked in this order
BAGGAGE_ZONES = (
    (ItemKind.BAGGAGE, "max_baggage", FailReason.BAGGAGE),
    (ItemKind.BAGGAGE_FRONT, "max_baggage_front", FailReason.BAGGAGE_FRONT),
    (ItemKind.BAGGAGE_BACK, "max_baggage_back", FailReason.BAGGAGE_BACK),
)


def _item_within(
    items: ItemSet, kind: ItemKind, limit: float | None
) -> bool:
    """True unless both the item and its limit are present and it exceeds it."""
    item = items.get(kind)
    if item is None or limit is None:
        return True
    return item.weight <= limit


# ---------------------------------------------------------------------------
# Individual checks
# ---------------------------------------------------------------------------


def check_max_takeoff_weight(profile: AircraftProfile, items: ItemSet) -> FailReason | None:
    total = aggregate(items)
    if total.weight > profile.limits.max_takeoff_weight:
        return FailReason.MAX_TAKEOFF_WEIGHT
    return None


def check_max_wing_load(profile: AircraftProfile, items: ItemSet) -> FailReason | None:
    limit = profile.limit("max_wing_load")
    if limit is None:
        return None
    if sum_weights(items, WING_LOAD_KINDS) > limit:
        return FailReason.MAX_WING_LOAD
    return None


def check_baggage_in_wings(profile: AircraftProfile, items: ItemSet) -> FailReason | None:
    if not _item_within(items, ItemKind.BAGGAGE_WINGS, profile.limit("max_baggage_wings")):
        return FailReason.BAGGAGE_WINGS
    return None


def check_baggage_zones(profile: AircraftProfile, items: ItemSet) -> FailReason | None:
    for kind, limit_name, reason in BAGGAGE_ZONES:
        if not _item_within(items, kind, profile.limit(limit_name)):
            return reason
    return None


def check_fuel(profile: AircraftProfile, items: ItemSet) -> FailReason | None:
    if not _item_within(items, ItemKind.FUEL, profile.limits.max_fuel_weight):
        return FailReason.FUEL
    return None


def check_zero_fuel(profile: AircraftProfile, items: ItemSet) -> FailReason | None:
    zero_fuel = aggregate(items, ZERO_FUEL_EXCLUDED)
    return check_envelope(
        zero_fuel,
        profile.zero_fuel_envelope,
        profile.accept_boundary,
        reason=FailReason.ZERO_FUEL,
    )


def check_landing_fuel(profile: AircraftProfile, items: ItemSet) -> FailReason | None:
    trip_fuel = items.get(ItemKind.TRIP_FUEL)
    if trip_fuel is None:
        return None
    if trip_fuel.weight <= 0 or trip_fuel.weight > profile.limits.max_fuel_weight:
        return FailReason.LANDING_FUEL
    return None


# ---------------------------------------------------------------------------
# Ordered sequence
# ---------------------------------------------------------------------------


def check_limits(
    profile: AircraftProfile,
    items: ItemSet,
    primary_point: WeightLeverPoint,
    envelope: EnvelopePolygon,
) -> FailReason | None:
    """Run every check in order and return the first failure, or ``None``.

    *primary_point* is the CG of the configuration being validated (takeoff
    or landing) and *envelope* the polygon it must lie in.
    """
    checks: list[tuple[str, Callable[[], FailReason | None]]] = [
        ("max_takeoff_weight", lambda: check_max_takeoff_weight(profile, items)),
        ("max_wing_load", lambda: check_max_wing_load(profile, items)),
        ("baggage_wings", lambda: check_baggage_in_wings(profile, items)),
        ("baggage_zones", lambda: check_baggage_zones(profile, items)),
        ("fuel", lambda: check_fuel(profile, items)),
        ("zero_fuel", lambda: check_zero_fuel(profile, items)),
        ("landing_fuel", lambda: check_landing_fuel(profile, items)),
        (
            "envelope",
            lambda: check_envelope(primary_point, envelope, profile.accept_boundary),
        ),
    ]

    for name, check in checks:
        reason = check()
        if reason is not None:
            logger.debug("%s: check '%s' failed with %s", profile.name, name, reason.value)
            return reason
    return None
