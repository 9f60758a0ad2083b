"""Item set construction and center-of-gravity aggregation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from wbcheck.contracts.aircraft import AircraftProfile
from wbcheck.contracts.enums import ItemKind
from wbcheck.contracts.loading import ItemSet, WeightLeverPoint
from wbcheck.services.errors import DegenerateAggregateError, MissingLeverError

logger = logging.getLogger(__name__)

# Kinds left out of each configuration's CG point
ZERO_FUEL_EXCLUDED = frozenset({ItemKind.FUEL, ItemKind.TRIP_FUEL})
LANDING_EXCLUDED = frozenset({ItemKind.TRIP_FUEL})


def build_item_set(
    profile: AircraftProfile,
    weights: Mapping[ItemKind, float],
) -> ItemSet:
    """Pair each entered weight with the profile's lever for that kind.

    When no base weight is entered, the profile's ``empty_weight`` (if any)
    stands in for it.

    Raises
    ------
    MissingLeverError
        If a kind in *weights* has no lever in the profile.
    """
    entered = dict(weights)
    if ItemKind.BASE not in entered and profile.empty_weight is not None:
        entered[ItemKind.BASE] = profile.empty_weight

    items: ItemSet = {}
    for kind, weight in entered.items():
        lever = profile.lever_for(kind)
        if lever is None:
            raise MissingLeverError(profile.name, kind.value)
        items[kind] = WeightLeverPoint(weight=weight, lever=lever)

    logger.debug("Built item set for %s: %d items", profile.name, len(items))
    return items


def aggregate(
    items: ItemSet,
    excluded_kinds: Iterable[ItemKind] = (),
) -> WeightLeverPoint:
    """Reduce *items* to their center of gravity.

    Sums weight and torque over every item whose kind is not in
    *excluded_kinds*; the resulting lever is total torque / total weight.

    Raises
    ------
    DegenerateAggregateError
        If the total weight is not strictly positive.
    """
    excluded = set(excluded_kinds)
    total_weight = 0.0
    total_torque = 0.0
    for kind, item in items.items():
        if kind in excluded:
            continue
        total_weight += item.weight
        total_torque += item.torque

    if not total_weight > 0:
        raise DegenerateAggregateError(total_weight)

    return WeightLeverPoint(weight=total_weight, lever=total_torque / total_weight)


def sum_weights(items: ItemSet, kinds: Iterable[ItemKind]) -> float:
    """Total weight of the items whose kind is in *kinds*."""
    wanted = set(kinds)
    return sum(item.weight for kind, item in items.items() if kind in wanted)
