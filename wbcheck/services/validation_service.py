"""Weight & balance validation: the two public checks and request handling.

``validate_takeoff`` and ``validate_landing`` are pure functions of a profile
and an item set: no I/O, no shared mutable state, safe to call concurrently.
``validate_loading`` adds the request plumbing used by the API and the CLI
(profile lookup, item-kind parsing, item set construction).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from wbcheck.contracts.aircraft import AircraftProfile
from wbcheck.contracts.enums import FlightPhase, ItemKind
from wbcheck.contracts.loading import ItemSet, LoadingRequest
from wbcheck.contracts.result import ValidationResult
from wbcheck.persistence.profile_store import ProfileRegistry
from wbcheck.services.aggregator import (
    LANDING_EXCLUDED,
    ZERO_FUEL_EXCLUDED,
    aggregate,
    build_item_set,
)
from wbcheck.services.errors import UnknownItemKindError
from wbcheck.services.limit_checker import check_limits

logger = logging.getLogger(__name__)


def parse_item_weights(values: Mapping[str, float]) -> dict[ItemKind, float]:
    """Convert raw item-kind names into ``ItemKind`` keys.

    Raises
    ------
    UnknownItemKindError
        On the first name that is not a known item kind.
    """
    weights: dict[ItemKind, float] = {}
    for name, weight in values.items():
        try:
            kind = ItemKind(name)
        except ValueError as exc:
            raise UnknownItemKindError(name) from exc
        weights[kind] = float(weight)
    return weights


def _validate(
    profile: AircraftProfile,
    items: ItemSet,
    phase: FlightPhase,
) -> ValidationResult:
    excluded = LANDING_EXCLUDED if phase == FlightPhase.LANDING else ()
    point = aggregate(items, excluded)
    zero_fuel_point = aggregate(items, ZERO_FUEL_EXCLUDED)
    envelope = profile.envelope_for(phase)

    reason = check_limits(profile, items, point, envelope)
    if reason is None:
        logger.debug(
            "%s %s OK: weight=%.1f lever=%.2f",
            profile.name, phase.value, point.weight, point.lever,
        )
        return ValidationResult.ok(profile.name, phase, point, zero_fuel_point)

    logger.info(
        "%s %s failed (%s): weight=%.1f lever=%.2f",
        profile.name, phase.value, reason.value, point.weight, point.lever,
    )
    return ValidationResult.fail(profile.name, phase, reason, point, zero_fuel_point)


def validate_takeoff(profile: AircraftProfile, items: ItemSet) -> ValidationResult:
    """Validate the takeoff configuration (every item loaded)."""
    return _validate(profile, items, FlightPhase.TAKEOFF)


def validate_landing(profile: AircraftProfile, items: ItemSet) -> ValidationResult:
    """Validate the landing configuration (trip fuel burnt).

    Uses the profile's landing envelope when it defines one.
    """
    return _validate(profile, items, FlightPhase.LANDING)


def validate_loading(
    registry: ProfileRegistry,
    request: LoadingRequest,
    phase: FlightPhase | None = None,
) -> ValidationResult:
    """Validate a caller's loading request against the registry.

    *phase* overrides the phase carried by the request.

    Raises
    ------
    ProfileNotFoundError
        If no profile matches the request's aircraft name.
    UnknownItemKindError, MissingLeverError, DegenerateAggregateError
        On malformed input or configuration.
    """
    profile = registry.get_profile(request.name)
    items = build_item_set(profile, parse_item_weights(request.values))
    if (phase or request.phase) == FlightPhase.LANDING:
        return validate_landing(profile, items)
    return validate_takeoff(profile, items)
