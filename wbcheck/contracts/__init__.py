"""WBCheck data contracts: Pydantic v2 models for weight & balance checks.

Configuration (loaded once, read-only):
- ``AircraftProfile``: lever arms, scalar limits and envelope of a type,
  read from the profile JSON document by ``persistence.profile_store``

Per call (never persisted):
- ``LoadingRequest``: aircraft name plus entered weight per item kind
- ``ItemSet``: entered weights paired with the profile's levers
- ``ValidationResult``: verdict, first failing reason and CG point
"""

from wbcheck.contracts.enums import FailReason, FlightPhase, ItemKind
from wbcheck.contracts.common import ContractModel
from wbcheck.contracts.loading import ItemSet, LoadingRequest, WeightLeverPoint
from wbcheck.contracts.aircraft import (
    ENVELOPE_VERTEX_COUNT,
    AircraftLimits,
    AircraftProfile,
    EnvelopePolygon,
)
from wbcheck.contracts.result import ValidationResult

__all__ = [
    # Enums
    "FailReason",
    "FlightPhase",
    "ItemKind",
    # Common
    "ContractModel",
    # Loading
    "ItemSet",
    "LoadingRequest",
    "WeightLeverPoint",
    # Aircraft
    "ENVELOPE_VERTEX_COUNT",
    "AircraftLimits",
    "AircraftProfile",
    "EnvelopePolygon",
    # Result
    "ValidationResult",
]
