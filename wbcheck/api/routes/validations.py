"""W&B validation endpoints.

Each request is validated independently against the shared, read-only
profile registry; the engine never blocks, so handlers call it directly.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from wbcheck.api.deps import get_profile_registry
from wbcheck.contracts.enums import FlightPhase
from wbcheck.contracts.loading import LoadingRequest
from wbcheck.persistence.errors import ProfileNotFoundError
from wbcheck.persistence.profile_store import ProfileRegistry
from wbcheck.services.errors import WBCheckError
from wbcheck.services.validation_service import validate_loading

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/validations", tags=["validations"])


def _run(
    registry: ProfileRegistry,
    request: LoadingRequest,
    phase: FlightPhase | None = None,
) -> dict:
    try:
        result = validate_loading(registry, request, phase)
    except ProfileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except WBCheckError as exc:
        logger.warning("Rejected loading for %s: %s", request.name, exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return result.to_dict()


@router.post("")
async def validate(
    request: LoadingRequest,
    registry: ProfileRegistry = Depends(get_profile_registry),
) -> dict:
    """Validate a loading for the phase given in the request body."""
    return _run(registry, request)


@router.post("/takeoff")
async def validate_takeoff(
    request: LoadingRequest,
    registry: ProfileRegistry = Depends(get_profile_registry),
) -> dict:
    return _run(registry, request, FlightPhase.TAKEOFF)


@router.post("/landing")
async def validate_landing(
    request: LoadingRequest,
    registry: ProfileRegistry = Depends(get_profile_registry),
) -> dict:
    return _run(registry, request, FlightPhase.LANDING)
