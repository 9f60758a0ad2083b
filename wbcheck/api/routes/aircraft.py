"""Aircraft profile endpoints (read-only)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from wbcheck.api.deps import get_profile_registry
from wbcheck.persistence.errors import ProfileNotFoundError
from wbcheck.persistence.profile_store import ProfileRegistry

router = APIRouter(prefix="/aircraft", tags=["aircraft"])


@router.get("")
async def list_aircraft(
    registry: ProfileRegistry = Depends(get_profile_registry),
) -> list[dict]:
    return [profile.to_dict() for profile in registry.values()]


@router.get("/{name}")
async def get_aircraft(
    name: str,
    registry: ProfileRegistry = Depends(get_profile_registry),
) -> dict:
    try:
        profile = registry.get_profile(name)
    except ProfileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return profile.to_dict()
