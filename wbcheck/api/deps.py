"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import HTTPException, Request

from wbcheck.persistence.profile_store import ProfileRegistry


def get_profile_registry(request: Request) -> ProfileRegistry:
    """The read-only profile registry loaded at startup (from app.state)."""
    registry = getattr(request.app.state, "profile_registry", None)
    if registry is None:
        raise HTTPException(status_code=503, detail="Aircraft profiles not loaded")
    return registry
