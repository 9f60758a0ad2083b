"""FastAPI application factory."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

# Load .env file from project root (must be before other imports)
load_dotenv()
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from wbcheck.api.routes import aircraft, validations  # noqa: E402
from wbcheck.persistence.profile_store import ProfileRegistry, load_profiles  # noqa: E402
from wbcheck.persistence.errors import ProfileConfigError  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the aircraft profile registry once on startup."""
    registry = getattr(app.state, "profile_registry", None)
    if registry is None:
        try:
            registry = load_profiles()
        except ProfileConfigError as exc:
            logger.error("Failed to load aircraft profiles: %s", exc)
            registry = ProfileRegistry()
        app.state.profile_registry = registry
    logger.info("Serving %d aircraft profiles", len(registry))
    yield


app = FastAPI(
    title="WBCheck API",
    description="Aircraft weight & balance validation",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("WBCHECK_CORS_ORIGINS", "http://localhost:5173").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(aircraft.router, prefix="/api")
app.include_router(validations.router, prefix="/api")


@app.get("/api/health")
async def health():
    registry = getattr(app.state, "profile_registry", None)
    return {
        "status": "ok",
        "profiles_loaded": len(registry) if registry is not None else 0,
    }
