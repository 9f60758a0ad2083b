"""Aircraft profile store: load profiles from JSON, serve them read-only."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from wbcheck.contracts.aircraft import AircraftProfile
from wbcheck.persistence.errors import ProfileConfigError, ProfileNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_PROFILES_PATH = Path("config") / "aircraft.json"


def _normalize_name(name: str) -> str:
    return name.strip().strip('"').strip()


class ProfileRegistry(Mapping[str, AircraftProfile]):
    """Read-only mapping of aircraft name to profile.

    Built once at start-up and shared by every request. Lookups need no
    locking since nothing can mutate it after construction.
    """

    def __init__(self, profiles: Mapping[str, AircraftProfile] | None = None):
        self._profiles = MappingProxyType(dict(profiles or {}))

    @classmethod
    def from_profiles(cls, profiles: list[AircraftProfile]) -> ProfileRegistry:
        """Index *profiles* by name; duplicate names are rejected."""
        indexed: dict[str, AircraftProfile] = {}
        for profile in profiles:
            if profile.name in indexed:
                raise ProfileConfigError(f"Duplicate aircraft profile: {profile.name}")
            indexed[profile.name] = profile
        return cls(indexed)

    def __getitem__(self, name: str) -> AircraftProfile:
        return self._profiles[_normalize_name(name)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _normalize_name(name) in self._profiles

    def get_profile(self, name: str) -> AircraftProfile:
        """Profile for *name*.

        Raises
        ------
        ProfileNotFoundError
            If the registry holds no such profile.
        """
        try:
            return self[name]
        except KeyError:
            raise ProfileNotFoundError(_normalize_name(name)) from None


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------


def _iter_documents(text: str) -> Iterator[Any]:
    """Yield each top-level JSON value of *text*.

    Profile files may hold several concatenated lists.
    """
    decoder = json.JSONDecoder()
    idx = 0
    length = len(text)
    while True:
        while idx < length and text[idx].isspace():
            idx += 1
        if idx >= length:
            return
        value, idx = decoder.raw_decode(text, idx)
        yield value


def parse_profiles(text: str, source: str = "<string>") -> ProfileRegistry:
    """Parse a profile JSON document into a registry.

    Raises
    ------
    ProfileConfigError
        On invalid JSON, a record that fails validation, or duplicate names.
    """
    records: list[Any] = []
    try:
        for document in _iter_documents(text):
            if isinstance(document, list):
                records.extend(document)
            else:
                records.append(document)
    except json.JSONDecodeError as exc:
        raise ProfileConfigError(f"{source}: invalid JSON: {exc}") from exc

    profiles: list[AircraftProfile] = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise ProfileConfigError(f"{source}: profile #{index} is not an object")
        try:
            profiles.append(AircraftProfile.model_validate(record))
        except ValidationError as exc:
            name = record.get("name", f"#{index}")
            raise ProfileConfigError(f"{source}: invalid profile {name}: {exc}") from exc

    registry = ProfileRegistry.from_profiles(profiles)
    logger.info("Loaded %d aircraft profiles from %s", len(registry), source)
    return registry


def load_profiles(path: Path | str | None = None) -> ProfileRegistry:
    """Load the profile registry from *path*.

    If *path* is ``None``, reads ``WBCHECK_PROFILES_PATH`` and falls back to
    ``config/aircraft.json``.
    """
    if path is None:
        path = os.environ.get("WBCHECK_PROFILES_PATH") or DEFAULT_PROFILES_PATH
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ProfileConfigError(f"Cannot read profile file {path}: {exc}") from exc

    return parse_profiles(text, source=str(path))
