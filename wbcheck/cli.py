"""CLI entry point for one-off W&B checks.

Usage:
    python -m wbcheck.cli --input loading.json [--config config/aircraft.json] [--landing]

Exit status: 0 when the loading is within limits, 1 when a limit is
violated, 2 on a configuration or input error.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from wbcheck.contracts.enums import FlightPhase
from wbcheck.contracts.loading import LoadingRequest
from wbcheck.contracts.result import ValidationResult
from wbcheck.persistence.errors import ProfileStoreError
from wbcheck.persistence.profile_store import load_profiles
from wbcheck.services.errors import WBCheckError
from wbcheck.services.validation_service import validate_loading

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_ERROR = 2


def read_loading(path: Path) -> LoadingRequest:
    """Read a loading request from a JSON file."""
    with path.open(encoding="utf-8") as f:
        return LoadingRequest.model_validate(json.load(f))


def format_result(result: ValidationResult) -> str:
    verdict = "OK" if result.success else f"FAILED ({result.reason.value})"
    lines = [
        f"Aircraft {result.aircraft} {result.phase.value} W&B: {verdict}",
        f"  CG point: weight={result.point.weight:.1f} lever={result.point.lever:.2f}",
    ]
    if result.zero_fuel_point is not None:
        lines.append(
            f"  Zero fuel: weight={result.zero_fuel_point.weight:.1f} "
            f"lever={result.zero_fuel_point.lever:.2f}"
        )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="WBCheck weight & balance validation")
    parser.add_argument("--input", "-i", type=Path, required=True, help="Loading JSON file")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Aircraft profile JSON (default: $WBCHECK_PROFILES_PATH or config/aircraft.json)",
    )
    parser.add_argument(
        "--landing", action="store_true", help="Validate the landing configuration"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        registry = load_profiles(args.config)
        request = read_loading(args.input)
        phase = FlightPhase.LANDING if args.landing else None
        result = validate_loading(registry, request, phase)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        logger.error("Invalid loading file %s: %s", args.input, exc)
        return EXIT_ERROR
    except (ProfileStoreError, WBCheckError) as exc:
        logger.error("%s", exc)
        return EXIT_ERROR

    print(format_result(result))
    return EXIT_OK if result.success else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
