"""Base classes shared by WBCheck contracts.

Unit conventions (all contracts and API responses):
- **Weights**: whatever unit the aircraft profile is written in (kg for the
  bundled profiles). Entered item weights must use the same unit.
- **Levers**: distance from the profile's reference datum, same unit as the
  profile's lever table.
- **Torque**: weight x lever, never stored, always derived.

Profiles are long-lived and shared across requests, so every contract is
frozen once validated.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ContractModel(BaseModel):
    """Base model for immutable, JSON-friendly contracts.

    - Enums serialize as their string values.
    - ``to_dict()`` produces a JSON-safe dict.
    - ``from_dict()`` validates a plain dict (config file, request body).
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        use_enum_values=False,
    )

    def to_dict(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContractModel":
        """Create a model instance from a plain dict."""
        return cls.model_validate(data)
