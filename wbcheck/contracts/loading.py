"""Loading contracts: weighted items and the request that carries them.

A loading is never persisted. It is built per validation call from the
caller's entered weights and the aircraft profile's lever table.
"""

from typing import Any

from pydantic import Field, FiniteFloat, field_validator, model_validator

from wbcheck.contracts.common import ContractModel
from wbcheck.contracts.enums import FlightPhase, ItemKind


class WeightLeverPoint(ContractModel):
    """A weight applied at a lever arm from the reference datum.

    Also used for the center of gravity of several items and for envelope
    vertices. Points combine by summing weight and torque (see
    ``services.aggregator.aggregate``); levers are never averaged directly.
    """

    weight: FiniteFloat
    lever: FiniteFloat

    @property
    def torque(self) -> float:
        return self.weight * self.lever


# One entry per loaded kind; built by ``services.aggregator.build_item_set``.
ItemSet = dict[ItemKind, WeightLeverPoint]


class LoadingRequest(ContractModel):
    """Entered item weights for one aircraft, as received from a caller.

    ``values`` keeps the raw item-kind names; they are parsed into
    ``ItemKind`` by the validation service so an unknown name produces a
    descriptive error instead of a schema error.
    """

    name: str = Field(..., min_length=1, description="Aircraft profile name, e.g. 'KEN'")
    values: dict[str, FiniteFloat] = Field(
        default_factory=dict,
        description="Entered weight per item kind name",
    )
    phase: FlightPhase = FlightPhase.TAKEOFF

    @model_validator(mode="before")
    @classmethod
    def collect_flat_values(cls, data: Any) -> Any:
        """Accept the legacy flat form where weights sit next to ``name``."""
        if isinstance(data, dict) and "values" not in data:
            known = {"name", "phase"}
            values = {k: v for k, v in data.items() if k not in known}
            data = {k: v for k, v in data.items() if k in known}
            data["values"] = values
        return data

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip().strip('"')

    @field_validator("values")
    @classmethod
    def non_negative_weights(cls, v: dict[str, float]) -> dict[str, float]:
        for key, weight in v.items():
            if weight < 0:
                raise ValueError(f"weight for '{key}' must be >= 0, got {weight}")
        return v
