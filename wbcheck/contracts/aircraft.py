"""Aircraft profile: lever arms, scalar limits and the W&B envelope.

One profile per aircraft type, loaded once from the profile store and shared
read-only by every validation call.
"""

from typing import Any

from pydantic import ConfigDict, Field, FiniteFloat, field_validator, model_validator

from wbcheck.contracts.common import ContractModel
from wbcheck.contracts.enums import FlightPhase, ItemKind
from wbcheck.contracts.loading import WeightLeverPoint

ENVELOPE_VERTEX_COUNT = 6


class EnvelopePolygon(ContractModel):
    """The W&B envelope (centrogramme) in the lever-weight plane.

    The ordered vertices form a closed polygon: the edge from the last vertex
    back to the first is part of the boundary. Vertices may be given as
    ``[lever, weight]`` pairs or as ``{"lever": .., "weight": ..}`` objects.
    """

    vertices: list[WeightLeverPoint] = Field(
        ...,
        min_length=ENVELOPE_VERTEX_COUNT,
        max_length=ENVELOPE_VERTEX_COUNT,
        description="Exactly six (lever, weight) vertices, in boundary order",
    )

    @model_validator(mode="before")
    @classmethod
    def wrap_vertex_list(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            return {"vertices": data}
        return data

    @field_validator("vertices", mode="before")
    @classmethod
    def parse_pairs(cls, v: Any) -> Any:
        if not isinstance(v, (list, tuple)):
            return v
        parsed = []
        for vertex in v:
            if isinstance(vertex, (list, tuple)):
                if len(vertex) != 2:
                    raise ValueError(f"vertex must be a [lever, weight] pair, got {vertex!r}")
                lever, weight = vertex
                parsed.append({"lever": lever, "weight": weight})
            else:
                parsed.append(vertex)
        return parsed

    def edges(self) -> list[tuple[WeightLeverPoint, WeightLeverPoint]]:
        """Directed edges (previous vertex, vertex), closing edge included."""
        n = len(self.vertices)
        return [(self.vertices[i - 1], self.vertices[i % n]) for i in range(1, n + 1)]


class AircraftLimits(ContractModel):
    """Scalar limits. ``None`` means the limit does not apply to the type."""

    model_config = ConfigDict(extra="forbid")

    max_takeoff_weight: FiniteFloat = Field(..., gt=0)
    max_fuel_weight: FiniteFloat = Field(..., ge=0)
    max_wing_load: FiniteFloat | None = Field(
        default=None, gt=0, description="Max zero-fuel / wing-load mass"
    )
    max_baggage: FiniteFloat | None = Field(default=None, ge=0)
    max_baggage_front: FiniteFloat | None = Field(default=None, ge=0)
    max_baggage_back: FiniteFloat | None = Field(default=None, ge=0)
    max_baggage_wings: FiniteFloat | None = Field(default=None, ge=0)


class AircraftProfile(ContractModel):
    """Static W&B configuration for one aircraft type."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="e.g. KEN, MOA")
    description: str | None = None
    levers: dict[ItemKind, FiniteFloat] = Field(
        ..., min_length=1, description="Lever arm per loadable item kind"
    )
    empty_weight: FiniteFloat | None = Field(
        default=None,
        gt=0,
        description="Base weight used when a loading does not enter one",
    )
    limits: AircraftLimits
    envelope: EnvelopePolygon
    landing_envelope: EnvelopePolygon | None = Field(
        default=None,
        description="Envelope for the landing and zero-fuel configurations; defaults to envelope",
    )
    accept_boundary: bool = Field(
        default=False,
        description="Whether a CG point exactly on the envelope boundary passes",
    )

    @field_validator("levers", mode="before")
    @classmethod
    def parse_kind_names(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {ItemKind(k): arm for k, arm in v.items()}
        return v

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def lever_for(self, kind: ItemKind) -> float | None:
        """Lever arm for *kind*, or ``None`` when the type cannot load it."""
        return self.levers.get(kind)

    def limit(self, name: str) -> float | None:
        """Scalar limit by field name; ``None`` when not configured."""
        return getattr(self.limits, name)

    @property
    def zero_fuel_envelope(self) -> EnvelopePolygon:
        """Polygon for the fuel-less and landing configurations."""
        if self.landing_envelope is not None:
            return self.landing_envelope
        return self.envelope

    def envelope_for(self, phase: FlightPhase) -> EnvelopePolygon:
        if phase == FlightPhase.LANDING:
            return self.zero_fuel_envelope
        return self.envelope
