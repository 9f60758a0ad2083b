"""Validation result wrapper."""

from pydantic import Field

from wbcheck.contracts.common import ContractModel
from wbcheck.contracts.enums import FailReason, FlightPhase
from wbcheck.contracts.loading import WeightLeverPoint


class ValidationResult(ContractModel):
    """Outcome of one W&B validation.

    On success: ``reason`` is ``None``.
    On failure: ``reason`` names the first violated constraint.
    The computed CG point is returned either way, for display.
    """

    success: bool
    phase: FlightPhase
    aircraft: str
    point: WeightLeverPoint = Field(..., description="CG point of the validated configuration")
    zero_fuel_point: WeightLeverPoint | None = None
    reason: FailReason | None = None

    @classmethod
    def ok(
        cls,
        aircraft: str,
        phase: FlightPhase,
        point: WeightLeverPoint,
        zero_fuel_point: WeightLeverPoint | None = None,
    ) -> "ValidationResult":
        return cls(
            success=True,
            phase=phase,
            aircraft=aircraft,
            point=point,
            zero_fuel_point=zero_fuel_point,
        )

    @classmethod
    def fail(
        cls,
        aircraft: str,
        phase: FlightPhase,
        reason: FailReason,
        point: WeightLeverPoint,
        zero_fuel_point: WeightLeverPoint | None = None,
    ) -> "ValidationResult":
        return cls(
            success=False,
            phase=phase,
            aircraft=aircraft,
            point=point,
            zero_fuel_point=zero_fuel_point,
            reason=reason,
        )
