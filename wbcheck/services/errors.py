"""Engine exceptions.

These signal caller or configuration misuse and abort the request. Expected
validation failures are ``FailReason`` values, never exceptions.
"""


class WBCheckError(Exception):
    """Base exception for all engine errors."""


class UnknownItemKindError(WBCheckError):
    """Raised when an entered item name is not a known item kind."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown item kind: '{name}'")


class MissingLeverError(WBCheckError):
    """Raised when a loading enters a kind the profile has no lever for."""

    def __init__(self, aircraft: str, kind: str):
        self.aircraft = aircraft
        self.kind = kind
        super().__init__(f"Aircraft {aircraft} has no lever arm for '{kind}'")


class DegenerateAggregateError(WBCheckError):
    """Raised when the items to aggregate weigh nothing."""

    def __init__(self, total_weight: float):
        self.total_weight = total_weight
        super().__init__(
            f"Cannot compute a center of gravity for total weight {total_weight}"
        )
