"""Domain Types - the gateway Outcome value.

Invariants:
    - Outcome.ok is True iff error is None
    - Outcome is immutable once built

Design Decisions:
    - Outcome as frozen dataclass: gateways report failures as values, not exceptions
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Outcome:
    """Result of a gateway operation."""
    ok: bool
    error: str | None = None

    def __post_init__(self):
        if self.ok and self.error is not None:
            raise ValueError("successful outcome cannot carry an error")
        if not self.ok and not self.error:
            raise ValueError("failed outcome requires a description")

    @classmethod
    def success(cls) -> "Outcome":
        return cls(ok=True)

    @classmethod
    def failure(cls, description: str) -> "Outcome":
        return cls(ok=False, error=description)
