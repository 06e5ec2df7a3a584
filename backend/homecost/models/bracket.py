"""Cost bracket model shared by the year-built and floor-area tables."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Bracket(BaseModel):
    """A range-classified cost entry.

    ``min`` and ``max`` are inclusive. ``None`` leaves that side unbounded,
    which is how the first and last entries of a table absorb every value
    outside the configured thresholds.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    min: float | None = None
    max: float | None = None
    cost: float = Field(gt=0)
    rse: float = Field(ge=0)

    @model_validator(mode="after")
    def min_le_max(self) -> Bracket:
        if self.min is not None and self.max is not None and self.min > self.max:
            msg = f"Bracket '{self.label}' has min {self.min} > max {self.max}"
            raise ValueError(msg)
        return self

    @property
    def cv(self) -> float:
        """Relative standard error as a coefficient of variation."""
        return self.rse / 100.0

    def contains(self, value: float) -> bool:
        """True if ``value`` falls inside this bracket's inclusive range."""
        return (self.min is None or value >= self.min) and (
            self.max is None or value <= self.max
        )
