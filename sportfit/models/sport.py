"""
Sport profile models.

A ``SportProfile`` describes what a sport asks of an athlete: for each metric
it cares about, a ``Criterion`` with a relative weight, a minimum threshold
and an optimal value. Scores saturate at the optimal value.

Both models are frozen; the catalogue is built once at import time and shared
by every scoring call.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from sportfit.taxonomy.metric_taxonomy import MetricId


class Criterion(BaseModel):
    """A sport's expectation for one metric.

    Attributes:
        weight:  Relative importance of the metric within the sport (> 0).
        min:     Threshold below which only partial credit is given.
        optimal: Value at (or above) which the metric fully matches.
    """

    model_config = ConfigDict(frozen=True)

    weight: float
    min: float
    optimal: float

    @field_validator("weight")
    @classmethod
    def validate_weight_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"weight must be > 0, got {v}.")
        return v

    @model_validator(mode="after")
    def validate_range(self) -> "Criterion":
        if self.optimal < self.min:
            raise ValueError(
                f"optimal ({self.optimal}) must be >= min ({self.min})."
            )
        return self


class SportProfile(BaseModel):
    """Catalogue entry for one sport.

    Attributes:
        name:     Unique display name, e.g. ``"Sprint Running"``.
        criteria: Metric identifier -> ``Criterion``. Iteration order is the
                  order reason fragments are produced in.
        icon:     Icon tag passed through to every ``MatchResult``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    criteria: dict[MetricId, Criterion]
    icon: str

    @field_validator("name")
    @classmethod
    def validate_name_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("name must not be empty.")
        return v.strip()

    @property
    def total_weight(self) -> float:
        """Sum of all criterion weights."""
        return sum(c.weight for c in self.criteria.values())
