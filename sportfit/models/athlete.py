"""
Athlete stat records as supplied by the stat store.

A ``StatRecord`` is one metric for one athlete together with its generation
status. The raw ``value`` is kept exactly as stored: a number, a numeric
string, or a nested object returned by a stat-generation endpoint. Numeric
resolution happens later in ``sportfit.recommendations.extraction``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, model_validator

from sportfit.taxonomy.metric_taxonomy import MetricId

StatStatus = Literal["available", "unavailable", "generating"]


class StatRecord(BaseModel):
    """One metric reading on record for an athlete.

    Attributes:
        metric_id: Metric identifier.
        value:     Raw stored value, or ``None`` when not generated yet.
        status:    ``"available"``, ``"unavailable"`` or ``"generating"``.
        unit:      Display unit for the metric.
    """

    model_config = ConfigDict(frozen=True)

    metric_id: MetricId
    value: Any = None
    status: StatStatus = "unavailable"
    unit: str = ""

    @model_validator(mode="after")
    def validate_available_has_value(self) -> "StatRecord":
        if self.status == "available" and self.value is None:
            raise ValueError(
                f"StatRecord for '{self.metric_id}' is marked available but has no value."
            )
        return self

    @property
    def is_available(self) -> bool:
        return self.status == "available"
