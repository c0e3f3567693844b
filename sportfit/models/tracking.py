"""
Training log entry for a chosen sport.

Entries are keyed by athlete and sport so a tracking store can show progress
per sport over time. Only metrics relevant to the sport (see
``sportfit.taxonomy.tracking_metrics``) count toward the "at least one
measurement" rule; unrelated keys are kept but ignored by that check.
"""

from __future__ import annotations

import datetime
from typing import Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from sportfit.taxonomy.tracking_metrics import metrics_for_sport


class TrackingEntry(BaseModel):
    """One dated training session for an athlete in a sport.

    Attributes:
        athlete_id: Athlete identifier (as used by the stat store).
        sport:      Sport name, normally one of the recommended sports.
        date:       Session date.
        metrics:    Metric key -> recorded value (number or free text).
    """

    model_config = ConfigDict(frozen=True)

    athlete_id: str
    sport: str
    date: datetime.date
    metrics: dict[str, Union[float, str]]

    @field_validator("sport")
    @classmethod
    def validate_sport_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Please select a sport.")
        return v.strip()

    @model_validator(mode="after")
    def validate_has_measurement(self) -> "TrackingEntry":
        keys = {m.key for m in metrics_for_sport(self.sport)}
        has_data = any(
            key in keys and value is not None and str(value).strip() != ""
            for key, value in self.metrics.items()
        )
        if not has_data:
            raise ValueError("Please enter at least one measurement.")
        return self
