"""
Athlete metric taxonomy: the fixed set of physical indices the engine reads.

Every metric an athlete can have on record is a ``MetricId``. Display names,
descriptions, units and icons live in ``METRIC_DEFINITIONS`` (kept in the order
they are presented to users, somatotype first, VO2 max last).

Integrity contract (verified by ``tests/test_taxonomy/test_metric_taxonomy.py``):
  - Every ``MetricId`` has exactly one entry in ``METRIC_DEFINITIONS``.
  - ``REQUIRED_METRICS`` is a subset of ``MetricId`` and excludes ``somatotype``
    (a categorical classification, never scored).
  - Every value of ``STAT_FIELD_MAP`` is a ``MetricId``.

This module has NO imports from any other ``sportfit`` package.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Mapping


class MetricId(StrEnum):
    """Identifier of one derived physical index."""

    SOMATOTYPE = "somatotype"
    BMI = "bmi"
    FLEXIBILITY_INDEX = "flexibility_index"
    GRIP_INDEX = "grip_index"
    JUMPING_INDEX = "jumping_index"
    NEUROMUSCULAR_INDEXES = "neuromuscular_indexes"
    POWER_INDEX = "power_index"
    POWER_TO_WEIGHT_RATIO = "power_to_weight_ratio"
    FATIGUE_INDEX = "fatigue_index"
    SPEED_INDEX = "speed_index"
    VO2MAX = "vo2max"


@dataclass(frozen=True)
class MetricDefinition:
    """Display metadata for one metric.

    Attributes:
        id:          Metric identifier.
        name:        Human-readable name used in reasons and error messages.
        description: One-line description of what the metric measures.
        unit:        Display unit; empty string when unitless.
        icon:        Icon tag for the display layer.
    """

    id: MetricId
    name: str
    description: str
    unit: str
    icon: str


_DEFINITIONS: tuple[MetricDefinition, ...] = (
    MetricDefinition(
        MetricId.SOMATOTYPE, "Somatotype",
        "Body type classification (endomorph, mesomorph, ectomorph)", "", "body",
    ),
    MetricDefinition(MetricId.BMI, "BMI", "Body Mass Index", "kg/m²", "calculator"),
    MetricDefinition(
        MetricId.FLEXIBILITY_INDEX, "Flexibility Index",
        "Measure of overall body flexibility", "cm", "fitness",
    ),
    MetricDefinition(
        MetricId.GRIP_INDEX, "Grip Index",
        "Measure of hand and forearm strength", "kg", "hand-right",
    ),
    MetricDefinition(
        MetricId.JUMPING_INDEX, "Jumping Index",
        "Measure of jumping ability", "cm", "trending-up",
    ),
    MetricDefinition(
        MetricId.NEUROMUSCULAR_INDEXES, "Neuromuscular Indexes",
        "Measurements of neuromuscular coordination and efficiency", "", "flash",
    ),
    MetricDefinition(
        MetricId.POWER_INDEX, "Power Index",
        "Overall measure of athletic power output", "", "speedometer",
    ),
    MetricDefinition(
        MetricId.POWER_TO_WEIGHT_RATIO, "Power to Weight Ratio",
        "Power output relative to body weight", "W/kg", "barbell",
    ),
    MetricDefinition(
        MetricId.FATIGUE_INDEX, "Fatigue Index",
        "Measure of resistance to fatigue", "%", "battery-half",
    ),
    MetricDefinition(
        MetricId.SPEED_INDEX, "Speed Index",
        "Overall measure of athletic speed", "m/s", "stopwatch",
    ),
    MetricDefinition(
        MetricId.VO2MAX, "VO2 Max",
        "Maximum oxygen uptake during exercise", "ml/kg/min", "pulse",
    ),
)

METRIC_DEFINITIONS: Mapping[MetricId, MetricDefinition] = MappingProxyType(
    {d.id: d for d in _DEFINITIONS}
)

# Metrics that must be available (and non-zero) before recommendations run.
# Order here is the order missing metrics are reported in.
REQUIRED_METRICS: tuple[MetricId, ...] = (
    MetricId.BMI,
    MetricId.VO2MAX,
    MetricId.POWER_TO_WEIGHT_RATIO,
    MetricId.SPEED_INDEX,
    MetricId.FATIGUE_INDEX,
    MetricId.GRIP_INDEX,
    MetricId.FLEXIBILITY_INDEX,
    MetricId.JUMPING_INDEX,
    MetricId.NEUROMUSCULAR_INDEXES,
    MetricId.POWER_INDEX,
)

# Column name in the athlete stat table -> metric identifier.
STAT_FIELD_MAP: Mapping[str, MetricId] = MappingProxyType({
    "bmi":                      MetricId.BMI,
    "power_to_weight":          MetricId.POWER_TO_WEIGHT_RATIO,
    "vo2_max":                  MetricId.VO2MAX,
    "speed_index":              MetricId.SPEED_INDEX,
    "power_output":             MetricId.POWER_INDEX,
    "sprint_fatigue_index":     MetricId.FATIGUE_INDEX,
    "jumping_power":            MetricId.JUMPING_INDEX,
    "grip_index":               MetricId.GRIP_INDEX,
    "neuromuscular_efficiency": MetricId.NEUROMUSCULAR_INDEXES,
    "flexibility_index":        MetricId.FLEXIBILITY_INDEX,
    "somatotype":               MetricId.SOMATOTYPE,
})


def metric_display_name(metric_id: str) -> str:
    """Return the display name for ``metric_id``, or the raw id if unknown."""
    try:
        return METRIC_DEFINITIONS[MetricId(metric_id)].name
    except ValueError:
        return metric_id


def metric_unit(metric_id: str) -> str:
    """Return the display unit for ``metric_id`` (empty string if unknown)."""
    try:
        return METRIC_DEFINITIONS[MetricId(metric_id)].unit
    except ValueError:
        return ""
