"""
Metric value extraction: resolve one numeric reading per metric from a snapshot.

Snapshots come straight from the stat store, so a metric may be stored as a
bare number, a numeric string, or the full object a stat-generation endpoint
returned (e.g. ``{"neuromuscular_efficiency": 82.5, "nme_leg": 1.2, ...}``).

Resolution order for ``extract_metric_value(metric_id, snapshot)``
------------------------------------------------------------------
  1. Bare number / numeric string under ``metric_id``     -> that value.
  2. Object under ``metric_id``: first candidate field from
     ``EXTRACTION_RULES[metric_id]`` holding a number or numeric string.
  3. Object under ``metric_id``: first finite number among its own values,
     skipping identifier, timestamp and date keys.
  4. Nothing usable                                       -> 0.0.

0.0 means "unknown", not failure. The function never raises and never returns
a negative number, so it is safe to use both for missing-data checks and for
scoring.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Any, Mapping

from sportfit.taxonomy.metric_taxonomy import MetricId

# Metric-specific field names, most specific first.
_SPECIFIC_FIELDS: dict[str, tuple[str, ...]] = {
    MetricId.BMI:                   ("bmi",),
    MetricId.VO2MAX:                ("vo2max", "vo2_max"),
    MetricId.POWER_TO_WEIGHT_RATIO: ("power_to_weight", "ptw"),
    MetricId.SPEED_INDEX:           ("speed",),
    MetricId.FATIGUE_INDEX:         ("fatigue", "sprint_fatigue_index"),
    MetricId.GRIP_INDEX:            ("grip_strength", "grip"),
    MetricId.FLEXIBILITY_INDEX:     ("flexibility",),
    MetricId.JUMPING_INDEX:         ("jumping_power", "jump"),
    MetricId.NEUROMUSCULAR_INDEXES: ("neuromuscular_efficiency",),
    MetricId.POWER_INDEX:           ("power", "power_output"),
    MetricId.SOMATOTYPE:            (),
}

_EXCLUDED_KEYS: frozenset[str] = frozenset({"id", "athlete_id"})


def _generic_fields(metric_id: str) -> tuple[str, ...]:
    return (metric_id, metric_id.removesuffix("_index"), "value", "result", "data")


def _dedupe(fields: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(fields))


EXTRACTION_RULES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    str(metric): _dedupe(specific + _generic_fields(str(metric)))
    for metric, specific in _SPECIFIC_FIELDS.items()
})


def candidate_fields(metric_id: str) -> tuple[str, ...]:
    """Return the ordered candidate field names searched inside a metric object."""
    rule = EXTRACTION_RULES.get(str(metric_id))
    if rule is not None:
        return rule
    return _dedupe(_generic_fields(str(metric_id)))


def extract_metric_value(metric_id: str, snapshot: Mapping[str, Any] | None) -> float:
    """Resolve the athlete's current numeric reading for ``metric_id``.

    Args:
        metric_id: Metric identifier, e.g. ``"vo2max"``.
        snapshot:  Metric identifier -> number, numeric string, object or None.

    Returns:
        A finite, non-negative float; ``0.0`` when no usable value exists.
    """
    if not isinstance(snapshot, Mapping):
        return 0.0

    raw = snapshot.get(str(metric_id))
    if raw is None:
        return 0.0

    direct = _coerce_number(raw, allow_strings=True)
    if direct is not None:
        return _non_negative(direct)

    if not isinstance(raw, Mapping):
        return 0.0

    for field in candidate_fields(metric_id):
        if field in raw:
            value = _coerce_number(raw[field], allow_strings=True)
            if value is not None:
                return _non_negative(value)

    for key, value in raw.items():
        if _is_excluded_key(key):
            continue
        number = _coerce_number(value, allow_strings=False)
        if number is not None:
            return _non_negative(number)

    return 0.0


def has_metric_value(metric_id: str, snapshot: Mapping[str, Any] | None) -> bool:
    """True if ``metric_id`` resolves to a meaningful (> 0) reading."""
    return extract_metric_value(metric_id, snapshot) > 0


# ── Helpers ───────────────────────────────────────────────────────────────────

def _coerce_number(value: Any, allow_strings: bool) -> float | None:
    """Return ``value`` as a finite float, or None if it is not numeric."""
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        elif allow_strings and isinstance(value, str):
            number = float(value.strip())
        else:
            return None
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def _non_negative(value: float) -> float:
    return value if value > 0 else 0.0


def _is_excluded_key(key: Any) -> bool:
    if not isinstance(key, str):
        return True
    k = key.lower()
    return (
        k in _EXCLUDED_KEYS
        or k.endswith("_id")
        or k.endswith("_at")
        or "timestamp" in k
        or "date" in k
    )
