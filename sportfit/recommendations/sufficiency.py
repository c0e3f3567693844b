"""
Data-sufficiency gate: refuse to rank sports on an incomplete metric snapshot.

Recommendations are only meaningful when every metric in ``REQUIRED_METRICS``
has been generated AND resolves to a real reading. The gate runs before the
ranker and rejects the request otherwise.

Checks performed (in order)
---------------------------
1. ``availability`` — every required metric has status ``"available"``.
2. ``values``       — every available required metric extracts to > 0.

The first failing stage decides the outcome; the values stage is not
evaluated when metrics are still waiting to be generated.

Messages
--------
Up to ``missing_list_limit`` (default 3) missing metrics are named; beyond
that only the count is reported::

    Please generate these insights first: BMI, VO2 Max
    10 insights need to be generated first
    Cannot generate recommendations. Missing data for: Grip Index
    Cannot generate recommendations. 4 stats have no values

Status source
-------------
Callers with a stat store pass ``statuses`` (metric id -> status). Without it,
a metric counts as available when the snapshot holds a non-null value for it.

Raising vs returning
--------------------
``check_data_sufficiency()`` returns a ``SufficiencyResult`` and never raises.
``assert_data_sufficient()`` raises ``DataInsufficientError`` on failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from sportfit.recommendations.extraction import extract_metric_value
from sportfit.taxonomy.metric_taxonomy import REQUIRED_METRICS, metric_display_name

DEFAULT_MISSING_LIST_LIMIT = 3

STAGE_AVAILABILITY = "availability"
STAGE_VALUES = "values"


# ── Custom exceptions ─────────────────────────────────────────────────────────


class DataInsufficientError(ValueError):
    """Raised when required metrics are unavailable or have no usable value.

    Attributes:
        missing: Metric ids that failed the check, in required-set order.
        stage:   ``"availability"`` or ``"values"``.
        count:   Number of failing metrics.
    """

    def __init__(self, message: str, missing: tuple[str, ...], stage: str) -> None:
        self.missing = missing
        self.stage   = stage
        self.count   = len(missing)
        super().__init__(message)


# ── Result type ───────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SufficiencyResult:
    """Outcome of the data-sufficiency gate for one snapshot.

    Attributes:
        passed:  True only if both stages passed.
        checks:  Metric id -> True when the metric is available and non-zero.
        missing: Failing metric ids for the first failing stage (empty if passed).
        stage:   Failing stage name, or None if passed.
        message: User-facing explanation, or None if passed.
    """

    passed:  bool
    checks:  dict[str, bool]
    missing: tuple[str, ...]
    stage:   Optional[str]
    message: Optional[str]


# ── Public functions ──────────────────────────────────────────────────────────


def check_data_sufficiency(
    snapshot: Mapping[str, Any] | None,
    statuses: Mapping[str, str] | None = None,
    missing_list_limit: int = DEFAULT_MISSING_LIST_LIMIT,
) -> SufficiencyResult:
    """Evaluate both gate stages without raising.

    Args:
        snapshot:           Metric id -> raw stored value.
        statuses:           Optional metric id -> generation status.
        missing_list_limit: Most metric names listed before switching to a count.

    Returns:
        SufficiencyResult. Check ``result.passed`` before ranking.
    """
    snapshot = snapshot if isinstance(snapshot, Mapping) else {}

    unavailable: list[str] = []
    empty: list[str] = []
    checks: dict[str, bool] = {}

    for metric_id in REQUIRED_METRICS:
        key = str(metric_id)
        if not _is_available(key, snapshot, statuses):
            unavailable.append(key)
            checks[key] = False
        elif extract_metric_value(key, snapshot) <= 0:
            empty.append(key)
            checks[key] = False
        else:
            checks[key] = True

    if unavailable:
        return SufficiencyResult(
            passed=False,
            checks=checks,
            missing=tuple(unavailable),
            stage=STAGE_AVAILABILITY,
            message=_availability_message(unavailable, missing_list_limit),
        )
    if empty:
        return SufficiencyResult(
            passed=False,
            checks=checks,
            missing=tuple(empty),
            stage=STAGE_VALUES,
            message=_values_message(empty, missing_list_limit),
        )
    return SufficiencyResult(
        passed=True, checks=checks, missing=(), stage=None, message=None,
    )


def assert_data_sufficient(
    snapshot: Mapping[str, Any] | None,
    statuses: Mapping[str, str] | None = None,
    missing_list_limit: int = DEFAULT_MISSING_LIST_LIMIT,
) -> None:
    """Raise ``DataInsufficientError`` if the snapshot fails the gate.

    Raises:
        DataInsufficientError: With the stage's message and failing metric ids.
    """
    result = check_data_sufficiency(snapshot, statuses, missing_list_limit)
    if not result.passed:
        raise DataInsufficientError(result.message, result.missing, result.stage)


# ── Helpers ───────────────────────────────────────────────────────────────────


def _is_available(
    metric_id: str,
    snapshot: Mapping[str, Any],
    statuses: Mapping[str, str] | None,
) -> bool:
    if statuses is None:
        return snapshot.get(metric_id) is not None
    return statuses.get(metric_id) == "available"


def _availability_message(missing: list[str], limit: int) -> str:
    if len(missing) > limit:
        return f"{len(missing)} insights need to be generated first"
    names = ", ".join(metric_display_name(m) for m in missing)
    return f"Please generate these insights first: {names}"


def _values_message(missing: list[str], limit: int) -> str:
    if len(missing) > limit:
        return f"Cannot generate recommendations. {len(missing)} stats have no values"
    names = ", ".join(metric_display_name(m) for m in missing)
    return f"Cannot generate recommendations. Missing data for: {names}"
