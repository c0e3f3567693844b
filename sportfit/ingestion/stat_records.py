"""
Stat record ingestion: turn stored athlete stats into engine inputs.

Two input shapes are accepted:

  Stat table row   -- one column per metric, named as in ``STAT_FIELD_MAP``::

      {"athlete_id": 7, "bmi": 22.4, "vo2_max": 58.0, "power_output": 9.1, ...}

  Metric snapshot  -- keyed by metric identifier, values possibly nested::

      {"bmi": 22.4, "vo2max": {"vo2max": 58.0}, "power_index": 9.1, ...}

Either way the result is one ``StatRecord`` per metric definition, with status
``"available"`` when a non-null value is on record and ``"unavailable"``
otherwise. ``snapshot_from_records()`` and ``statuses_from_records()`` split
the records back into the two mappings the engine reads.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

from sportfit.models.athlete import StatRecord
from sportfit.taxonomy.metric_taxonomy import (
    METRIC_DEFINITIONS,
    STAT_FIELD_MAP,
    MetricId,
)

logger = logging.getLogger(__name__)

# Metric id -> stat table column.
_COLUMN_FOR_METRIC: dict[MetricId, str] = {m: col for col, m in STAT_FIELD_MAP.items()}

# Keys that only ever appear in one of the two shapes.
_ROW_ONLY_KEYS: frozenset[str] = frozenset(STAT_FIELD_MAP) - {str(m) for m in MetricId}
_SNAPSHOT_ONLY_KEYS: frozenset[str] = frozenset(str(m) for m in MetricId) - frozenset(STAT_FIELD_MAP)


def _record(metric_id: MetricId, value: Any) -> StatRecord:
    return StatRecord(
        metric_id=metric_id,
        value=value,
        status="available" if value is not None else "unavailable",
        unit=METRIC_DEFINITIONS[metric_id].unit,
    )


def records_from_stat_row(row: Mapping[str, Any] | None) -> list[StatRecord]:
    """Build one StatRecord per metric from a stat table row.

    Args:
        row: Column name -> stored value. ``None`` means no row on record.

    Returns:
        Records in metric definition order; null or absent columns are
        ``"unavailable"``.
    """
    row = row or {}
    return [
        _record(metric_id, row.get(_COLUMN_FOR_METRIC.get(metric_id, str(metric_id))))
        for metric_id in METRIC_DEFINITIONS
    ]


def records_from_snapshot(snapshot: Mapping[str, Any] | None) -> list[StatRecord]:
    """Build one StatRecord per metric from a metric-keyed snapshot."""
    snapshot = snapshot or {}
    return [_record(metric_id, snapshot.get(str(metric_id))) for metric_id in METRIC_DEFINITIONS]


def snapshot_from_records(records: Iterable[StatRecord]) -> dict[str, Any]:
    """Metric id -> raw value, for every record with a value on record."""
    return {str(r.metric_id): r.value for r in records if r.value is not None}


def statuses_from_records(records: Iterable[StatRecord]) -> dict[str, str]:
    """Metric id -> generation status, for every record."""
    return {str(r.metric_id): r.status for r in records}


def is_stat_row(data: Mapping[str, Any]) -> bool:
    """True if ``data`` looks like a stat table row rather than a snapshot."""
    keys = set(data)
    return len(keys & _ROW_ONLY_KEYS) >= len(keys & _SNAPSHOT_ONLY_KEYS)


def load_stat_file(path: Path) -> list[StatRecord]:
    """Read athlete stats from a JSON file holding a row or a snapshot.

    Args:
        path: Path to a JSON file containing a single object.

    Returns:
        One StatRecord per metric definition.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file is not valid JSON, is not an object, or has no
            recognisable metric fields.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Stats file not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path.name}: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(
            f"{path.name} must contain a JSON object, got {type(data).__name__}."
        )

    known = set(STAT_FIELD_MAP) | {str(m) for m in MetricId}
    if not known & set(data):
        raise ValueError(f"{path.name} has no recognised metric fields.")

    if is_stat_row(data):
        records = records_from_stat_row(data)
        shape = "stat row"
    else:
        records = records_from_snapshot(data)
        shape = "snapshot"

    logger.info(
        "Loaded %s from %s (%d/%d metrics available)",
        shape, path.name, sum(r.is_available for r in records), len(records),
    )
    return records
