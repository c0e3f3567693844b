"""
Tests for sportfit/ingestion/stat_records.py.

What we test
------------
records_from_stat_row():
  - DB columns mapped to metric ids; null/absent columns unavailable.
  - None row -> every metric unavailable.
  - One record per metric definition, units filled in.

records_from_snapshot() / snapshot_from_records() / statuses_from_records():
  - Nested values kept as-is; snapshot drops null values; statuses cover all.

load_stat_file():
  - Stat row file and snapshot file both produce engine-ready records.
  - Missing file, invalid JSON, non-object, no recognised fields -> errors.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sportfit.ingestion.stat_records import (
    is_stat_row,
    load_stat_file,
    records_from_snapshot,
    records_from_stat_row,
    snapshot_from_records,
    statuses_from_records,
)
from sportfit.recommendations.sufficiency import check_data_sufficiency
from sportfit.taxonomy.metric_taxonomy import METRIC_DEFINITIONS

_FULL_ROW = {
    "id": 3,
    "athlete_id": 42,
    "bmi": 22.4,
    "power_to_weight": 4.6,
    "vo2_max": 58.0,
    "speed_index": 8.2,
    "power_output": 7.4,
    "sprint_fatigue_index": 78.0,
    "jumping_power": 66.0,
    "grip_index": 52.0,
    "neuromuscular_efficiency": 81.0,
    "flexibility_index": 61.0,
    "somatotype": None,
    "created_at": "2024-05-01T10:00:00Z",
}


def _write_json(tmp_path: Path, data) -> Path:
    path = tmp_path / "athlete_42.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestRecordsFromStatRow:
    def test_mapping(self):
        records = records_from_stat_row(_FULL_ROW)
        by_id = {str(r.metric_id): r for r in records}
        assert len(records) == len(METRIC_DEFINITIONS)
        assert by_id["vo2max"].value == 58.0
        assert by_id["vo2max"].status == "available"
        assert by_id["vo2max"].unit == "ml/kg/min"
        assert by_id["fatigue_index"].value == 78.0
        assert by_id["somatotype"].status == "unavailable"

    def test_none_row(self):
        records = records_from_stat_row(None)
        assert all(r.status == "unavailable" for r in records)

    def test_record_order(self):
        records = records_from_stat_row(_FULL_ROW)
        assert [r.metric_id for r in records] == list(METRIC_DEFINITIONS)


class TestSnapshotConversion:
    def test_snapshot_keeps_nested(self):
        records = records_from_snapshot({"vo2max": {"vo2max": 58.0}, "bmi": None})
        snapshot = snapshot_from_records(records)
        assert snapshot == {"vo2max": {"vo2max": 58.0}}

    def test_statuses_cover_all(self):
        statuses = statuses_from_records(records_from_snapshot({"bmi": 22.0}))
        assert len(statuses) == len(METRIC_DEFINITIONS)
        assert statuses["bmi"] == "available"
        assert statuses["vo2max"] == "unavailable"

    def test_row_passes_gate(self):
        records = records_from_stat_row(_FULL_ROW)
        result = check_data_sufficiency(
            snapshot_from_records(records), statuses_from_records(records)
        )
        assert result.passed is True


class TestShapeDetection:
    def test_row(self):
        assert is_stat_row(_FULL_ROW) is True

    def test_snapshot(self):
        assert is_stat_row({"vo2max": 58.0, "power_index": 7.0, "bmi": 22.0}) is False


class TestLoadStatFile:
    def test_row_file(self, tmp_path):
        records = load_stat_file(_write_json(tmp_path, _FULL_ROW))
        assert sum(r.is_available for r in records) == 10

    def test_snapshot_file(self, tmp_path, complete_snapshot):
        records = load_stat_file(_write_json(tmp_path, complete_snapshot))
        snapshot = snapshot_from_records(records)
        assert snapshot["vo2max"] == {"vo2max": 58.0, "test_date": "2024-05-01"}
        assert sum(r.is_available for r in records) == 11

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_stat_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_stat_file(path)

    def test_not_an_object(self, tmp_path):
        with pytest.raises(ValueError, match="must contain a JSON object"):
            load_stat_file(_write_json(tmp_path, [1, 2, 3]))

    def test_no_recognised_fields(self, tmp_path):
        with pytest.raises(ValueError, match="no recognised metric fields"):
            load_stat_file(_write_json(tmp_path, {"name": "Sam"}))
