"""
Shared pytest fixtures for the sportfit test suite.

Provides:
  - ``complete_snapshot``: every required metric present with a realistic value.
  - ``sprinter_snapshot``: every Sprint Running criterion at (or above) its
    optimal, every other required metric at a token 0.1.
  - ``sprint_profile``: the built-in Sprint Running profile.
  - ``test_config_file``: a TOML config in ``tmp_path`` that writes reports to
    ``tmp_path/out`` and logs to stdout only.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from sportfit.models.sport import SportProfile
from sportfit.taxonomy.sport_catalogue import get_sport_profile


# ── Snapshots ─────────────────────────────────────────────────────────────────

@pytest.fixture
def complete_snapshot() -> dict:
    """A realistic snapshot with all ten required metrics (some nested)."""
    return {
        "bmi": 22.4,
        "vo2max": {"vo2max": 58.0, "test_date": "2024-05-01"},
        "power_to_weight_ratio": 4.6,
        "speed_index": "8.2",
        "fatigue_index": {"sprint_fatigue_index": 78.0},
        "grip_index": {"grip_strength": 52.0, "athlete_id": 7},
        "flexibility_index": 61.0,
        "jumping_index": {"jumping_power": 66.0},
        "neuromuscular_indexes": {"neuromuscular_efficiency": 81.0, "nme_leg": 1.2},
        "power_index": 7.4,
        "somatotype": {"endomorphy": 2.5, "mesomorphy": 5.0, "ectomorphy": 3.0},
    }


@pytest.fixture
def sprinter_snapshot() -> dict:
    """Sprint Running criteria at optimal; other required metrics minimal."""
    return {
        "speed_index": 10.0,
        "power_index": 9.0,
        "power_to_weight_ratio": 6.0,
        "neuromuscular_indexes": 90.0,
        "fatigue_index": 85.0,
        "flexibility_index": 60.0,
        "bmi": 0.1,
        "vo2max": 0.1,
        "grip_index": 0.1,
        "jumping_index": 0.1,
    }


@pytest.fixture
def sprint_profile() -> SportProfile:
    profile = get_sport_profile("Sprint Running")
    assert profile is not None
    return profile


# ── Config ────────────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def _clear_sportfit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SPORTFIT_* variables from the developer's shell out of tests."""
    for var in ("SPORTFIT_API_URL", "SPORTFIT_LOG_LEVEL", "SPORTFIT_OUTPUT_DIR", "SPORTFIT_DEBUG"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def test_config_file(tmp_path: Path) -> Path:
    """Write a minimal config TOML and return its path."""
    out_dir = (tmp_path / "out").as_posix()
    path = tmp_path / "config" / "test.toml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        "[scoring]\n"
        "top_n = 3\n"
        "missing_list_limit = 3\n"
        "\n"
        "[output]\n"
        f'recommendation_dir = "{out_dir}"\n'
        "\n"
        "[logging]\n"
        'level = "WARNING"\n'
        'log_file = ""\n',
        encoding="utf-8",
    )
    return path
