"""
Tests for sportfit/cli.py using typer's CliRunner.

What we test
------------
  - validate-config prints parsed values; bad path exits 1.
  - list-sports / list-metrics print the catalogue and metric table.
  - recommend --stats-file ranks, prints and writes JSON + CSV reports.
  - recommend --no-write skips report files; --top-n limits results.
  - recommend exits 1 with the gate message on insufficient data.
  - recommend exits 1 without exactly one stats source, or on a bad file.
  - recommend --athlete-id uses the configured API: success, 404 -> gate
    message, 500 and non-JSON bodies -> [ERROR] with exit 1.
  - tracking-metrics prints sport metrics, falling back to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

import httpx
from typer.testing import CliRunner

import sportfit.ingestion.stats_client as stats_client
from sportfit.cli import app

runner = CliRunner()


def _stats_file(tmp_path: Path, data: dict, name: str = "athlete_42.json") -> str:
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


# Stat table row with every Sprint Running criterion at its optimal.
_SPRINTER_ROW = {
    "id": 1,
    "athlete_id": 42,
    "speed_index": 10.0,
    "power_output": 9.0,
    "power_to_weight": 6.0,
    "neuromuscular_efficiency": 90.0,
    "sprint_fatigue_index": 85.0,
    "flexibility_index": 60.0,
    "bmi": 0.1,
    "vo2_max": 0.1,
    "grip_index": 0.1,
    "jumping_power": 0.1,
    "somatotype": None,
}


def _use_stat_store(monkeypatch, handler) -> None:
    """Route every StatsApiClient the CLI builds through ``handler``."""
    mock = httpx.MockTransport(handler)

    class _MockedClient(stats_client.StatsApiClient):
        def __init__(self, base_url, timeout_seconds=10.0, transport=None):
            super().__init__(base_url, timeout_seconds, transport=mock)

    monkeypatch.setattr(stats_client, "StatsApiClient", _MockedClient)


class TestValidateConfig:
    def test_ok(self, test_config_file):
        result = runner.invoke(app, ["validate-config", "--config", str(test_config_file)])
        assert result.exit_code == 0
        assert "[OK] Config is valid." in result.output
        assert "Top N:" in result.output

    def test_full(self, test_config_file):
        result = runner.invoke(
            app, ["validate-config", "--config", str(test_config_file), "--full"]
        )
        assert result.exit_code == 0
        assert '"missing_list_limit": 3' in result.output

    def test_missing(self, tmp_path):
        result = runner.invoke(app, ["validate-config", "--config", str(tmp_path / "x.toml")])
        assert result.exit_code == 1


class TestListCommands:
    def test_list_sports(self, test_config_file):
        result = runner.invoke(app, ["list-sports", "--config", str(test_config_file)])
        assert result.exit_code == 0
        assert "Martial Arts" in result.output

    def test_list_metrics(self):
        result = runner.invoke(app, ["list-metrics"])
        assert result.exit_code == 0
        assert "VO2 Max" in result.output
        assert "required before recommendations" in result.output


class TestRecommend:
    def test_writes_reports(self, tmp_path, test_config_file, sprinter_snapshot):
        result = runner.invoke(
            app,
            [
                "recommend",
                "--stats-file", _stats_file(tmp_path, sprinter_snapshot),
                "--config", str(test_config_file),
            ],
        )
        assert result.exit_code == 0, result.output
        assert "Sprint Running" in result.output
        assert "[OK] Recommendations written." in result.output

        out_dir = tmp_path / "out"
        json_files = list(out_dir.glob("recommendations_athlete_42_*.json"))
        csv_files = list(out_dir.glob("recommendations_athlete_42_*.csv"))
        assert len(json_files) == 1
        assert len(csv_files) == 1
        payload = json.loads(json_files[0].read_text(encoding="utf-8"))
        assert payload["recommendations"][0]["sport"] == "Sprint Running"
        assert payload["recommendations"][0]["score"] == 100

    def test_no_write(self, tmp_path, test_config_file, sprinter_snapshot):
        result = runner.invoke(
            app,
            [
                "recommend",
                "--stats-file", _stats_file(tmp_path, sprinter_snapshot),
                "--config", str(test_config_file),
                "--no-write",
                "--top-n", "1",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "Sprint Running" in result.output
        assert "Martial Arts" not in result.output
        assert not (tmp_path / "out").exists()

    def test_insufficient_data(self, tmp_path, test_config_file):
        result = runner.invoke(
            app,
            [
                "recommend",
                "--stats-file", _stats_file(tmp_path, {"athlete_id": 42, "bmi": None}),
                "--config", str(test_config_file),
            ],
        )
        assert result.exit_code == 1
        assert "10 insights need to be generated first" in result.output

    def test_missing_vo2max(self, tmp_path, test_config_file, sprinter_snapshot):
        del sprinter_snapshot["vo2max"]
        result = runner.invoke(
            app,
            [
                "recommend",
                "--stats-file", _stats_file(tmp_path, sprinter_snapshot),
                "--config", str(test_config_file),
            ],
        )
        assert result.exit_code == 1
        assert "Please generate these insights first: VO2 Max" in result.output

    def test_requires_one_source(self, test_config_file):
        result = runner.invoke(app, ["recommend", "--config", str(test_config_file)])
        assert result.exit_code == 1
        assert "exactly one of --stats-file or --athlete-id" in result.output

    def test_bad_stats_file(self, tmp_path, test_config_file):
        path = tmp_path / "bad.json"
        path.write_text("[]", encoding="utf-8")
        result = runner.invoke(
            app, ["recommend", "--stats-file", str(path), "--config", str(test_config_file)]
        )
        assert result.exit_code == 1
        assert "must contain a JSON object" in result.output


class TestRecommendFromApi:
    def _invoke(self, test_config_file, *extra):
        return runner.invoke(
            app,
            ["recommend", "--athlete-id", "42", "--config", str(test_config_file), *extra],
        )

    def test_success(self, tmp_path, monkeypatch, test_config_file):
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            if request.url.path == "/athlete-stat-crud/42":
                return httpx.Response(200, json=_SPRINTER_ROW)
            if request.url.path == "/athlete-crud/42":
                return httpx.Response(200, json={"id": 42, "name": "Sam Rivera"})
            return httpx.Response(404)

        monkeypatch.setenv("SPORTFIT_API_URL", "http://stats.test")
        _use_stat_store(monkeypatch, handler)
        result = self._invoke(test_config_file)

        assert result.exit_code == 0, result.output
        assert seen == [
            "http://stats.test/athlete-stat-crud/42",
            "http://stats.test/athlete-crud/42",
        ]
        assert "Sport Recommendations: Sam Rivera" in result.output
        assert "Sprint Running" in result.output
        json_files = list((tmp_path / "out").glob("recommendations_42_*.json"))
        assert len(json_files) == 1
        payload = json.loads(json_files[0].read_text(encoding="utf-8"))
        assert payload["recommendations"][0]["sport"] == "Sprint Running"
        assert payload["recommendations"][0]["score"] == 100

    def test_no_stats_on_record(self, monkeypatch, test_config_file):
        _use_stat_store(monkeypatch, lambda r: httpx.Response(404))
        result = self._invoke(test_config_file)
        assert result.exit_code == 1
        assert "10 insights need to be generated first" in result.output

    def test_server_error(self, monkeypatch, test_config_file):
        _use_stat_store(monkeypatch, lambda r: httpx.Response(500))
        result = self._invoke(test_config_file)
        assert result.exit_code == 1
        assert "[ERROR] Stat store request failed" in result.output

    def test_non_json_body(self, monkeypatch, test_config_file):
        _use_stat_store(
            monkeypatch, lambda r: httpx.Response(200, content=b"<html>gateway</html>")
        )
        result = self._invoke(test_config_file)
        assert result.exit_code == 1
        assert "[ERROR] Stat store returned a non-JSON body" in result.output
        assert not isinstance(result.exception, json.JSONDecodeError)

class TestTrackingMetrics:
    def test_known_sport(self):
        result = runner.invoke(app, ["tracking-metrics", "--sport", "Cycling"])
        assert result.exit_code == 0
        assert "Power Output (watts)" in result.output

    def test_unknown_sport(self):
        result = runner.invoke(app, ["tracking-metrics", "--sport", "Curling"])
        assert result.exit_code == 0
        assert "showing defaults" in result.output
        assert "Duration (min)" in result.output
