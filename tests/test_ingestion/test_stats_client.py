"""
Tests for sportfit/ingestion/stats_client.py.

Uses ``httpx.MockTransport``; no network access.

What we test
------------
fetch_stat_row():
  - 200 -> dict; 404 -> None; 500 -> httpx.HTTPStatusError; non-object body -> None.
  - 200 with a non-JSON body -> ValueError naming the endpoint.
  - Requests the /athlete-stat-crud/{id} path under the base URL.

fetch_stat_records():
  - 404 -> every metric unavailable.

fetch_athlete_name():
  - Name returned; missing name, non-2xx, non-JSON body -> "Athlete".
"""

from __future__ import annotations

import httpx
import pytest

from sportfit.ingestion.stats_client import DEFAULT_ATHLETE_NAME, StatsApiClient


def _client(handler) -> StatsApiClient:
    return StatsApiClient("http://stats.test/", transport=httpx.MockTransport(handler))


class TestFetchStatRow:
    def test_ok(self):
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json={"athlete_id": 42, "bmi": 22.4})

        row = _client(handler).fetch_stat_row("42")
        assert row == {"athlete_id": 42, "bmi": 22.4}
        assert seen == ["http://stats.test/athlete-stat-crud/42"]

    def test_not_found(self):
        row = _client(lambda r: httpx.Response(404)).fetch_stat_row("42")
        assert row is None

    def test_server_error(self):
        with pytest.raises(httpx.HTTPStatusError):
            _client(lambda r: httpx.Response(500)).fetch_stat_row("42")

    def test_null_body(self):
        row = _client(lambda r: httpx.Response(200, content=b"null")).fetch_stat_row("42")
        assert row is None

    def test_non_json_body(self):
        handler = lambda r: httpx.Response(200, content=b"<html>gateway</html>")  # noqa: E731
        with pytest.raises(ValueError, match="non-JSON body .*/athlete-stat-crud/42"):
            _client(handler).fetch_stat_row("42")


class TestFetchStatRecords:
    def test_not_found_all_unavailable(self):
        records = _client(lambda r: httpx.Response(404)).fetch_stat_records("42")
        assert records
        assert all(r.status == "unavailable" for r in records)

    def test_row_mapped(self):
        handler = lambda r: httpx.Response(200, json={"vo2_max": 58.0})  # noqa: E731
        records = _client(handler).fetch_stat_records("42")
        by_id = {str(r.metric_id): r for r in records}
        assert by_id["vo2max"].value == 58.0
        assert by_id["vo2max"].is_available


class TestFetchAthleteName:
    def test_name(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/athlete-crud/42"
            return httpx.Response(200, json={"id": 42, "name": "Sam Rivera"})

        assert _client(handler).fetch_athlete_name("42") == "Sam Rivera"

    def test_missing_name(self):
        name = _client(lambda r: httpx.Response(200, json={"id": 42})).fetch_athlete_name("42")
        assert name == DEFAULT_ATHLETE_NAME

    def test_not_found(self):
        name = _client(lambda r: httpx.Response(404)).fetch_athlete_name("42")
        assert name == "Athlete"

    def test_non_json_body(self):
        handler = lambda r: httpx.Response(200, content=b"<html>gateway</html>")  # noqa: E731
        assert _client(handler).fetch_athlete_name("42") == DEFAULT_ATHLETE_NAME
