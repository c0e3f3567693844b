"""
REST client for the athlete stat store.

Endpoints
---------
  GET {base_url}/athlete-stat-crud/{athlete_id}
    -> 200: stat table row (one column per metric, see STAT_FIELD_MAP)
    -> 404: no stats generated yet for this athlete

  GET {base_url}/athlete-crud/{athlete_id}
    -> 200: {"name": "...", ...}

Configuration (config/default.toml ``[api]`` or SPORTFIT_API_URL)::

    [api]
    base_url        = "http://localhost:5000"
    timeout_seconds = 10.0

Usage::

    client = StatsApiClient(config.api.base_url, config.api.timeout_seconds)
    records = client.fetch_stat_records("42")
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from sportfit.ingestion.stat_records import records_from_stat_row
from sportfit.models.athlete import StatRecord

logger = logging.getLogger(__name__)

DEFAULT_ATHLETE_NAME = "Athlete"


class StatsApiClient:
    """Synchronous client for the athlete CRUD API.

    Args:
        base_url:        API root, e.g. ``"http://localhost:5000"``.
        timeout_seconds: Per-request timeout.
        transport:       Optional ``httpx`` transport (tests pass a
                         ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: Optional[Any] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    def _client(self):
        import httpx

        return httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout_seconds,
            transport=self._transport,
        )

    def fetch_stat_row(self, athlete_id: str) -> dict[str, Any] | None:
        """Fetch the athlete's stat table row.

        Returns:
            The row as a dict, or ``None`` if the athlete has no stats (404)
            or the body is a JSON value other than an object.

        Raises:
            httpx.HTTPStatusError: On any other non-2xx response.
            httpx.HTTPError: On transport failures.
            ValueError: If a 2xx body is not valid JSON.
        """
        path = f"/athlete-stat-crud/{athlete_id}"
        with self._client() as client:
            resp = client.get(path)
        if resp.status_code == 404:
            logger.info("No stats on record for athlete %s", athlete_id)
            return None
        resp.raise_for_status()

        try:
            data = resp.json()
        except ValueError as exc:
            raise ValueError(
                f"Stat store returned a non-JSON body for {self.base_url}{path}"
            ) from exc
        if not isinstance(data, dict):
            logger.warning(
                "Unexpected stat payload for athlete %s: %s", athlete_id, type(data).__name__
            )
            return None
        return data

    def fetch_stat_records(self, athlete_id: str) -> list[StatRecord]:
        """Fetch stats and convert them to one StatRecord per metric.

        An athlete with no stats yields records that are all ``"unavailable"``.
        """
        return records_from_stat_row(self.fetch_stat_row(athlete_id))

    def fetch_athlete_name(self, athlete_id: str) -> str:
        """Return the athlete's display name, or ``"Athlete"`` if unknown.

        Raises:
            httpx.HTTPError: On transport failures.
        """
        with self._client() as client:
            resp = client.get(f"/athlete-crud/{athlete_id}")
        if not resp.is_success:
            logger.warning(
                "Athlete lookup for %s returned HTTP %d", athlete_id, resp.status_code
            )
            return DEFAULT_ATHLETE_NAME

        try:
            data = resp.json()
        except ValueError:
            logger.warning("Athlete lookup for %s returned a non-JSON body", athlete_id)
            return DEFAULT_ATHLETE_NAME
        if isinstance(data, dict) and data.get("name"):
            return str(data["name"])
        return DEFAULT_ATHLETE_NAME
