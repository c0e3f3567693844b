"""
Recommendation report writer: CSV and JSON output for ranked sports.

All functions are pure I/O and consume in-memory ScoredSport lists produced
by ``rank_sports()``. Nothing here scores or re-orders; rank is list position.

Output files (written by ``sportfit recommend``)
------------------------------------------------
  data/outputs/recommendations/
    recommendations_{athlete_id}_{date}.csv   -- one row per ranked sport
    recommendations_{athlete_id}_{date}.json  -- same data plus criterion breakdown
"""

from __future__ import annotations

import csv
import json
import logging
import re
from datetime import date
from pathlib import Path

from sportfit.recommendations.explainer import explain, score_band
from sportfit.recommendations.scorer import ScoredSport

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "v1.0.0"

# Anything outside this set is replaced in the athlete part of a report filename.
_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def write_recommendation_csv(
    scored: list[ScoredSport],
    output_dir: Path,
    athlete_id: str,
    run_date: date | None = None,
) -> Path:
    """Write ranked recommendations to a CSV file.

    Columns: rank, sport, score, band, reason, icon, matched_stats.

    Args:
        scored:     Ranked ScoredSport objects, best first.
        output_dir: Directory to write the file (created if missing).
        athlete_id: Athlete identifier (used in filename).
        run_date:   Date label for the filename. Defaults to today.

    Returns:
        Path to the written CSV file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    csv_path = _report_path(output_dir, athlete_id, run_date, "csv")

    fieldnames = ["rank", "sport", "score", "band", "reason", "icon", "matched_stats"]

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for rank, ss in enumerate(scored, start=1):
            writer.writerow(
                {
                    "rank":          rank,
                    "sport":         ss.result.name,
                    "score":         ss.score,
                    "band":          score_band(ss.score),
                    "reason":        ss.result.reason,
                    "icon":          ss.result.icon,
                    "matched_stats": ss.matched_stats,
                }
            )

    logger.info("Recommendation CSV written: %s (%d rows)", csv_path, len(scored))
    return csv_path


def write_recommendation_json(
    scored: list[ScoredSport],
    output_dir: Path,
    athlete_id: str,
    run_date: date | None = None,
) -> Path:
    """Write ranked recommendations with explanations to a JSON file.

    Args:
        scored:     Ranked ScoredSport objects, best first.
        output_dir: Target directory.
        athlete_id: Used in filename + metadata.
        run_date:   Date label. Defaults to today.

    Returns:
        Path to the written JSON file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = _report_path(output_dir, athlete_id, run_date, "json")

    payload: dict = {
        "schema_version": SCHEMA_VERSION,
        "athlete_id":     athlete_id,
        "generated_at":   run_date.isoformat(),
        "recommendations": [],
    }

    for rank, ss in enumerate(scored):
        explanation = explain(ss.result, rank)
        payload["recommendations"].append(
            {
                "rank":    rank + 1,
                "sport":   ss.result.name,
                "score":   ss.score,
                "band":    score_band(ss.score),
                "reason":  ss.result.reason,
                "icon":    ss.result.icon,
                "insight": explanation.insight,
                "tips":    explanation.tips,
                "criteria": [
                    {
                        "metric_id":     m.metric_id,
                        "athlete_value": m.athlete_value,
                        "weight":        m.criterion.weight,
                        "min":           m.criterion.min,
                        "optimal":       m.criterion.optimal,
                        "match_score":   (
                            round(m.match_score, 4) if m.match_score is not None else None
                        ),
                        "strength":      m.strength,
                    }
                    for m in ss.matches
                ],
            }
        )

    json_path.write_text(json.dumps(payload, indent=2, default=str), encoding="utf-8")
    logger.info("Recommendation JSON written: %s", json_path)
    return json_path


# ── Helpers ───────────────────────────────────────────────────────────────────

def _report_path(output_dir: Path, athlete_id: str, run_date: date, ext: str) -> Path:
    """Build ``recommendations_{athlete_id}_{date}.{ext}`` inside ``output_dir``.

    Path separators and other unsafe characters in ``athlete_id`` become ``_``
    so the file always lands directly in ``output_dir``.
    """
    safe_id = _UNSAFE_FILENAME_CHARS.sub("_", str(athlete_id))
    return output_dir / f"recommendations_{safe_id}_{run_date}.{ext}"
