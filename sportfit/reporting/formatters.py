"""
ASCII terminal formatters for CLI commands.

All formatters accept in-memory engine objects and return plain multi-line
strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Score bands
-----------
Every recommendation row shows its qualitative band next to the score::

     1  Sprint Running           100  [EXCELLENT]
     2  Basketball                64  [GOOD]
"""

from __future__ import annotations

from typing import Sequence

from sportfit.models.sport import SportProfile
from sportfit.recommendations.explainer import explain, score_band
from sportfit.recommendations.scorer import ScoredSport
from sportfit.taxonomy.metric_taxonomy import (
    METRIC_DEFINITIONS,
    REQUIRED_METRICS,
    metric_display_name,
)
from sportfit.taxonomy.tracking_metrics import TrackingMetric


def _fmt_number(value: float) -> str:
    return f"{value:g}"


# ── Catalogue ─────────────────────────────────────────────────────────────────


def format_sport_catalogue(profiles: Sequence[SportProfile]) -> str:
    """List every sport with its criteria as ``metric  weight  min -> optimal``."""
    lines: list[str] = ["", f"=== Sport Catalogue ({len(profiles)} sports) ==="]
    for i, profile in enumerate(profiles, start=1):
        lines.append("")
        lines.append(f"  {i:>2}. {profile.name}  (icon: {profile.icon})")
        lines.append(f"      {'Metric':<24}  {'Weight':>6}  {'Min':>6}  {'Optimal':>7}")
        for metric_id, c in profile.criteria.items():
            lines.append(
                f"      {metric_display_name(metric_id):<24}  {_fmt_number(c.weight):>6}  "
                f"{_fmt_number(c.min):>6}  {_fmt_number(c.optimal):>7}"
            )
    return "\n".join(lines)


# ── Metrics ───────────────────────────────────────────────────────────────────


def format_metric_table() -> str:
    """Metric definitions in display order; ``*`` marks gate-required metrics."""
    lines: list[str] = ["", "=== Athlete Metrics ===", ""]
    lines.append(f"    {'Id':<24}  {'Name':<24}  {'Unit':<10}  Description")
    lines.append("    " + "-" * 90)
    for metric_id, d in METRIC_DEFINITIONS.items():
        marker = "*" if metric_id in REQUIRED_METRICS else " "
        lines.append(
            f"  {marker} {str(metric_id):<24}  {d.name:<24}  {d.unit:<10}  {d.description}"
        )
    lines.append("")
    lines.append("  * required before recommendations can be generated")
    return "\n".join(lines)


# ── Recommendations ──────────────────────────────────────────────────────────


def format_recommendations(
    ranked: Sequence[ScoredSport],
    athlete_name: str,
    summary: str = "",
) -> str:
    """Format ranked sports with score band, reason, insight and tips.

    Args:
        ranked:       ScoredSport objects, best first.
        athlete_name: Name shown in the header.
        summary:      Optional summary paragraph printed under the header.

    Returns:
        Multi-line string.
    """
    lines: list[str] = ["", f"=== Sport Recommendations: {athlete_name} ==="]
    if summary:
        lines.append("")
        lines.append(f"  {summary}")

    if not ranked:
        lines.append("")
        lines.append("  (no recommendations requested)")
        return "\n".join(lines)

    for rank, ss in enumerate(ranked):
        explanation = explain(ss.result, rank)
        lines.append("")
        lines.append(
            f"  {rank + 1:>2}  {ss.result.name:<24} {ss.score:>4}  "
            f"[{score_band(ss.score).upper()}]"
        )
        lines.append(f"      Reason:  {ss.result.reason}")
        lines.append(f"      Insight: {explanation.insight}")
        lines.append(f"      Tips:    {explanation.tips}")
    return "\n".join(lines)


# ── Tracking ──────────────────────────────────────────────────────────────────


def format_tracking_metrics(sport: str, metrics: Sequence[TrackingMetric]) -> str:
    """List the training metrics tracked for ``sport``."""
    lines: list[str] = ["", f"=== Tracking Metrics: {sport} ===", ""]
    for m in metrics:
        unit = f" ({m.unit})" if m.unit else ""
        lines.append(f"  {m.key:<18}  {m.name}{unit}: {m.description}")
    return "\n".join(lines)
