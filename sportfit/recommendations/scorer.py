"""
Per-sport match scoring: how well one athlete snapshot fits one SportProfile.

Match score per criterion (0.0–1.0)
-----------------------------------
    value >= optimal          -> 1.0                     (saturates, no bonus)
    min <= value < optimal    -> (value − min) / (optimal − min)
    0 < value < min           -> max(0, value / min) × 0.5   (partial credit)
    value == 0 (unknown)      -> criterion skipped entirely

Sport score (0–100)
-------------------
    score = round(100 × Σ(match × weight) / Σ(weight over matched criteria))

Only criteria with a known reading contribute to either sum, so a missing
metric neither helps nor hurts. A profile with nothing matched scores 0.

Reason string
-------------
    match > 0.7 -> "Strong {Metric} ({pct}% match)"
    match > 0.4 -> "Good {Metric} ({pct}% match)"

The first two fragments (in criterion order) are joined with ". ". With no
matched criteria the reason is "Insufficient data to make accurate
recommendation"; with matches but no fragments it is "Basic physical
attributes match this sport".

Rounding is half-up (82.5 -> 83), not Python's round-half-to-even.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from sportfit.models.recommendation import MatchResult
from sportfit.models.sport import Criterion, SportProfile
from sportfit.recommendations.extraction import extract_metric_value
from sportfit.taxonomy.metric_taxonomy import metric_display_name

STRONG_MATCH_THRESHOLD = 0.7
GOOD_MATCH_THRESHOLD = 0.4
BELOW_MIN_CREDIT = 0.5
MAX_REASON_FRAGMENTS = 2

INSUFFICIENT_DATA_REASON = "Insufficient data to make accurate recommendation"
BASIC_MATCH_REASON = "Basic physical attributes match this sport"


@dataclass(frozen=True)
class CriterionMatch:
    """Scoring detail for one criterion of one sport.

    Attributes:
        metric_id:     Metric the criterion applies to.
        athlete_value: Extracted reading (0.0 when unknown).
        criterion:     The sport's criterion for this metric.
        match_score:   0.0–1.0 fit, or ``None`` when the metric was unknown.
        strength:      ``"strong"``, ``"good"`` or ``None``.
    """

    metric_id:     str
    athlete_value: float
    criterion:     Criterion
    match_score:   Optional[float]
    strength:      Optional[str]

    @property
    def matched(self) -> bool:
        return self.match_score is not None

    @property
    def match_pct(self) -> int | None:
        if self.match_score is None:
            return None
        return round_half_up(self.match_score * 100)


@dataclass
class ScoredSport:
    """A sport profile coupled with its match result and criterion breakdown.

    Attributes:
        profile:       The scored SportProfile.
        result:        The MatchResult handed to callers.
        matches:       One CriterionMatch per criterion, in profile order.
        matched_stats: Number of criteria with a known reading.
    """

    profile:       SportProfile
    result:        MatchResult
    matches:       list[CriterionMatch] = field(default_factory=list)
    matched_stats: int = 0

    @property
    def score(self) -> int:
        return self.result.score


def compute_match_score(value: float, criterion: Criterion) -> float:
    """Fit of a single known reading against a criterion, in ``[0, 1]``.

    Args:
        value:     Athlete reading; callers only pass values > 0.
        criterion: Sport criterion with ``min <= optimal``.

    Returns:
        1.0 at or above optimal, linear between min and optimal (0.0 at min),
        and at most 0.5 below min.
    """
    if value >= criterion.optimal:
        return 1.0
    if value >= criterion.min:
        return (value - criterion.min) / (criterion.optimal - criterion.min)
    if criterion.min <= 0:
        return 0.0
    return max(0.0, value / criterion.min) * BELOW_MIN_CREDIT


def classify_match(match_score: float) -> str | None:
    """Return ``"strong"``, ``"good"`` or ``None`` for a match score."""
    if match_score > STRONG_MATCH_THRESHOLD:
        return "strong"
    if match_score > GOOD_MATCH_THRESHOLD:
        return "good"
    return None


def build_reason(fragments: list[str], matched_stats: int) -> str:
    """Assemble the MatchResult reason from recorded fragments.

    Args:
        fragments:     "Strong ..."/"Good ..." fragments in criterion order.
        matched_stats: Count of criteria with a known reading.

    Returns:
        Non-empty reason string.
    """
    if matched_stats == 0:
        return INSUFFICIENT_DATA_REASON
    if not fragments:
        return BASIC_MATCH_REASON
    return ". ".join(fragments[:MAX_REASON_FRAGMENTS])


def score_sport(profile: SportProfile, snapshot: Mapping[str, Any]) -> ScoredSport:
    """Score one sport profile against an athlete snapshot.

    Args:
        profile:  Sport profile to evaluate.
        snapshot: Metric identifier -> raw stored value. Never mutated.

    Returns:
        ScoredSport with the MatchResult and per-criterion breakdown.
    """
    total_score = 0.0
    total_weight = 0.0
    matched_stats = 0
    fragments: list[str] = []
    matches: list[CriterionMatch] = []

    for metric_id, criterion in profile.criteria.items():
        athlete_value = extract_metric_value(metric_id, snapshot)

        if athlete_value <= 0:
            matches.append(
                CriterionMatch(str(metric_id), athlete_value, criterion, None, None)
            )
            continue

        matched_stats += 1
        match_score = compute_match_score(athlete_value, criterion)
        total_score += match_score * criterion.weight
        total_weight += criterion.weight

        strength = classify_match(match_score)
        if strength is not None:
            fragments.append(
                f"{strength.capitalize()} {metric_display_name(metric_id)} "
                f"({round_half_up(match_score * 100)}% match)"
            )
        matches.append(
            CriterionMatch(str(metric_id), athlete_value, criterion, match_score, strength)
        )

    score = round_half_up(total_score / total_weight * 100) if total_weight > 0 else 0

    result = MatchResult(
        name=profile.name,
        score=_clamp(score, 0, 100),
        reason=build_reason(fragments, matched_stats),
        icon=profile.icon,
    )
    return ScoredSport(
        profile=profile,
        result=result,
        matches=matches,
        matched_stats=matched_stats,
    )


# ── Helpers ───────────────────────────────────────────────────────────────────

def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))
