"""
Recommendation ranker: scores every sport profile and keeps the best matches.

Usage flow
----------
1. rank_sports(snapshot, profiles, top_n=3)
   -> list[ScoredSport]  (best first, ties in catalogue order)

2. score_athlete(snapshot, statuses, profiles, top_n=3)
   -> list[MatchResult]  (runs the data-sufficiency gate, then ranks)

Ordering is a stable sort on descending score, so two sports with the same
score keep the order they have in the catalogue.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from sportfit.models.recommendation import MatchResult
from sportfit.models.sport import SportProfile
from sportfit.recommendations.scorer import ScoredSport, score_sport
from sportfit.recommendations.sufficiency import (
    DEFAULT_MISSING_LIST_LIMIT,
    assert_data_sufficient,
)
from sportfit.taxonomy.sport_catalogue import SPORT_CATALOGUE

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 3


def score_all_sports(
    snapshot: Mapping[str, Any],
    profiles: Sequence[SportProfile] | None = None,
) -> list[ScoredSport]:
    """Score every profile, in catalogue order, without filtering or sorting."""
    catalogue = SPORT_CATALOGUE if profiles is None else profiles
    return [score_sport(profile, snapshot) for profile in catalogue]


def rank_sports(
    snapshot: Mapping[str, Any],
    profiles: Sequence[SportProfile] | None = None,
    top_n: int = DEFAULT_TOP_N,
) -> list[ScoredSport]:
    """Score all profiles and return the ``top_n`` best, highest score first.

    Args:
        snapshot: Metric id -> raw stored value.
        profiles: Catalogue to score against; defaults to ``SPORT_CATALOGUE``.
        top_n:    Number of results to keep (0 returns an empty list).

    Returns:
        Up to ``top_n`` ScoredSport objects.

    Raises:
        ValueError: If ``top_n`` is negative.
    """
    if top_n < 0:
        raise ValueError(f"top_n must be >= 0, got {top_n}.")

    scored = score_all_sports(snapshot, profiles)
    ranked = sorted(scored, key=lambda s: -s.score)[:top_n]

    logger.debug(
        "Ranked %d sports; top: %s",
        len(scored),
        ", ".join(f"{s.profile.name}={s.score}" for s in ranked) or "none",
    )
    return ranked


def score_athlete(
    snapshot: Mapping[str, Any],
    statuses: Mapping[str, str] | None = None,
    profiles: Sequence[SportProfile] | None = None,
    top_n: int = DEFAULT_TOP_N,
    missing_list_limit: int = DEFAULT_MISSING_LIST_LIMIT,
) -> list[MatchResult]:
    """Recommend sports for one athlete snapshot.

    Args:
        snapshot:           Metric id -> raw stored value. Never mutated.
        statuses:           Optional metric id -> generation status.
        profiles:           Catalogue override; defaults to ``SPORT_CATALOGUE``.
        top_n:              Number of recommendations to return.
        missing_list_limit: Gate threshold for naming missing metrics.

    Returns:
        Up to ``top_n`` MatchResult objects, best first.

    Raises:
        DataInsufficientError: If a required metric is unavailable or empty.
    """
    assert_data_sufficient(snapshot, statuses, missing_list_limit)
    return [s.result for s in rank_sports(snapshot, profiles, top_n)]
