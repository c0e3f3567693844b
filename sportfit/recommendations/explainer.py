"""
Explanatory text for ranked recommendations.

``explain(match, rank)`` pairs a sport-specific insight with a rank-aware
closing sentence, and adds the sport's training tips:

    rank 0   -> "... This appears to be your top match based on current metrics."
    rank 1   -> "... This is a strong secondary option that complements ..."
    rank >=2 -> "... While not your top match, you still have significant ..."

Sports without a tailored text (e.g. from a custom catalogue) get generic
fallbacks. Everything here is pure templating; nothing is scored.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from sportfit.models.recommendation import MatchResult, SportExplanation
from sportfit.taxonomy.metric_taxonomy import METRIC_DEFINITIONS

FALLBACK_INSIGHT = "Your physical attributes align well with this sport's requirements."
FALLBACK_TIPS = (
    "Focus on balanced training that develops the key physical attributes "
    "needed for this sport."
)
NO_METRICS_PHRASE = "various physical attributes"
MAX_SUMMARY_METRICS = 3

_RANK_SUFFIXES: tuple[str, ...] = (
    " This appears to be your top match based on current metrics.",
    " This is a strong secondary option that complements your physical attributes.",
    " While not your top match, you still have significant potential in this area.",
)

SPORT_INSIGHTS: Mapping[str, str] = MappingProxyType({
    "Sprint Running": (
        "Your combination of fast-twitch muscle fibers and power output gives you "
        "excellent acceleration capability. Your body is built for explosive "
        "movements, which is essential for sprint events."
    ),
    "Swimming": (
        "Your cardiovascular endurance and upper body strength are well-balanced, "
        "which is ideal for swimming. Your flexibility also gives you an advantage "
        "in executing efficient strokes."
    ),
    "Basketball": (
        "Your jumping power and agility make you well-suited for basketball. Your "
        "height-to-strength ratio and neuromuscular coordination help with both "
        "offensive and defensive play."
    ),
    "Weightlifting": (
        "You have exceptional strength-to-weight ratio and core power. Your body "
        "structure allows for generating significant force, which is crucial in "
        "weightlifting competitions."
    ),
    "Long-Distance Running": (
        "Your VO2 max and fatigue resistance are standout qualities. Your body "
        "efficiently uses oxygen and manages lactic acid buildup, essential for "
        "endurance events."
    ),
    "Soccer/Football": (
        "Your combination of endurance, speed, and agility creates a solid "
        "foundation for soccer. Your lower body power and coordination help with "
        "both sprinting and ball control."
    ),
    "Gymnastics": (
        "Your exceptional flexibility and power-to-weight ratio are key advantages. "
        "Your body control and balance make you well-suited for gymnastics "
        "disciplines."
    ),
    "Cycling": (
        "Your lower body power output and cardiovascular endurance are particularly "
        "strong. Your body efficiently generates sustained power, which is ideal "
        "for cycling."
    ),
    "Tennis": (
        "Your hand-eye coordination and full-body power generation work well for "
        "tennis. Your agility and reaction time help you cover the court "
        "effectively."
    ),
    "Martial Arts": (
        "Your balance of strength, flexibility, and coordination is ideal for "
        "martial arts. Your body type supports both striking and grappling "
        "techniques."
    ),
})

SPORT_TIPS: Mapping[str, str] = MappingProxyType({
    "Sprint Running": (
        "Focus on explosive power training, proper sprint technique, and start "
        "practice. Include plyometrics and weight training to improve power output."
    ),
    "Swimming": (
        "Work on stroke efficiency, breathing techniques, and building shoulder "
        "strength. Regular technique drills will help maximize your natural "
        "advantages."
    ),
    "Basketball": (
        "Develop your vertical jump, agility drills, and ball handling skills. "
        "Combine court practice with plyometric training for optimal results."
    ),
    "Weightlifting": (
        "Prioritize proper form, progressive overload, and periodized training. "
        "Include mobility work to maintain flexibility while building strength."
    ),
    "Long-Distance Running": (
        "Build your weekly mileage gradually, include tempo runs, and focus on "
        "recovery nutrition. Strength train to prevent injuries."
    ),
    "Soccer/Football": (
        "Practice ball control drills, short sprints, and game situation awareness. "
        "Combine cardio endurance work with agility training."
    ),
    "Gymnastics": (
        "Focus on core strength, flexibility training, and skill progression. "
        "Regular balance and body control exercises are essential."
    ),
    "Cycling": (
        "Develop a structured training plan with interval work, hill climbs, and "
        "recovery rides. Core strength is also important for stability."
    ),
    "Tennis": (
        "Practice footwork drills, stroke consistency, and court movement. Include "
        "agility and reaction time training in your routine."
    ),
    "Martial Arts": (
        "Balance strength training with flexibility work, and focus on technique "
        "mastery. Include regular sparring to develop practical skills."
    ),
})


def rank_suffix(rank: int) -> str:
    """Closing sentence for a 0-based rank; anything but 0 or 1 gets the last one."""
    return _RANK_SUFFIXES[rank if rank in (0, 1) else 2]


def explain(match: MatchResult, rank: int) -> SportExplanation:
    """Build the insight and training tips for a recommendation at ``rank``."""
    insight = SPORT_INSIGHTS.get(match.name, FALLBACK_INSIGHT) + rank_suffix(rank)
    tips = SPORT_TIPS.get(match.name, FALLBACK_TIPS)
    return SportExplanation(insight=insight, tips=tips)


def score_band(score: int) -> str:
    """Qualitative band for a match score: excellent, good, moderate or poor."""
    if score >= 80:
        return "excellent"
    if score >= 60:
        return "good"
    if score >= 40:
        return "moderate"
    return "poor"


def describe_top_metrics(
    snapshot: Mapping[str, Any] | None,
    statuses: Mapping[str, str] | None = None,
) -> str:
    """Phrase naming up to three of the athlete's available metrics.

    Metrics are taken in display order. A metric counts when it has a
    non-null value and (if ``statuses`` is given) status ``"available"``.

    Returns:
        ``"a"``, ``"a and b"`` or ``"a, b, and c"`` in lower case, or
        ``"various physical attributes"`` when nothing is available.
    """
    snapshot = snapshot if isinstance(snapshot, Mapping) else {}
    names: list[str] = []
    for metric_id, definition in METRIC_DEFINITIONS.items():
        if snapshot.get(str(metric_id)) is None:
            continue
        if statuses is not None and statuses.get(str(metric_id)) != "available":
            continue
        names.append(definition.name.lower())
        if len(names) == MAX_SUMMARY_METRICS:
            break

    if not names:
        return NO_METRICS_PHRASE
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} and {names[1]}"
    return f"{names[0]}, {names[1]}, and {names[2]}"


def build_summary(top_metrics_phrase: str) -> str:
    """Summary paragraph shown above the recommendation list."""
    return (
        "Based on your physical attributes and performance metrics, we've "
        "identified these sports as your best matches. Your body type and "
        f"specific strengths in {top_metrics_phrase} make you particularly "
        "suited for these activities."
    )
