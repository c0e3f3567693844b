"""
Sport-specific training metrics, logged once an athlete has picked a sport.

``TRACKING_METRICS`` maps a sport name to the three measurements worth
recording for it. Sports without an entry fall back to ``DEFAULT_TRACKING_METRICS``
(duration, intensity and free-text notes).

The catalogue includes "Long Jump", which has no scoring profile but can
still be chosen for tracking.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class TrackingMetric:
    """One measurement recorded in a training log entry."""

    key: str
    name: str
    unit: str
    description: str
    icon: str


def _t(key: str, name: str, unit: str, description: str, icon: str) -> TrackingMetric:
    return TrackingMetric(key=key, name=name, unit=unit, description=description, icon=icon)


DEFAULT_TRACKING_METRICS: tuple[TrackingMetric, ...] = (
    _t("duration", "Duration", "min", "Total training duration", "timer"),
    _t("intensity", "Intensity", "1-10", "Training intensity level", "thermometer"),
    _t("notes", "Notes", "", "Training notes", "create"),
)

TRACKING_METRICS: Mapping[str, tuple[TrackingMetric, ...]] = MappingProxyType({
    "Sprint Running": (
        _t("sprint_time", "Sprint Time", "sec", "Time to complete sprint", "stopwatch"),
        _t("max_speed", "Maximum Speed", "m/s", "Maximum speed reached", "speedometer"),
        _t("reaction_time", "Reaction Time", "ms", "Time to react to start signal", "flash"),
    ),
    "Swimming": (
        _t("lap_time", "Lap Time", "sec", "Time to complete a single lap", "time"),
        _t("stroke_count", "Stroke Count", "count", "Number of strokes per lap", "repeat"),
        _t("distance", "Distance", "m", "Total distance covered", "resize"),
    ),
    "Basketball": (
        _t("free_throw_pct", "Free Throw %", "%", "Free throw success rate", "basketball"),
        _t("points_scored", "Points Scored", "pts", "Total points scored", "stats-chart"),
        _t("rebounds", "Rebounds", "count", "Total rebounds", "hand-left"),
    ),
    "Weightlifting": (
        _t("max_lift", "Maximum Lift", "kg", "Maximum weight lifted", "barbell"),
        _t("reps", "Repetitions", "count", "Number of repetitions", "repeat"),
        _t("sets", "Sets", "count", "Number of sets completed", "layers"),
    ),
    "Long-Distance Running": (
        _t("distance", "Distance", "km", "Total distance covered", "map"),
        _t("pace", "Pace", "min/km", "Average pace", "timer"),
        _t("heart_rate", "Heart Rate", "bpm", "Average heart rate", "heart"),
    ),
    "Soccer/Football": (
        _t("goals", "Goals", "count", "Number of goals scored", "football"),
        _t("passes", "Passes", "count", "Number of successful passes", "git-network"),
        _t("distance", "Distance Covered", "km", "Total distance covered", "walk"),
    ),
    "Gymnastics": (
        _t("difficulty_score", "Difficulty Score", "pts", "Score for difficulty of routine", "star"),
        _t("execution_score", "Execution Score", "pts", "Score for execution quality", "checkmark-circle"),
        _t("final_score", "Final Score", "pts", "Total score", "ribbon"),
    ),
    "Cycling": (
        _t("distance", "Distance", "km", "Total distance covered", "bicycle"),
        _t("avg_speed", "Average Speed", "km/h", "Average speed maintained", "speedometer"),
        _t("power_output", "Power Output", "watts", "Average power output", "flash"),
    ),
    "Tennis": (
        _t("aces", "Aces", "count", "Number of aces served", "tennisball"),
        _t("first_serve_pct", "First Serve %", "%", "First serve percentage", "percent"),
        _t("winners", "Winners", "count", "Number of winning shots", "checkmark-circle"),
    ),
    "Martial Arts": (
        _t("strikes", "Strikes", "count", "Number of successful strikes", "hand-right"),
        _t("takedowns", "Takedowns", "count", "Number of successful takedowns", "arrow-down"),
        _t("submissions", "Submissions", "count", "Number of submission attempts", "lock-closed"),
    ),
    "Long Jump": (
        _t("distance", "Jump Distance", "m", "Distance jumped", "resize"),
        _t("approach_speed", "Approach Speed", "m/s", "Speed during approach", "speedometer"),
        _t("take_off_angle", "Take-off Angle", "°", "Angle of take-off", "analytics"),
    ),
})


def metrics_for_sport(sport: str) -> tuple[TrackingMetric, ...]:
    """Return the tracking metrics for ``sport`` (default set if unknown)."""
    return TRACKING_METRICS.get(sport, DEFAULT_TRACKING_METRICS)
