"""
Sport profile catalogue.

``SPORT_CATALOGUE`` is the built-in, ordered tuple of ten ``SportProfile``
objects. Catalogue order matters: when two sports score the same, the one
listed first ranks higher.

Each row of ``_CATALOGUE_TABLE`` is ``(name, icon, {metric: (weight, min, optimal)})``.
Criteria are listed in the order their reason fragments should appear.

``load_catalogue_file()`` builds an alternative catalogue from a TOML file of
the same shape, for experimenting with profiles without touching code::

    [[sports]]
    name = "Rowing"
    icon = "boat"

    [sports.criteria.vo2max]
    weight = 5
    min = 55
    optimal = 70
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from sportfit.models.sport import Criterion, SportProfile
from sportfit.taxonomy.metric_taxonomy import MetricId

logger = logging.getLogger(__name__)

_M = MetricId

_CATALOGUE_TABLE: tuple[tuple[str, str, dict[MetricId, tuple[float, float, float]]], ...] = (
    ("Sprint Running", "run", {
        _M.SPEED_INDEX:           (5, 8, 10),
        _M.POWER_INDEX:           (4, 6, 9),
        _M.POWER_TO_WEIGHT_RATIO: (4, 4, 6),
        _M.NEUROMUSCULAR_INDEXES: (3, 70, 90),
        _M.FATIGUE_INDEX:         (3, 60, 85),
        _M.FLEXIBILITY_INDEX:     (2, 30, 60),
    }),
    ("Swimming", "water", {
        _M.VO2MAX:                (5, 50, 65),
        _M.POWER_INDEX:           (3, 5, 8),
        _M.FATIGUE_INDEX:         (4, 70, 90),
        _M.FLEXIBILITY_INDEX:     (5, 60, 90),
        _M.NEUROMUSCULAR_INDEXES: (3, 60, 80),
    }),
    ("Basketball", "basketball", {
        _M.JUMPING_INDEX:         (5, 60, 80),
        _M.SPEED_INDEX:           (4, 7, 9),
        _M.POWER_INDEX:           (3, 6, 8),
        _M.NEUROMUSCULAR_INDEXES: (4, 70, 85),
        _M.FATIGUE_INDEX:         (3, 65, 80),
    }),
    ("Weightlifting", "barbell", {
        _M.POWER_INDEX:           (5, 8, 10),
        _M.GRIP_INDEX:            (4, 50, 70),
        _M.POWER_TO_WEIGHT_RATIO: (3, 3.5, 5),
        _M.NEUROMUSCULAR_INDEXES: (4, 75, 95),
        _M.BMI:                   (2, 25, 30),
    }),
    ("Long-Distance Running", "walk", {
        _M.VO2MAX:                (5, 55, 70),
        _M.FATIGUE_INDEX:         (5, 75, 95),
        _M.BMI:                   (3, 18, 22),
        _M.POWER_TO_WEIGHT_RATIO: (4, 3, 4.5),
        _M.FLEXIBILITY_INDEX:     (2, 40, 70),
    }),
    ("Soccer/Football", "football", {
        _M.SPEED_INDEX:           (4, 7, 9),
        _M.FATIGUE_INDEX:         (4, 70, 90),
        _M.VO2MAX:                (4, 50, 65),
        _M.POWER_INDEX:           (3, 6, 8),
        _M.FLEXIBILITY_INDEX:     (3, 50, 75),
        _M.NEUROMUSCULAR_INDEXES: (4, 65, 85),
    }),
    ("Gymnastics", "body", {
        _M.FLEXIBILITY_INDEX:     (5, 70, 95),
        _M.POWER_TO_WEIGHT_RATIO: (5, 4, 6),
        _M.NEUROMUSCULAR_INDEXES: (4, 75, 95),
        _M.GRIP_INDEX:            (3, 40, 60),
        _M.BMI:                   (3, 18, 23),
    }),
    ("Cycling", "bicycle", {
        _M.VO2MAX:                (5, 55, 75),
        _M.POWER_TO_WEIGHT_RATIO: (5, 4, 7),
        _M.FATIGUE_INDEX:         (4, 70, 90),
        _M.POWER_INDEX:           (4, 7, 9),
        _M.NEUROMUSCULAR_INDEXES: (3, 65, 85),
    }),
    ("Tennis", "tennisball", {
        _M.SPEED_INDEX:           (4, 6, 8),
        _M.POWER_INDEX:           (3, 5, 8),
        _M.NEUROMUSCULAR_INDEXES: (4, 65, 85),
        _M.FATIGUE_INDEX:         (3, 65, 85),
        _M.FLEXIBILITY_INDEX:     (4, 60, 80),
        _M.GRIP_INDEX:            (4, 45, 65),
    }),
    ("Martial Arts", "fitness", {
        _M.FLEXIBILITY_INDEX:     (5, 65, 90),
        _M.NEUROMUSCULAR_INDEXES: (5, 70, 90),
        _M.POWER_INDEX:           (4, 6, 8),
        _M.SPEED_INDEX:           (4, 6, 8),
        _M.FATIGUE_INDEX:         (3, 65, 85),
        _M.GRIP_INDEX:            (3, 40, 60),
    }),
)


def _build_profile(
    name: str,
    icon: str,
    criteria: dict[MetricId, tuple[float, float, float]],
) -> SportProfile:
    return SportProfile(
        name=name,
        icon=icon,
        criteria={
            metric: Criterion(weight=w, min=lo, optimal=opt)
            for metric, (w, lo, opt) in criteria.items()
        },
    )


SPORT_CATALOGUE: tuple[SportProfile, ...] = tuple(
    _build_profile(name, icon, criteria) for name, icon, criteria in _CATALOGUE_TABLE
)

SPORT_NAMES: tuple[str, ...] = tuple(p.name for p in SPORT_CATALOGUE)


def get_sport_profile(name: str) -> SportProfile | None:
    """Return the built-in profile called ``name``, or ``None``."""
    for profile in SPORT_CATALOGUE:
        if profile.name == name:
            return profile
    return None


def load_catalogue_file(path: Path) -> tuple[SportProfile, ...]:
    """Load an ordered sport catalogue from a TOML file.

    All entries are validated before any are returned. If **any** entry fails,
    a single :class:`ValueError` lists every failure.

    Args:
        path: Path to the TOML file (must exist).

    Returns:
        Tuple of validated ``SportProfile`` objects in file order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the file is not valid TOML, has no ``[[sports]]``
            entries, repeats a sport name, or any entry fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Sport catalogue file not found: {path}")

    try:
        with open(path, "rb") as f:
            raw: dict[str, Any] = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in {path.name}: {exc}") from exc

    entries = raw.get("sports")
    if not isinstance(entries, list) or not entries:
        raise ValueError(f"{path.name} must define at least one [[sports]] table.")

    profiles: list[SportProfile] = []
    errors: list[tuple[int, str]] = []
    seen: set[str] = set()

    for i, entry in enumerate(entries):
        try:
            profile = SportProfile(
                name=entry.get("name", ""),
                icon=entry.get("icon", ""),
                criteria=entry.get("criteria", {}),
            )
        except (ValidationError, AttributeError) as exc:
            errors.append((i, str(exc)))
            continue
        if profile.name in seen:
            errors.append((i, f"duplicate sport name '{profile.name}'"))
            continue
        seen.add(profile.name)
        profiles.append(profile)

    if errors:
        detail = "\n".join(f"  Sport #{idx}: {msg}" for idx, msg in errors)
        raise ValueError(
            f"{len(errors)} sport profile(s) failed validation in {path.name}:\n{detail}"
        )

    logger.info("Loaded %d sport profiles from %s", len(profiles), path.name)
    return tuple(profiles)
