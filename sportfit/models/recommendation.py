"""
Recommendation output models.

``MatchResult`` is one ranked sport recommendation: how well the athlete's
snapshot fits a sport (0-100) and a short reason built from the strongest
matching metrics.

``SportExplanation`` is the longer, rank-aware text shown alongside a
``MatchResult``: why the sport suits the athlete and how to train for it.

Both models are frozen. The engine creates them fresh on every call and keeps
no reference after returning.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class MatchResult(BaseModel):
    """A scored sport recommendation for one athlete.

    Attributes:
        name:   Sport name (matches ``SportProfile.name``).
        score:  Integer match score in ``[0, 100]``.
        reason: Human-readable reason string.
        icon:   Icon tag copied from the sport profile.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    score: int
    reason: str
    icon: str

    @field_validator("score")
    @classmethod
    def validate_score_range(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError(f"score must be in [0, 100], got {v}.")
        return v

    @field_validator("reason")
    @classmethod
    def validate_reason_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("reason must not be empty.")
        return v.strip()


class SportExplanation(BaseModel):
    """Detailed insight and training tips for a recommended sport."""

    model_config = ConfigDict(frozen=True)

    insight: str
    tips: str
