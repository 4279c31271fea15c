"""Pydantic schemas for scoring engine output."""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field


class Factor(BaseModel):
    """One explainable contribution to a score."""

    name: str
    impact: float
    description: str = ""
    score: int | None = None  # sub-score 0-100, weighted engines only
    weight: float | None = None


class ScoreResult(BaseModel):
    """A 0-100 activity score with its factor breakdown, in evaluation order."""

    score: int = Field(ge=0, le=100)
    label: str
    factors: list[Factor] = Field(default_factory=list)
    error: str | None = None


class NightScoreResult(ScoreResult):
    """Night score plus the species best suited to the current light."""

    best_species: list[str] = Field(default_factory=list)


class SpeciesAdjustedResult(ScoreResult):
    """A FishCast result re-weighted for a target species."""

    species_name: str
    original_score: int = Field(ge=0, le=100)
    multiplier: float
    insights: list[str] = Field(default_factory=list)


class ScoreOutcome(BaseModel):
    """Tagged engine result: ``ok`` or ``degraded`` (neutral fallback plus reason)."""

    status: Literal["ok", "degraded"]
    result: NightScoreResult | ScoreResult
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def degraded(self) -> bool:
        return self.status == "degraded"


class OutlookDay(BaseModel):
    """Simplified daily score used for multi-day outlooks."""

    date: date
    day_name: str
    score: int = Field(ge=0, le=100)
    label: str
    high_temp: int | None = None
    low_temp: int | None = None
    weather_code: int = 0
