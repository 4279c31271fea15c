"""Pydantic schemas for the astronomy validation harness."""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

CheckStatus = Literal["passed", "failed", "skipped_polar"]


class ReferencePoint(BaseModel):
    """Externally published sun/moon values for one place and date.

    Sun events are minutes from UTC midnight of ``date``; a sunrise on the
    previous UTC day is negative, a sunset on the next UTC day exceeds 1440.
    """

    label: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    date: date
    sunrise_utc_minutes: float | None = None
    sunset_utc_minutes: float | None = None
    moon_phase: float = Field(ge=0.0, lt=1.0)
    source: str = "USNO"


class EventCheck(BaseModel):
    """Outcome for a single event of a reference point."""

    label: str
    event: Literal["sunrise", "sunset", "moon_phase"]
    status: CheckStatus
    calculated: float | None = None
    reference: float | None = None
    delta: float | None = None
    tolerance: float


class ValidationReport(BaseModel):
    """Aggregated harness run."""

    sun_tolerance_minutes: float
    moon_tolerance: float
    checks: list[EventCheck] = Field(default_factory=list)

    def _count(self, status: CheckStatus) -> int:
        return sum(1 for check in self.checks if check.status == status)

    @property
    def passed(self) -> int:
        return self._count("passed")

    @property
    def failed(self) -> int:
        return self._count("failed")

    @property
    def skipped(self) -> int:
        return self._count("skipped_polar")

    @property
    def failures(self) -> list[EventCheck]:
        return [check for check in self.checks if check.status == "failed"]

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0
