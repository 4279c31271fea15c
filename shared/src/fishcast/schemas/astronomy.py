"""Pydantic schemas for solar, lunar and solunar data.

Clock times are minutes from UTC midnight of the calculation date. They may
fall below 0 or above 1440 when an event happens on the neighbouring UTC day.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

MoonPhaseName = Literal[
    "new",
    "waxing_crescent",
    "first_quarter",
    "waxing_gibbous",
    "full",
    "waning_gibbous",
    "last_quarter",
    "waning_crescent",
]


class GeoMoment(BaseModel):
    """A point on Earth at an instant. East longitude and north latitude are positive."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    timestamp_utc: datetime

    @field_validator("timestamp_utc")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        # Naive timestamps are taken to already be UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    @property
    def utc_date(self) -> date:
        return self.timestamp_utc.date()

    @property
    def utc_minutes(self) -> float:
        """Minutes elapsed since UTC midnight."""
        ts = self.timestamp_utc
        return ts.hour * 60 + ts.minute + ts.second / 60.0

    @property
    def local_hour(self) -> int:
        """Local clock hour estimated from longitude (15 degrees per hour)."""
        local_minutes = (self.utc_minutes + 4.0 * self.longitude) % 1440.0
        return int(local_minutes // 60)


class SolarTimes(BaseModel):
    """Sun events for one date. Null sunrise/sunset means polar day or night."""

    model_config = ConfigDict(frozen=True)

    sunrise_utc_minutes: float | None
    sunset_utc_minutes: float | None
    solar_noon_utc_minutes: float
    polar_condition: Literal["polar_day", "polar_night"] | None = None
    golden_hour_morning_utc_minutes: float | None = None
    golden_hour_evening_utc_minutes: float | None = None
    day_length_hours: float | None = None

    @property
    def is_polar(self) -> bool:
        return self.sunrise_utc_minutes is None or self.sunset_utc_minutes is None


class MoonPhase(BaseModel):
    """Lunar phase for a date. fraction 0 = new moon, 0.5 = full moon."""

    model_config = ConfigDict(frozen=True)

    fraction: float = Field(ge=0.0, lt=1.0)
    illumination_percent: float = Field(ge=0.0, le=100.0)
    name: MoonPhaseName
    fishing_rating: int = Field(ge=1, le=5)


class SolunarWindow(BaseModel):
    """A feeding period."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["major", "minor"]
    start_utc: datetime
    end_utc: datetime

    def contains(self, at: datetime) -> bool:
        return self.start_utc <= at <= self.end_utc


class SolunarDay(BaseModel):
    """Complete astronomical snapshot consumed by the scoring engines."""

    model_config = ConfigDict(frozen=True)

    date: date
    solar: SolarTimes
    moon: MoonPhase
    major: list[SolunarWindow]
    minor: list[SolunarWindow] = Field(default_factory=list)
    overall_rating: int = Field(default=3, ge=1, le=5)

    def window_at(self, at: datetime) -> Literal["major", "minor"] | None:
        """Return the kind of window containing ``at``; majors win over minors."""
        if any(window.contains(at) for window in self.major):
            return "major"
        if any(window.contains(at) for window in self.minor):
            return "minor"
        return None
