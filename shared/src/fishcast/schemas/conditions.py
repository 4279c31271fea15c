"""Pydantic schemas for externally supplied environmental readings."""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from fishcast.schemas.astronomy import MoonPhaseName


class WeatherSnapshot(BaseModel):
    """Current weather as parsed by the weather collaborator.

    Any field may be missing; the engines substitute a neutral sub-score.
    """

    model_config = ConfigDict(frozen=True)

    temperature: float | None = None  # °C
    wind_speed: float | None = None  # km/h
    cloud_cover_percent: float | None = Field(default=None, ge=0.0, le=100.0)
    precipitation: float | None = Field(default=None, ge=0.0)  # mm
    pressure_msl: float | None = None  # hPa
    sunrise: datetime | None = None
    sunset: datetime | None = None
    description: str | None = None


class TideSnapshot(BaseModel):
    """Tide state at an instant. progress is % of the way to the next extreme."""

    model_config = ConfigDict(frozen=True)

    state: Literal["rising", "falling", "unknown"] = "unknown"
    progress_percent: float | None = Field(default=None, ge=0.0, le=100.0)


class TideExtreme(BaseModel):
    """A predicted high or low water."""

    model_config = ConfigDict(frozen=True)

    at: datetime
    kind: Literal["high", "low"]
    height_m: float | None = None


class NightConditions(BaseModel):
    """Inputs for the night score. Defaults describe an unremarkable night."""

    model_config = ConfigDict(frozen=True)

    moon_illumination: float = Field(default=50.0, ge=0.0, le=100.0)
    moon_phase: MoonPhaseName = "first_quarter"
    cloud_cover_percent: float = Field(default=50.0, ge=0.0, le=100.0)
    wind_speed_kmh: float = Field(default=10.0, ge=0.0)
    water_temp_f: float = 65.0
    pressure_trend_mb: float = 0.0  # change over the last 3h, negative = falling
    is_solunar_major: bool = False
    is_solunar_minor: bool = False
    hours_after_sunset: float = 2.0


class DailyForecast(BaseModel):
    """One day of an already-parsed daily forecast."""

    model_config = ConfigDict(frozen=True)

    date: date
    temperature_max: float | None = None
    temperature_min: float | None = None
    precipitation_sum: float | None = None
    wind_speed_max: float | None = None
    pressure_msl_max: float | None = None
    pressure_msl_min: float | None = None
    cloud_cover_mean: float | None = None
    weather_code: int | None = None
