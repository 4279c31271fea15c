"""Multi-day FishCast outlook from daily forecast values."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fishcast.schemas.conditions import DailyForecast
from fishcast.schemas.scoring import OutlookDay
from solunar.lunar import compute_moon_phase

from scoring.fishcast import (
    NEUTRAL_SCORE,
    WEIGHTS,
    score_cloud_cover,
    score_label,
    score_precipitation,
    score_pressure,
    score_wind,
)

logger = logging.getLogger(__name__)

DEFAULT_PRESSURE = 1013.0
DEFAULT_WIND = 10.0
DEFAULT_CLOUD_COVER = 50.0
# A whole day averages over feeding periods and dawn/dusk
DAILY_SOLUNAR_SCORE = 60
DAILY_TIME_OF_DAY_SCORE = 60

DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def _daily_pressure(day: DailyForecast) -> float:
    high = day.pressure_msl_max if day.pressure_msl_max is not None else DEFAULT_PRESSURE
    low = day.pressure_msl_min if day.pressure_msl_min is not None else DEFAULT_PRESSURE
    return (high + low) / 2


def _moon_score(day: DailyForecast) -> int:
    try:
        return compute_moon_phase(day.date).fishing_rating * 20
    except Exception as exc:
        logger.warning("Moon phase unavailable for %s: %s", day.date, exc)
        return NEUTRAL_SCORE


def score_outlook_day(day: DailyForecast) -> OutlookDay:
    sub_scores = {
        "pressure": score_pressure(_daily_pressure(day))[0],
        "moon_phase": _moon_score(day),
        "solunar_period": DAILY_SOLUNAR_SCORE,
        "wind": score_wind(day.wind_speed_max if day.wind_speed_max is not None else DEFAULT_WIND)[0],
        "time_of_day": DAILY_TIME_OF_DAY_SCORE,
        "cloud_cover": score_cloud_cover(
            day.cloud_cover_mean if day.cloud_cover_mean is not None else DEFAULT_CLOUD_COVER
        )[0],
        "precipitation": score_precipitation(day.precipitation_sum or 0.0)[0],
        "tide_state": NEUTRAL_SCORE,
    }
    total = sum(sub_scores[name] * weight for name, weight in WEIGHTS.items())
    score = max(0, min(100, round(total)))

    return OutlookDay(
        date=day.date,
        day_name=DAY_NAMES[day.date.weekday()],
        score=score,
        label=score_label(score),
        high_temp=round(day.temperature_max) if day.temperature_max is not None else None,
        low_temp=round(day.temperature_min) if day.temperature_min is not None else None,
        weather_code=day.weather_code or 0,
    )


def score_outlook(days: Iterable[DailyForecast]) -> list[OutlookDay]:
    """Score each forecast day, in the order given."""
    return [score_outlook_day(day) for day in days]
