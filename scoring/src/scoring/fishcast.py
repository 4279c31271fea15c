"""FishCast: weighted daytime fishing-activity score (0-100).

Eight factors are each mapped onto a 0-100 sub-score by a fixed band
function and combined with fixed weights. A factor with no data scores a
neutral 50. Each factor's impact is its weighted distance from neutral, so
``50 + sum(impacts)`` reproduces the unrounded score.
"""

from __future__ import annotations

import logging
from datetime import datetime

from fishcast.schemas.astronomy import GeoMoment, SolunarDay
from fishcast.schemas.conditions import TideSnapshot, WeatherSnapshot
from fishcast.schemas.scoring import Factor, ScoreOutcome, ScoreResult
from solunar.calculator import calculate_day, calculate_previous_day, window_kind_at

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 50
FALLBACK_LABEL = "Fair"

# Factor -> weight. Order is the evaluation (and breakdown) order.
WEIGHTS: dict[str, float] = {
    "pressure": 0.20,
    "moon_phase": 0.15,
    "solunar_period": 0.15,
    "wind": 0.12,
    "time_of_day": 0.12,
    "cloud_cover": 0.08,
    "precipitation": 0.08,
    "tide_state": 0.10,
}

SCORE_LABELS = [
    (85, "Excellent"),
    (70, "Very Good"),
    (55, "Good"),
    (40, "Fair"),
]


def score_label(score: int) -> str:
    for threshold, label in SCORE_LABELS:
        if score >= threshold:
            return label
    return "Poor"


# ── Sub-scores ───────────────────────────────────────────


def score_pressure(pressure: float | None) -> tuple[int, str]:
    if pressure is None:
        return NEUTRAL_SCORE, "No pressure reading"
    if 1013 <= pressure <= 1023:
        return 90, "Stable pressure, ideal"
    if 1005 <= pressure < 1013:
        return 70, "Falling pressure, fish active before the front"
    if 1023 < pressure <= 1030:
        return 60, "High pressure, stable but slower"
    if pressure < 1005:
        return 40, "Low pressure, stormy"
    return 30, "Very high pressure, sluggish fish"


def score_moon_phase(solunar: SolunarDay) -> tuple[int, str]:
    moon = solunar.moon
    return moon.fishing_rating * 20, f"{moon.name.replace('_', ' ')} moon, rating {moon.fishing_rating}/5"


def score_solunar_period(at: datetime, solunar: SolunarDay, previous: SolunarDay | None = None) -> tuple[int, str]:
    window = window_kind_at(at, solunar, previous)
    if window == "major":
        return 95, "Inside a major feeding period"
    if window == "minor":
        return 75, "Inside a minor feeding period"
    return 40, "Outside solunar periods"


def score_wind(wind_speed: float | None) -> tuple[int, str]:
    if wind_speed is None:
        return NEUTRAL_SCORE, "No wind reading"
    if wind_speed <= 5:
        return 85, "Light breeze, ideal"
    if wind_speed <= 12:
        return 75, "Moderate wind, good ripple"
    if wind_speed <= 20:
        return 55, "Breezy, still fishable"
    if wind_speed <= 30:
        return 30, "Strong wind, tough conditions"
    return 10, "Storm-force wind"


def score_time_of_day(local_hour: int) -> tuple[int, str]:
    if 4 <= local_hour <= 8:
        return 90, "Dawn, peak feeding"
    if 17 <= local_hour <= 21:
        return 85, "Dusk, peak feeding"
    if 8 <= local_hour <= 10 or 15 <= local_hour <= 17:
        return 65, "Shoulder hours"
    if local_hour >= 21 or local_hour <= 4:
        return 50, "Night, varies by species"
    return 40, "Midday, slowest"


def score_cloud_cover(cloud_cover: float | None) -> tuple[int, str]:
    if cloud_cover is None:
        return NEUTRAL_SCORE, "No cloud reading"
    if 50 <= cloud_cover <= 80:
        return 80, "Overcast, ideal"
    if 30 <= cloud_cover < 50:
        return 65, "Partly cloudy"
    if cloud_cover > 80:
        return 60, "Heavy cloud"
    return 40, "Clear sky, fish see you"


def score_precipitation(precipitation: float | None) -> tuple[int, str]:
    if precipitation is None:
        return NEUTRAL_SCORE, "No precipitation reading"
    if precipitation <= 0:
        return 60, "Dry"
    if precipitation <= 2:
        return 85, "Light rain, excellent"
    if precipitation <= 5:
        return 65, "Moderate rain"
    if precipitation <= 10:
        return 40, "Heavy rain"
    return 20, "Downpour"


def score_tide(tide: TideSnapshot | None) -> tuple[int, str]:
    if tide is None or tide.state == "unknown" or tide.progress_percent is None:
        return NEUTRAL_SCORE, "No tide data"
    progress = tide.progress_percent
    if 30 <= progress <= 70:
        if tide.state == "rising":
            return 90, "Mid rising tide, best"
        return 80, "Mid falling tide, good"
    if progress < 15 or progress > 85:
        return 40, "Near slack tide, slow"
    return 60, f"{tide.state.capitalize()} tide"


# ── Engine ───────────────────────────────────────────────


def _sub_scores(
    weather: WeatherSnapshot,
    solunar: SolunarDay,
    tide: TideSnapshot | None,
    moment: GeoMoment,
    previous: SolunarDay | None = None,
) -> dict[str, tuple[int, str]]:
    return {
        "pressure": score_pressure(weather.pressure_msl),
        "moon_phase": score_moon_phase(solunar),
        "solunar_period": score_solunar_period(moment.timestamp_utc, solunar, previous),
        "wind": score_wind(weather.wind_speed),
        "time_of_day": score_time_of_day(moment.local_hour),
        "cloud_cover": score_cloud_cover(weather.cloud_cover_percent),
        "precipitation": score_precipitation(weather.precipitation),
        "tide_state": score_tide(tide),
    }


def _build_result(sub_scores: dict[str, tuple[int, str]]) -> ScoreResult:
    total = 0.0
    factors = []
    for name, weight in WEIGHTS.items():
        sub_score, description = sub_scores[name]
        total += sub_score * weight
        factors.append(
            Factor(
                name=name,
                impact=round(weight * (sub_score - NEUTRAL_SCORE), 2),
                description=description,
                score=sub_score,
                weight=weight,
            )
        )

    score = round(max(0.0, min(100.0, total)))
    return ScoreResult(score=score, label=score_label(score), factors=factors)


def fallback_outcome(reason: str) -> ScoreOutcome:
    """Neutral result returned when scoring cannot complete."""
    return ScoreOutcome(
        status="degraded",
        result=ScoreResult(score=NEUTRAL_SCORE, label=FALLBACK_LABEL, error=reason),
        reason=reason,
    )


def score_fishcast(
    weather: WeatherSnapshot,
    solunar: SolunarDay,
    tide: TideSnapshot | None,
    moment: GeoMoment,
    previous: SolunarDay | None = None,
) -> ScoreOutcome:
    """Score daytime fishing conditions.

    ``previous`` is the solunar day before ``solunar``; a late window of that
    day can still be open just after UTC midnight.

    Never raises: any failure while scoring yields a degraded outcome with a
    neutral 50 / "Fair" result and the failure message.
    """
    try:
        result = _build_result(_sub_scores(weather, solunar, tide, moment, previous))
    except Exception as exc:
        logger.warning("FishCast calculation failed: %s", exc)
        return fallback_outcome(str(exc))
    return ScoreOutcome(status="ok", result=result)


def calculate_fishcast(
    moment: GeoMoment,
    weather: WeatherSnapshot,
    tide: TideSnapshot | None = None,
) -> ScoreOutcome:
    """Compute the solunar day (and the one before it) for ``moment`` and score it.

    Failures in the astronomical step degrade the same way scoring failures do.
    """
    try:
        solunar = calculate_day(moment)
        previous = calculate_previous_day(moment)
    except Exception as exc:
        logger.warning("Solunar calculation failed for %s: %s", moment, exc)
        return fallback_outcome(str(exc))
    return score_fishcast(weather, solunar, tide, moment, previous)
