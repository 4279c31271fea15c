"""Night Score: additive nocturnal fishing score (0-100).

Starts from a baseline of 50 and adds a signed delta per matching condition.
The factor list records every applied delta, so before clamping
``50 + sum(impact)`` equals the score.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import timedelta

from fishcast.schemas.astronomy import GeoMoment
from fishcast.schemas.conditions import NightConditions, WeatherSnapshot
from fishcast.schemas.scoring import Factor, NightScoreResult, ScoreOutcome
from solunar.calculator import calculate_day, calculate_previous_day, window_kind_at
from solunar.solar import compute_solar_times, minutes_to_datetime

from scoring.species import NIGHT_SPECIES, NightSpecies, best_night_species

logger = logging.getLogger(__name__)

BASELINE_SCORE = 50
SUNSET_LOOKBACK_DAYS = 3

NIGHT_RATINGS = [
    (85, "Legendary"),
    (70, "Excellent"),
    (55, "Good"),
    (40, "Fair"),
]


def night_rating(score: int) -> str:
    for threshold, rating in NIGHT_RATINGS:
        if score >= threshold:
            return rating
    return "Poor"


def _moon_factor(illumination: float) -> Factor:
    if illumination < 10:
        return Factor(name="New Moon Darkness", impact=15, description="Pitch dark, predators dominate")
    if illumination < 30:
        return Factor(name="Low Moonlight", impact=10, description="Low light favors night feeders")
    if illumination < 50:
        return Factor(name="Moderate Moon", impact=5, description="Decent visibility for topwater")
    if illumination < 80:
        return Factor(name="Bright Moon", impact=0, description="Some fish less active")
    return Factor(name="Full Moon Bright", impact=-5, description="Very bright, some species retreat to depth")


def _cloud_factor(cloud_cover: float) -> Factor | None:
    if cloud_cover > 80:
        return Factor(name="Overcast Sky", impact=10, description="Clouds block moonlight, maximum darkness")
    if cloud_cover > 50:
        return Factor(name="Partly Cloudy", impact=5, description="Intermittent darkness")
    return None


def _wind_factor(wind_kmh: float) -> Factor | None:
    if wind_kmh < 8:
        return Factor(name="Calm Night", impact=12, description="Still water, fish hear lures clearly")
    if wind_kmh < 16:
        return Factor(name="Light Breeze", impact=5, description="Slight ripple reduces spookiness")
    if wind_kmh > 30:
        return Factor(name="High Wind", impact=-15, description="Dangerous at night, consider staying home")
    return None


def _water_temp_factor(temp_f: float) -> Factor | None:
    if 55 <= temp_f <= 75:
        return Factor(name="Ideal Water Temp", impact=8, description=f"{temp_f:g}°F, peak activity range")
    if temp_f < 45:
        return Factor(name="Cold Water", impact=-10, description=f"{temp_f:g}°F, sluggish fish")
    if temp_f > 85:
        return Factor(name="Warm Water", impact=-5, description=f"{temp_f:g}°F, low oxygen, fish go deep")
    return None


def _pressure_factor(trend_mb: float) -> Factor | None:
    if trend_mb < -2:
        return Factor(name="Falling Pressure", impact=12, description="Fish feed aggressively before fronts")
    if trend_mb < -0.5:
        return Factor(name="Slight Pressure Drop", impact=6, description="Fish activity increasing")
    if trend_mb > 3:
        return Factor(name="Rising Pressure", impact=-8, description="Post-front conditions, fish lockjaw")
    return None


def _solunar_factor(is_major: bool, is_minor: bool) -> Factor | None:
    if is_major:
        return Factor(name="Solunar Major Period", impact=15, description="2-hour peak feeding window")
    if is_minor:
        return Factor(name="Solunar Minor Period", impact=8, description="1-hour elevated activity")
    return None


def _time_factor(hours_after_sunset: float) -> Factor | None:
    if 2 <= hours_after_sunset <= 4:
        return Factor(name="Prime Time Window", impact=8, description="2-4 hrs after sunset, peak feed")
    if 1 <= hours_after_sunset < 2:
        return Factor(name="Early Night", impact=4, description="Fish transitioning to night patterns")
    if hours_after_sunset > 6:
        return Factor(name="Late Night", impact=-3, description="Activity slows after midnight for most species")
    return None


def night_factors(conditions: NightConditions) -> list[Factor]:
    """Evaluate every night factor in display order, skipping neutral ones."""
    candidates = [
        _moon_factor(conditions.moon_illumination),
        _cloud_factor(conditions.cloud_cover_percent),
        _wind_factor(conditions.wind_speed_kmh),
        _water_temp_factor(conditions.water_temp_f),
        _pressure_factor(conditions.pressure_trend_mb),
        _solunar_factor(conditions.is_solunar_major, conditions.is_solunar_minor),
        _time_factor(conditions.hours_after_sunset),
    ]
    return [factor for factor in candidates if factor is not None]


def score_night(
    conditions: NightConditions,
    species: Sequence[NightSpecies] = NIGHT_SPECIES,
    species_limit: int = 5,
) -> ScoreOutcome:
    """Score night fishing conditions and pick species suited to the moonlight.

    Never raises; failures give a degraded neutral result.
    """
    try:
        factors = night_factors(conditions)
        raw = BASELINE_SCORE + sum(factor.impact for factor in factors)
        score = max(0, min(100, round(raw)))
        result = NightScoreResult(
            score=score,
            label=night_rating(score),
            factors=factors,
            best_species=best_night_species(conditions.moon_illumination, species, species_limit),
        )
    except Exception as exc:
        logger.warning("Night score calculation failed: %s", exc)
        return ScoreOutcome(
            status="degraded",
            result=NightScoreResult(score=BASELINE_SCORE, label="Fair", error=str(exc)),
            reason=str(exc),
        )
    return ScoreOutcome(status="ok", result=result)


def hours_after_sunset(moment: GeoMoment, lookback_days: int = SUNSET_LOOKBACK_DAYS) -> float | None:
    """Hours since the most recent sunset, or None when it is undefined (polar).

    West of Greenwich the sunsets dated today and yesterday (UTC) can both
    still be ahead just after UTC midnight, so earlier dates are searched too.
    Polar days have no sunset and are skipped.
    """
    at = moment.timestamp_utc
    for offset in range(lookback_days + 1):
        day = moment.utc_date - timedelta(days=offset)
        solar = compute_solar_times(moment.latitude, moment.longitude, day)
        if solar.sunset_utc_minutes is None:
            continue
        sunset = minutes_to_datetime(day, solar.sunset_utc_minutes)
        if sunset <= at:
            return (at - sunset).total_seconds() / 3600.0
    return None


def build_night_conditions(
    moment: GeoMoment,
    weather: WeatherSnapshot,
    water_temp_f: float | None = None,
    pressure_trend_mb: float | None = None,
) -> NightConditions:
    """Assemble night conditions from the astronomy pipeline and a weather reading.

    Readings that are unavailable keep the NightConditions defaults.
    """
    solunar = calculate_day(moment)
    window = window_kind_at(moment.timestamp_utc, solunar, calculate_previous_day(moment))
    values: dict[str, object] = {
        "moon_illumination": solunar.moon.illumination_percent,
        "moon_phase": solunar.moon.name,
        "is_solunar_major": window == "major",
        "is_solunar_minor": window == "minor",
    }
    if weather.cloud_cover_percent is not None:
        values["cloud_cover_percent"] = weather.cloud_cover_percent
    if weather.wind_speed is not None:
        values["wind_speed_kmh"] = weather.wind_speed
    if water_temp_f is not None:
        values["water_temp_f"] = water_temp_f
    if pressure_trend_mb is not None:
        values["pressure_trend_mb"] = pressure_trend_mb

    elapsed = hours_after_sunset(moment)
    if elapsed is not None:
        values["hours_after_sunset"] = elapsed
    else:
        logger.debug("No sunset to measure from at %s; keeping default", moment)
    return NightConditions(**values)
