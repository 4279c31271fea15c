"""Sunrise, sunset and solar noon from a low-precision solar model."""

from __future__ import annotations

import logging
import math
from datetime import UTC, date, datetime, timedelta

from fishcast.schemas.astronomy import SolarTimes

logger = logging.getLogger(__name__)

# Zenith of the sun's centre at rise/set: 90° plus 0.833° for refraction and solar radius
SUNRISE_ZENITH_DEG = 90.833
GOLDEN_HOUR_MINUTES = 60.0
MINUTES_PER_DEGREE = 4.0  # the sun crosses 15° of hour angle per hour


def day_of_year(target_date: date) -> int:
    return target_date.timetuple().tm_yday


def _year_angle(target_date: date) -> float:
    """Fractional-year angle in radians, zero at the March equinox."""
    return (2 * math.pi / 365) * (day_of_year(target_date) - 81)


def equation_of_time(target_date: date) -> float:
    """Equation of time in minutes (apparent minus mean solar time)."""
    b = _year_angle(target_date)
    return 9.87 * math.sin(2 * b) - 7.53 * math.cos(b) - 1.5 * math.sin(b)


def solar_declination(target_date: date) -> float:
    """Solar declination in degrees."""
    return 23.45 * math.sin(_year_angle(target_date))


def compute_solar_times(latitude: float, longitude: float, target_date: date) -> SolarTimes:
    """Compute sun events for ``target_date`` in minutes from UTC midnight.

    Polar day/night is not an error: sunrise and sunset come back as None.
    """
    eot = equation_of_time(target_date)
    decl_rad = math.radians(solar_declination(target_date))
    lat_rad = math.radians(latitude)

    solar_noon = 720.0 - MINUTES_PER_DEGREE * longitude - eot

    denominator = math.cos(lat_rad) * math.cos(decl_rad)
    if abs(denominator) < 1e-12:
        # Exactly at a pole the hour angle is undefined; the sun's side of the equator decides
        polar = "polar_day" if latitude * decl_rad > 0 else "polar_night"
        return SolarTimes(
            sunrise_utc_minutes=None,
            sunset_utc_minutes=None,
            solar_noon_utc_minutes=solar_noon,
            polar_condition=polar,
        )

    cos_h = (math.cos(math.radians(SUNRISE_ZENITH_DEG)) - math.sin(lat_rad) * math.sin(decl_rad)) / denominator
    logger.debug(
        "Solar inputs date=%s lat=%s lon=%s eot=%.3f cos_h=%.5f", target_date, latitude, longitude, eot, cos_h
    )

    if cos_h > 1.0:
        return SolarTimes(
            sunrise_utc_minutes=None,
            sunset_utc_minutes=None,
            solar_noon_utc_minutes=solar_noon,
            polar_condition="polar_night",
        )
    if cos_h < -1.0:
        return SolarTimes(
            sunrise_utc_minutes=None,
            sunset_utc_minutes=None,
            solar_noon_utc_minutes=solar_noon,
            polar_condition="polar_day",
        )

    hour_angle = math.degrees(math.acos(cos_h))
    sunrise = solar_noon - MINUTES_PER_DEGREE * hour_angle
    sunset = solar_noon + MINUTES_PER_DEGREE * hour_angle

    return SolarTimes(
        sunrise_utc_minutes=sunrise,
        sunset_utc_minutes=sunset,
        solar_noon_utc_minutes=solar_noon,
        golden_hour_morning_utc_minutes=sunrise + GOLDEN_HOUR_MINUTES,
        golden_hour_evening_utc_minutes=sunset - GOLDEN_HOUR_MINUTES,
        day_length_hours=round((sunset - sunrise) / 60.0, 2),
    )


def minutes_to_datetime(target_date: date, minutes: float) -> datetime:
    """Convert minutes from UTC midnight of ``target_date`` to an aware datetime."""
    midnight = datetime(target_date.year, target_date.month, target_date.day, tzinfo=UTC)
    return midnight + timedelta(minutes=minutes)
