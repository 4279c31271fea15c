"""Solunar major/minor feeding periods.

The moon is modelled as trailing the sun by ``fraction`` of a day: it transits
with the sun at new moon and at midnight at full moon. Majors are centred on
the estimated transit and anti-transit, minors on the estimated moonrise and
moonset (the sun's own rise/set shifted by the same lag).
"""

from __future__ import annotations

import logging
from datetime import date

from fishcast.schemas.astronomy import MoonPhase, SolarTimes, SolunarWindow

from solunar.lunar import compute_moon_phase
from solunar.solar import minutes_to_datetime

logger = logging.getLogger(__name__)

DAY_MINUTES = 1440.0
LUNAR_DAY_MINUTES = 1490.0  # 24h50m between successive transits
HALF_LUNAR_DAY_MINUTES = LUNAR_DAY_MINUTES / 2
MAJOR_HALF_WIDTH_MINUTES = 60.0
MINOR_HALF_WIDTH_MINUTES = 30.0
MAX_MINOR_WINDOWS = 4

DAWN_DUSK_HOURS = (range(5, 9), range(17, 21))
MIDDAY_HOURS = range(11, 15)


def lunar_lag_minutes(moon: MoonPhase) -> float:
    return moon.fraction * DAY_MINUTES


def _window(kind: str, target_date: date, centre: float, half_width: float) -> SolunarWindow:
    return SolunarWindow(
        kind=kind,
        start_utc=minutes_to_datetime(target_date, centre - half_width),
        end_utc=minutes_to_datetime(target_date, centre + half_width),
    )


def _overlaps_day(centre: float, half_width: float) -> bool:
    return centre + half_width > 0.0 and centre - half_width < DAY_MINUTES


def major_centres(solar: SolarTimes, moon: MoonPhase) -> tuple[float, float]:
    """Transit and anti-transit, minutes from UTC midnight. Transit lies within the day."""
    transit = (solar.solar_noon_utc_minutes + lunar_lag_minutes(moon)) % DAY_MINUTES
    if transit + HALF_LUNAR_DAY_MINUTES < DAY_MINUTES:
        anti_transit = transit + HALF_LUNAR_DAY_MINUTES
    else:
        anti_transit = transit - HALF_LUNAR_DAY_MINUTES
    return transit, anti_transit


def minor_centres(solar: SolarTimes, moon: MoonPhase) -> list[float]:
    """Estimated moonrise/moonset centres that touch the day. Empty for polar days."""
    if solar.is_polar:
        return []

    transit, _ = major_centres(solar, moon)
    moonrise = transit - (solar.solar_noon_utc_minutes - solar.sunrise_utc_minutes)
    moonset = transit + (solar.sunset_utc_minutes - solar.solar_noon_utc_minutes)

    centres = []
    for base in (moonrise, moonset):
        for cycle in (-1, 0, 1):
            centre = base + cycle * LUNAR_DAY_MINUTES
            if _overlaps_day(centre, MINOR_HALF_WIDTH_MINUTES):
                centres.append(centre)
    return sorted(centres)[:MAX_MINOR_WINDOWS]


def compute_solunar_windows(
    solar: SolarTimes,
    target_date: date,
    moon: MoonPhase | None = None,
) -> dict[str, list[SolunarWindow]]:
    """Derive the day's feeding windows.

    Returns:
        Dict with 'major' (always two ~2h windows) and 'minor' (up to four
        ~1h windows, none when sunrise/sunset are undefined).
    """
    if moon is None:
        moon = compute_moon_phase(target_date)
    majors = sorted(major_centres(solar, moon))
    minors = minor_centres(solar, moon)
    if solar.is_polar:
        logger.debug("No minor periods on %s: %s", target_date, solar.polar_condition)

    return {
        "major": [_window("major", target_date, c, MAJOR_HALF_WIDTH_MINUTES) for c in majors],
        "minor": [_window("minor", target_date, c, MINOR_HALF_WIDTH_MINUTES) for c in minors],
    }


def overall_rating(moon: MoonPhase, local_hour: int) -> int:
    """Moon rating nudged up at dawn/dusk and down around midday (1-5)."""
    rating = moon.fishing_rating
    if any(local_hour in hours for hours in DAWN_DUSK_HOURS):
        rating = min(5, rating + 1)
    if local_hour in MIDDAY_HOURS:
        rating = max(1, rating - 1)
    return rating
