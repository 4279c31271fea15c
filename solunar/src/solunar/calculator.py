"""Main solunar calculator - calculate_day() entry point."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Literal

from fishcast.schemas.astronomy import GeoMoment, SolunarDay

from solunar.lunar import compute_moon_phase
from solunar.periods import compute_solunar_windows, overall_rating
from solunar.solar import compute_solar_times

logger = logging.getLogger(__name__)


def calculate_day(moment: GeoMoment) -> SolunarDay:
    """Calculate sun, moon and feeding windows for the moment's UTC date.

    Args:
        moment: Location and instant. The instant only selects the UTC date
            and, through the longitude-estimated local hour, the day rating.

    Returns:
        SolunarDay with solar times, moon phase and major/minor windows.
    """
    target_date = moment.utc_date
    solar = compute_solar_times(moment.latitude, moment.longitude, target_date)
    moon = compute_moon_phase(target_date)
    windows = compute_solunar_windows(solar, target_date, moon)

    if solar.is_polar:
        logger.info(
            "%s at lat=%.4f on %s; sunrise/sunset undefined",
            solar.polar_condition,
            moment.latitude,
            target_date,
        )

    return SolunarDay(
        date=target_date,
        solar=solar,
        moon=moon,
        major=windows["major"],
        minor=windows["minor"],
        overall_rating=overall_rating(moon, moment.local_hour),
    )


def calculate_previous_day(moment: GeoMoment) -> SolunarDay:
    """Solunar day for the UTC date before the moment's. Its late windows can run past midnight."""
    earlier = moment.model_copy(update={"timestamp_utc": moment.timestamp_utc - timedelta(days=1)})
    return calculate_day(earlier)


def window_kind_at(at: datetime, *days: SolunarDay | None) -> Literal["major", "minor"] | None:
    """Kind of window containing ``at`` across several days; majors win over minors."""
    kinds = {day.window_at(at) for day in days if day is not None}
    if "major" in kinds:
        return "major"
    if "minor" in kinds:
        return "minor"
    return None
