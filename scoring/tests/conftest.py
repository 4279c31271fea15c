"""Shared fixtures for scoring tests."""

from datetime import UTC, date, datetime

import pytest
from fishcast.schemas.astronomy import GeoMoment, MoonPhase, SolarTimes, SolunarDay, SolunarWindow
from fishcast.schemas.conditions import WeatherSnapshot

NYC_LAT = 40.7128
NYC_LON = -74.006


@pytest.fixture
def make_solunar_day():
    """Build a SolunarDay with a single major window around the given hours (UTC)."""

    def _make(
        fishing_rating: int = 5,
        major_hours: tuple[int, int] = (10, 12),
        minor_hours: tuple[int, int] | None = None,
        target_date: date = date(2024, 6, 21),
    ) -> SolunarDay:
        def at(hour: int) -> datetime:
            return datetime(target_date.year, target_date.month, target_date.day, hour, tzinfo=UTC)

        minor = []
        if minor_hours is not None:
            minor = [SolunarWindow(kind="minor", start_utc=at(minor_hours[0]), end_utc=at(minor_hours[1]))]
        return SolunarDay(
            date=target_date,
            solar=SolarTimes(sunrise_utc_minutes=564.8, sunset_utc_minutes=1470.5, solar_noon_utc_minutes=1017.7),
            moon=MoonPhase(fraction=0.474, illumination_percent=99.3, name="full", fishing_rating=fishing_rating),
            major=[SolunarWindow(kind="major", start_utc=at(major_hours[0]), end_utc=at(major_hours[1]))],
            minor=minor,
        )

    return _make


@pytest.fixture
def dawn_moment() -> GeoMoment:
    """New York, 10:30 UTC: local hour 5 by longitude."""
    return GeoMoment(latitude=NYC_LAT, longitude=NYC_LON, timestamp_utc=datetime(2024, 6, 21, 10, 30, tzinfo=UTC))


@pytest.fixture
def good_weather() -> WeatherSnapshot:
    return WeatherSnapshot(pressure_msl=1015.0, wind_speed=8.0, cloud_cover_percent=20.0, precipitation=0.0)
