"""Integration test configuration."""

import pytest
from fishcast.config import reset_settings_cache


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def sample_weather():
    """Parsed weather reading for a mild, overcast morning."""
    return {
        "temperature": 21.5,
        "wind_speed": 9.0,
        "cloud_cover_percent": 65.0,
        "precipitation": 0.4,
        "pressure_msl": 1011.2,
        "description": "Overcast",
    }


@pytest.fixture
def sample_tide_predictions():
    """High/low predictions around 2024-06-21, New York Harbor."""
    return [
        {"at": "2024-06-21T05:12:00Z", "kind": "low", "height_m": 0.1},
        {"at": "2024-06-21T11:24:00Z", "kind": "high", "height_m": 1.5},
        {"at": "2024-06-21T17:36:00Z", "kind": "low", "height_m": 0.2},
        {"at": "2024-06-21T23:48:00Z", "kind": "high", "height_m": 1.6},
    ]


@pytest.fixture
def sample_daily_forecast():
    """Seven days of parsed daily forecast values."""
    return [
        {
            "date": f"2024-06-{day}",
            "temperature_max": 27.0 + i,
            "temperature_min": 18.0,
            "precipitation_sum": [0.0, 1.2, 0.0, 8.5, 0.0, 0.0, 3.0][i],
            "wind_speed_max": [8.0, 12.0, 15.0, 35.0, 6.0, 10.0, 22.0][i],
            "pressure_msl_max": 1018.0,
            "pressure_msl_min": 1009.0,
            "cloud_cover_mean": [20.0, 55.0, 70.0, 95.0, 40.0, 60.0, 85.0][i],
            "weather_code": [0, 61, 3, 95, 1, 2, 63][i],
        }
        for i, day in enumerate(range(17, 24))
    ]
