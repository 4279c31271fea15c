"""Tests for the weighted FishCast engine."""

from datetime import UTC, datetime

import pytest
from fishcast.schemas.astronomy import GeoMoment
from fishcast.schemas.conditions import TideSnapshot, WeatherSnapshot
from scoring import fishcast
from scoring.fishcast import (
    WEIGHTS,
    calculate_fishcast,
    score_cloud_cover,
    score_fishcast,
    score_label,
    score_precipitation,
    score_pressure,
    score_tide,
    score_time_of_day,
    score_wind,
)


def test_weights_sum_to_one():
    assert sum(WEIGHTS.values()) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "pressure,expected",
    [(None, 50), (1013, 90), (1023, 90), (1012.9, 70), (1005, 70), (1004.9, 40), (1023.5, 60), (1030, 60), (1030.1, 30)],
)
def test_pressure_bands(pressure, expected):
    assert score_pressure(pressure)[0] == expected


@pytest.mark.parametrize(
    "wind,expected",
    [(None, 50), (0, 85), (5, 85), (5.1, 75), (12, 75), (20, 55), (30, 30), (31, 10)],
)
def test_wind_bands(wind, expected):
    assert score_wind(wind)[0] == expected


@pytest.mark.parametrize(
    "hour,expected",
    [(0, 50), (3, 50), (4, 90), (8, 90), (9, 65), (10, 65), (11, 40), (14, 40), (15, 65), (16, 65), (17, 85), (21, 85), (22, 50)],
)
def test_time_of_day_bands(hour, expected):
    assert score_time_of_day(hour)[0] == expected


@pytest.mark.parametrize(
    "cloud,expected",
    [(None, 50), (0, 40), (29, 40), (30, 65), (49, 65), (50, 80), (80, 80), (81, 60)],
)
def test_cloud_bands(cloud, expected):
    assert score_cloud_cover(cloud)[0] == expected


@pytest.mark.parametrize(
    "rain,expected",
    [(None, 50), (0, 60), (0.5, 85), (2, 85), (3, 65), (5, 65), (7, 40), (10, 40), (11, 20)],
)
def test_precipitation_bands(rain, expected):
    assert score_precipitation(rain)[0] == expected


@pytest.mark.parametrize(
    "tide,expected",
    [
        (None, 50),
        (TideSnapshot(state="unknown"), 50),
        (TideSnapshot(state="rising", progress_percent=50), 90),
        (TideSnapshot(state="rising", progress_percent=70), 90),
        (TideSnapshot(state="falling", progress_percent=30), 80),
        (TideSnapshot(state="rising", progress_percent=20), 60),
        (TideSnapshot(state="rising", progress_percent=10), 40),
        (TideSnapshot(state="falling", progress_percent=90), 40),
    ],
)
def test_tide_bands(tide, expected):
    assert score_tide(tide)[0] == expected


@pytest.mark.parametrize(
    "score,label",
    [(100, "Excellent"), (85, "Excellent"), (84, "Very Good"), (70, "Very Good"), (69, "Good"), (55, "Good"), (54, "Fair"), (40, "Fair"), (39, "Poor"), (0, "Poor")],
)
def test_labels(score, label):
    assert score_label(score) == label


def test_reference_scenario(make_solunar_day, dawn_moment, good_weather):
    """Stable pressure, light wind, dry, major period at dawn on a rising mid tide."""
    tide = TideSnapshot(state="rising", progress_percent=50)
    outcome = score_fishcast(good_weather, make_solunar_day(), tide, dawn_moment)

    assert outcome.ok
    result = outcome.result
    assert result.score == 84
    assert result.label == "Very Good"
    assert result.score >= 70
    assert [factor.name for factor in result.factors] == list(WEIGHTS)
    solunar = next(f for f in result.factors if f.name == "solunar_period")
    assert solunar.score == 95


def test_impacts_reconstruct_score(make_solunar_day, dawn_moment, good_weather):
    outcome = score_fishcast(good_weather, make_solunar_day(fishing_rating=2), None, dawn_moment)
    result = outcome.result
    assert 50 + sum(f.impact for f in result.factors) == pytest.approx(result.score, abs=0.5)


def test_missing_tide_moves_score_at_most_five(make_solunar_day, dawn_moment, good_weather):
    day = make_solunar_day()
    for progress in (5, 20, 50, 90):
        with_tide = score_fishcast(good_weather, day, TideSnapshot(state="falling", progress_percent=progress), dawn_moment)
        without = score_fishcast(good_weather, day, None, dawn_moment)
        assert abs(with_tide.result.score - without.result.score) <= 5


def test_empty_weather_is_still_scored(make_solunar_day, dawn_moment):
    outcome = score_fishcast(WeatherSnapshot(), make_solunar_day(), None, dawn_moment)
    assert outcome.ok
    assert 0 <= outcome.result.score <= 100


def test_idempotent(make_solunar_day, dawn_moment, good_weather):
    day = make_solunar_day()
    first = score_fishcast(good_weather, day, None, dawn_moment)
    second = score_fishcast(good_weather, day, None, dawn_moment)
    assert first.model_dump() == second.model_dump()


def test_internal_failure_degrades(monkeypatch, make_solunar_day, dawn_moment, good_weather):
    def boom(_wind):
        raise ValueError("wind sensor exploded")

    monkeypatch.setattr(fishcast, "score_wind", boom)
    outcome = score_fishcast(good_weather, make_solunar_day(), None, dawn_moment)

    assert outcome.degraded
    assert outcome.reason == "wind sensor exploded"
    assert outcome.result.score == 50
    assert outcome.result.label == "Fair"
    assert outcome.result.error == "wind sensor exploded"


def test_missing_solunar_degrades(dawn_moment, good_weather):
    outcome = score_fishcast(good_weather, None, None, dawn_moment)
    assert outcome.degraded
    assert outcome.result.score == 50


def test_calculate_fishcast_polar_scenario(good_weather):
    moment = GeoMoment(latitude=78.0, longitude=15.0, timestamp_utc=datetime(2024, 6, 21, 12, 0, tzinfo=UTC))
    outcome = calculate_fishcast(moment, good_weather)

    assert outcome.ok
    assert 0 <= outcome.result.score <= 100
    assert "time_of_day" in {f.name for f in outcome.result.factors}


def test_calculate_fishcast_degrades_when_astronomy_fails(monkeypatch, good_weather, dawn_moment):
    def broken(_moment):
        raise RuntimeError("ephemeris unavailable")

    monkeypatch.setattr(fishcast, "calculate_day", broken)
    outcome = calculate_fishcast(dawn_moment, good_weather)
    assert outcome.degraded
    assert outcome.reason == "ephemeris unavailable"


def test_previous_day_major_counts_after_midnight(make_solunar_day, dawn_moment, good_weather):
    today = make_solunar_day(major_hours=(14, 16))
    yesterday = make_solunar_day(major_hours=(9, 11))
    outcome = score_fishcast(good_weather, today, None, dawn_moment, previous=yesterday)

    solunar = next(f for f in outcome.result.factors if f.name == "solunar_period")
    assert solunar.score == 95


def test_calculate_fishcast_sees_window_carried_over_midnight(good_weather):
    """The 2024-11-10 New York major runs to ~00:10 UTC on the 11th."""
    moment = GeoMoment(latitude=40.7128, longitude=-74.006, timestamp_utc=datetime(2024, 11, 11, 0, 5, tzinfo=UTC))
    outcome = calculate_fishcast(moment, good_weather)

    solunar = next(f for f in outcome.result.factors if f.name == "solunar_period")
    assert solunar.score == 95
