"""End-to-end: location and instant through astronomy into every scoring engine."""

from datetime import UTC, datetime, timedelta

from fishcast.schemas.astronomy import GeoMoment
from fishcast.schemas.conditions import DailyForecast, TideExtreme, WeatherSnapshot
from scoring.fishcast import WEIGHTS, calculate_fishcast
from scoring.night import build_night_conditions, score_night
from scoring.outlook import score_outlook
from scoring.species import adjust_score_for_species
from scoring.tide import tide_state_at
from solunar.calculator import calculate_day

NEW_YORK = {"latitude": 40.7128, "longitude": -74.006}


class TestDaytimePipeline:
    def test_full_pipeline(self, sample_weather, sample_tide_predictions):
        moment = GeoMoment(**NEW_YORK, timestamp_utc=datetime(2024, 6, 21, 9, 0, tzinfo=UTC))
        weather = WeatherSnapshot.model_validate(sample_weather)
        extremes = [TideExtreme.model_validate(row) for row in sample_tide_predictions]
        tide = tide_state_at(extremes, moment.timestamp_utc)

        assert tide.state == "rising"
        outcome = calculate_fishcast(moment, weather, tide)

        assert outcome.ok
        assert 0 <= outcome.result.score <= 100
        assert [f.name for f in outcome.result.factors] == list(WEIGHTS)
        tide_factor = next(f for f in outcome.result.factors if f.name == "tide_state")
        assert tide_factor.score == 90

    def test_pipeline_is_deterministic(self, sample_weather):
        moment = GeoMoment(**NEW_YORK, timestamp_utc=datetime(2024, 6, 21, 9, 0, tzinfo=UTC))
        weather = WeatherSnapshot.model_validate(sample_weather)
        assert calculate_fishcast(moment, weather) == calculate_fishcast(moment, weather)

    def test_species_adjustment_on_pipeline_result(self, sample_weather):
        moment = GeoMoment(**NEW_YORK, timestamp_utc=datetime(2024, 6, 21, 10, 0, tzinfo=UTC))
        weather = WeatherSnapshot.model_validate(sample_weather)
        base = calculate_fishcast(moment, weather).result
        adjusted = adjust_score_for_species(base, "largemouth_bass", weather, moment, water_temp_c=22)

        assert adjusted.original_score == base.score
        assert adjusted.factors == base.factors
        assert adjusted.score >= base.score

    def test_polar_day_pipeline(self, sample_weather):
        moment = GeoMoment(latitude=78.0, longitude=15.0, timestamp_utc=datetime(2024, 6, 21, 12, 0, tzinfo=UTC))
        day = calculate_day(moment)
        outcome = calculate_fishcast(moment, WeatherSnapshot.model_validate(sample_weather))

        assert day.solar.is_polar
        assert day.minor == []
        assert outcome.ok

    def test_scores_across_a_week(self, sample_weather):
        weather = WeatherSnapshot.model_validate(sample_weather)
        start = datetime(2024, 1, 1, tzinfo=UTC)
        for hours in range(0, 24 * 7, 5):
            moment = GeoMoment(**NEW_YORK, timestamp_utc=start + timedelta(hours=hours))
            outcome = calculate_fishcast(moment, weather)
            assert outcome.ok
            assert 0 <= outcome.result.score <= 100


class TestNightPipeline:
    def test_night_pipeline(self, sample_weather):
        moment = GeoMoment(**NEW_YORK, timestamp_utc=datetime(2024, 6, 22, 3, 0, tzinfo=UTC))
        conditions = build_night_conditions(moment, WeatherSnapshot.model_validate(sample_weather), water_temp_f=70)
        outcome = score_night(conditions)

        assert outcome.ok
        assert 0 <= outcome.result.score <= 100
        assert 0 < len(outcome.result.best_species) <= 5
        names = {f.name for f in outcome.result.factors}
        assert "Full Moon Bright" in names
        assert "Ideal Water Temp" in names


class TestOutlook:
    def test_seven_day_outlook(self, sample_daily_forecast):
        days = [DailyForecast.model_validate(row) for row in sample_daily_forecast]
        outlook = score_outlook(days)

        assert len(outlook) == 7
        assert outlook[0].day_name == "Mon"
        stormy = outlook[3]
        assert stormy.score == min(d.score for d in outlook)
