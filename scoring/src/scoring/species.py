"""Species reference tables and species-specific FishCast adjustment."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from fishcast.schemas.astronomy import GeoMoment
from fishcast.schemas.conditions import TideSnapshot, WeatherSnapshot
from fishcast.schemas.scoring import ScoreResult, SpeciesAdjustedResult
from pydantic import BaseModel, ConfigDict

from scoring.fishcast import score_label

logger = logging.getLogger(__name__)


class NightSpecies(BaseModel):
    """A species with its night-fishing profile."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    night_rating: int
    peak_hours: str
    best_moon_phase: str
    light_preference: str
    water_temp_min_f: float
    water_temp_max_f: float


NIGHT_SPECIES: tuple[NightSpecies, ...] = tuple(
    NightSpecies(
        id=row[0],
        name=row[1],
        night_rating=row[2],
        peak_hours=row[3],
        best_moon_phase=row[4],
        light_preference=row[5],
        water_temp_min_f=row[6],
        water_temp_max_f=row[7],
    )
    for row in (
        ("channel_catfish", "Channel Catfish", 95, "10:00 PM - 2:00 AM", "new", "dark", 55, 85),
        ("blue_catfish", "Blue Catfish", 93, "9:00 PM - 3:00 AM", "new", "dark", 50, 82),
        ("flathead_catfish", "Flathead Catfish", 98, "11:00 PM - 4:00 AM", "new", "pitch_dark", 60, 85),
        ("walleye", "Walleye", 96, "Dusk - 1:00 AM", "quarter", "low_light", 45, 72),
        ("crappie", "Crappie", 88, "8:00 PM - 12:00 AM", "any", "attracted_to_light", 50, 75),
        ("largemouth_bass", "Largemouth Bass", 85, "9:00 PM - 1:00 AM", "full", "moonlit", 55, 85),
        ("striped_bass", "Striped Bass", 92, "10:00 PM - 3:00 AM", "new", "bridge_lights", 50, 75),
        ("snook", "Snook", 94, "10:00 PM - 4:00 AM", "new", "dock_lights", 65, 85),
        ("flounder", "Flounder (Gigging)", 90, "9:00 PM - 2:00 AM", "new", "gigging_light", 55, 80),
        ("swordfish", "Swordfish", 99, "Midnight - 4:00 AM", "new", "bait_lights", 60, 80),
        ("squid", "Squid", 97, "9:00 PM - 2:00 AM", "new", "bright_lights", 50, 70),
        ("brown_trout", "Brown Trout", 88, "11:00 PM - 3:00 AM", "new", "pitch_dark", 40, 65),
        ("tarpon", "Tarpon", 91, "10:00 PM - 4:00 AM", "new", "bridge_lights", 72, 88),
        ("redfish", "Redfish / Red Drum", 82, "8:00 PM - 12:00 AM", "full", "moonlit", 60, 85),
        ("carp", "Carp", 86, "10:00 PM - 4:00 AM", "any", "dark", 50, 80),
        ("bowfin", "Bowfin", 80, "9:00 PM - 1:00 AM", "any", "dark", 55, 82),
        ("eel", "Freshwater Eel", 95, "11:00 PM - 4:00 AM", "new", "pitch_dark", 45, 75),
        ("zander", "Zander (Pikeperch)", 94, "Dusk - 2:00 AM", "quarter", "low_light", 42, 70),
    )
)

# Light-preference groups matched against the moon illumination band
DARK_PREFERENCES = frozenset({"pitch_dark", "dark"})
LOW_LIGHT_PREFERENCES = frozenset({"low_light", "moonlit", "dock_lights", "bridge_lights"})
ARTIFICIAL_LIGHT_PREFERENCES = frozenset({"attracted_to_light", "bright_lights", "gigging_light", "bait_lights"})


def suits_moonlight(species: NightSpecies, moon_illumination: float) -> bool:
    """Whether a species' light preference fits the current moonlight."""
    preference = species.light_preference
    if moon_illumination < 20 and preference in DARK_PREFERENCES:
        return True
    if 20 <= moon_illumination < 60 and preference in LOW_LIGHT_PREFERENCES:
        return True
    # Species drawn to artificial light, or indifferent to it, work under any moon
    if preference in ARTIFICIAL_LIGHT_PREFERENCES or preference == "any":
        return True
    return moon_illumination < 50


def best_night_species(
    moon_illumination: float,
    species: Sequence[NightSpecies] = NIGHT_SPECIES,
    limit: int = 5,
) -> list[str]:
    """Names of the best-rated species for the moonlight, highest night rating first."""
    matching = [s for s in species if suits_moonlight(s, moon_illumination)]
    matching.sort(key=lambda s: s.night_rating, reverse=True)
    return [s.name for s in matching[:limit]]


# ── Daytime species adjustment ───────────────────────────

Modifier = Callable[..., float]


class SpeciesProfile(BaseModel):
    """Condition multipliers for one species. Missing modifiers leave the score alone."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    pressure: Modifier | None = None
    wind: Modifier | None = None
    time_of_day: Modifier | None = None
    cloud_cover: Modifier | None = None
    precipitation: Modifier | None = None
    tide: Modifier | None = None
    ideal_water_temp_c: tuple[float, float] | None = None


def _dawn_dusk(h: int, morning: tuple[int, int], evening: tuple[int, int], hit: float, miss: float) -> float:
    if morning[0] <= h <= morning[1] or evening[0] <= h <= evening[1]:
        return hit
    return miss


SPECIES_ADJUSTMENTS: dict[str, SpeciesProfile] = {
    "largemouth bass": SpeciesProfile(
        pressure=lambda p: 1.2 if p < 1010 else 0.8 if p > 1020 else 1.0,
        wind=lambda w: 1.1 if w <= 10 else 0.7 if w > 25 else 1.0,
        time_of_day=lambda h: _dawn_dusk(h, (5, 9), (17, 21), 1.2, 0.9),
        cloud_cover=lambda c: 1.15 if c >= 60 else 0.8 if c < 20 else 1.0,
        ideal_water_temp_c=(18, 27),
    ),
    "smallmouth bass": SpeciesProfile(
        pressure=lambda p: 1.15 if p < 1010 else 1.0,
        wind=lambda w: 1.1 if 5 <= w <= 15 else 1.0,
        time_of_day=lambda h: _dawn_dusk(h, (5, 10), (16, 20), 1.15, 0.9),
        ideal_water_temp_c=(15, 22),
    ),
    "trout": SpeciesProfile(
        pressure=lambda p: 1.1 if 1010 <= p <= 1020 else 1.0,
        wind=lambda w: 1.15 if w <= 8 else 0.7 if w > 20 else 1.0,
        time_of_day=lambda h: _dawn_dusk(h, (5, 9), (16, 19), 1.2, 0.85),
        cloud_cover=lambda c: 1.15 if c >= 50 else 1.0,
        ideal_water_temp_c=(7, 16),
    ),
    "rainbow trout": SpeciesProfile(
        pressure=lambda p: 1.1 if 1010 <= p <= 1020 else 1.0,
        wind=lambda w: 1.15 if w <= 8 else 1.0,
        time_of_day=lambda h: 1.2 if 5 <= h <= 9 else 0.9,
        ideal_water_temp_c=(7, 16),
    ),
    "salmon": SpeciesProfile(
        pressure=lambda p: 1.15 if 1005 <= p <= 1015 else 1.0,
        tide=lambda t: 1.2 if t.state == "rising" else 0.9 if t.state == "falling" else 1.0,
        time_of_day=lambda h: _dawn_dusk(h, (4, 8), (16, 20), 1.15, 0.85),
        ideal_water_temp_c=(8, 15),
    ),
    "pike": SpeciesProfile(
        pressure=lambda p: 1.2 if p < 1010 else 1.0,
        wind=lambda w: 1.1 if 5 <= w <= 18 else 1.0,
        cloud_cover=lambda c: 1.15 if c >= 60 else 0.75 if c < 20 else 1.0,
        time_of_day=lambda h: _dawn_dusk(h, (6, 10), (15, 19), 1.15, 0.9),
        ideal_water_temp_c=(10, 21),
    ),
    "walleye": SpeciesProfile(
        time_of_day=lambda h: _dawn_dusk(h, (0, 6), (17, 23), 1.25, 0.85),
        cloud_cover=lambda c: 1.2 if c >= 70 else 0.7 if c < 30 else 1.0,
        wind=lambda w: 1.15 if 5 <= w <= 15 else 1.0,
        ideal_water_temp_c=(10, 18),
    ),
    "catfish": SpeciesProfile(
        time_of_day=lambda h: 1.3 if h >= 19 or h <= 5 else 0.8,
        pressure=lambda p: 1.15 if p < 1010 else 1.0,
        precipitation=lambda r: 1.2 if 0 < r <= 5 else 1.0,
        ideal_water_temp_c=(21, 29),
    ),
    "redfish": SpeciesProfile(
        tide=lambda t: 1.2 if t.state == "falling" else 1.1 if t.state == "rising" else 0.9,
        time_of_day=lambda h: _dawn_dusk(h, (5, 9), (16, 20), 1.15, 0.9),
        cloud_cover=lambda c: 1.1 if c >= 40 else 1.0,
        ideal_water_temp_c=(18, 28),
    ),
    "tarpon": SpeciesProfile(
        tide=lambda t: 1.25 if t.state == "rising" else 0.9,
        time_of_day=lambda h: 1.2 if 5 <= h <= 9 else 0.9,
        pressure=lambda p: 1.1 if 1010 <= p <= 1020 else 1.0,
        ideal_water_temp_c=(24, 32),
    ),
    "snook": SpeciesProfile(
        tide=lambda t: 1.2 if t.progress_percent is not None and 30 <= t.progress_percent <= 70 else 0.9,
        time_of_day=lambda h: _dawn_dusk(h, (4, 7), (17, 22), 1.2, 0.85),
        ideal_water_temp_c=(22, 30),
    ),
    "tuna": SpeciesProfile(
        tide=lambda t: 1.15 if t.state == "rising" else 1.0,
        wind=lambda w: 1.1 if 5 <= w <= 20 else 0.6 if w > 30 else 1.0,
        time_of_day=lambda h: 1.15 if 5 <= h <= 10 else 0.9,
        ideal_water_temp_c=(18, 28),
    ),
    "mahi-mahi": SpeciesProfile(
        cloud_cover=lambda c: 1.15 if c < 40 else 1.0,
        wind=lambda w: 1.1 if 8 <= w <= 20 else 1.0,
        ideal_water_temp_c=(21, 30),
    ),
}


def find_species_profile(
    species: str,
    profiles: dict[str, SpeciesProfile] = SPECIES_ADJUSTMENTS,
) -> tuple[str, SpeciesProfile] | None:
    """Look up a profile by name; underscores count as spaces, partial names match."""
    key = species.strip().lower().replace("_", " ")
    if key in profiles:
        return key, profiles[key]
    for name, profile in profiles.items():
        if name in key or key in name:
            return name, profile
    return None


def adjust_score_for_species(
    base: ScoreResult,
    species: str,
    weather: WeatherSnapshot,
    moment: GeoMoment,
    tide: TideSnapshot | None = None,
    water_temp_c: float | None = None,
    profiles: dict[str, SpeciesProfile] = SPECIES_ADJUSTMENTS,
) -> ScoreResult:
    """Re-weight a FishCast result for a target species.

    Unknown species, or a degraded base result, come back unchanged.
    """
    if not species or base.error:
        return base
    found = find_species_profile(species, profiles)
    if found is None:
        logger.debug("No adjustment profile for species %r", species)
        return base
    _, profile = found

    multiplier = 1.0
    insights: list[str] = []

    if profile.pressure and weather.pressure_msl is not None:
        m = profile.pressure(weather.pressure_msl)
        multiplier *= m
        if m > 1.05:
            insights.append("Pressure favors this species")
    if profile.wind and weather.wind_speed is not None:
        multiplier *= profile.wind(weather.wind_speed)
    if profile.time_of_day:
        m = profile.time_of_day(moment.local_hour)
        multiplier *= m
        if m > 1.1:
            insights.append("Prime time for this species")
    if profile.cloud_cover and weather.cloud_cover_percent is not None:
        multiplier *= profile.cloud_cover(weather.cloud_cover_percent)
    if profile.tide and tide is not None and tide.state != "unknown":
        m = profile.tide(tide)
        multiplier *= m
        if m > 1.1:
            insights.append("Tide is ideal for this species")
    if profile.precipitation and weather.precipitation is not None:
        multiplier *= profile.precipitation(weather.precipitation)

    if profile.ideal_water_temp_c and water_temp_c is not None:
        low, high = profile.ideal_water_temp_c
        if low <= water_temp_c <= high:
            multiplier *= 1.1
            insights.append(f"Water temp {water_temp_c:g}°C is in the ideal range")
        elif water_temp_c < low - 5 or water_temp_c > high + 5:
            multiplier *= 0.8
            insights.append(f"Water temp {water_temp_c:g}°C is outside preferred range")

    score = round(max(0.0, min(100.0, base.score * multiplier)))
    return SpeciesAdjustedResult(
        score=score,
        label=score_label(score),
        factors=base.factors,
        species_name=species,
        original_score=base.score,
        multiplier=round(multiplier, 4),
        insights=insights,
    )
