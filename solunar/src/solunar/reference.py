"""Published sun and moon values used to validate the calculators.

Sun events from the USNO one-day tables, converted to minutes from UTC
midnight of the listed date. Moon phase is the synodic fraction at noon UTC
derived from the published new/full moon instants.
"""

from __future__ import annotations

from datetime import date

from fishcast.schemas.validation import ReferencePoint


def _hm(hours: int, minutes: int, day_offset: int = 0) -> float:
    return day_offset * 1440 + hours * 60 + minutes


REFERENCE_POINTS: tuple[ReferencePoint, ...] = (
    # Northern summer solstice, sunset on the next UTC day
    ReferencePoint(
        label="New York 2024-06-21",
        latitude=40.7128,
        longitude=-74.006,
        date=date(2024, 6, 21),
        sunrise_utc_minutes=_hm(9, 24),
        sunset_utc_minutes=_hm(0, 31, day_offset=1),
        moon_phase=0.48,
    ),
    ReferencePoint(
        label="Miami 2024-03-20",
        latitude=25.7617,
        longitude=-80.1918,
        date=date(2024, 3, 20),
        sunrise_utc_minutes=_hm(11, 22),
        sunset_utc_minutes=_hm(23, 33),
        moon_phase=0.36,
    ),
    ReferencePoint(
        label="London 2024-12-21",
        latitude=51.5074,
        longitude=-0.1278,
        date=date(2024, 12, 21),
        sunrise_utc_minutes=_hm(8, 4),
        sunset_utc_minutes=_hm(15, 53),
        moon_phase=0.70,
    ),
    # Southern spring equinox, sunrise on the previous UTC day
    ReferencePoint(
        label="Sydney 2024-09-22",
        latitude=-33.8688,
        longitude=151.2093,
        date=date(2024, 9, 22),
        sunrise_utc_minutes=_hm(19, 52, day_offset=-1),
        sunset_utc_minutes=_hm(7, 56),
        moon_phase=0.65,
    ),
    ReferencePoint(
        label="Tokyo 2024-01-15",
        latitude=35.6762,
        longitude=139.6503,
        date=date(2024, 1, 15),
        sunrise_utc_minutes=_hm(21, 51, day_offset=-1),
        sunset_utc_minutes=_hm(7, 53),
        moon_phase=0.14,
    ),
    ReferencePoint(
        label="Anchorage 2024-06-21",
        latitude=61.2181,
        longitude=-149.9003,
        date=date(2024, 6, 21),
        sunrise_utc_minutes=_hm(12, 20),
        sunset_utc_minutes=_hm(7, 42, day_offset=1),
        moon_phase=0.48,
    ),
    ReferencePoint(
        label="Cape Town 2024-06-21",
        latitude=-33.9249,
        longitude=18.4241,
        date=date(2024, 6, 21),
        sunrise_utc_minutes=_hm(5, 51),
        sunset_utc_minutes=_hm(15, 44),
        moon_phase=0.48,
    ),
    ReferencePoint(
        label="Quito 2024-09-22",
        latitude=-0.1807,
        longitude=-78.4678,
        date=date(2024, 9, 22),
        sunrise_utc_minutes=_hm(11, 3),
        sunset_utc_minutes=_hm(23, 10),
        moon_phase=0.65,
    ),
    # Total eclipse day, new moon just after noon UTC wraps the cycle
    ReferencePoint(
        label="Dallas 2024-04-08",
        latitude=32.7767,
        longitude=-96.797,
        date=date(2024, 4, 8),
        sunrise_utc_minutes=_hm(12, 6),
        sunset_utc_minutes=_hm(0, 53, day_offset=1),
        moon_phase=0.99,
    ),
    # Midnight sun
    ReferencePoint(
        label="Tromso 2024-06-21",
        latitude=69.6492,
        longitude=18.9553,
        date=date(2024, 6, 21),
        moon_phase=0.48,
    ),
    # Polar night
    ReferencePoint(
        label="Longyearbyen 2024-12-21",
        latitude=78.2232,
        longitude=15.6267,
        date=date(2024, 12, 21),
        moon_phase=0.70,
    ),
)
