"""Moon phase, illumination and phase-derived fishing rating."""

from __future__ import annotations

import logging
import math
from datetime import date

from fishcast.schemas.astronomy import MoonPhase

logger = logging.getLogger(__name__)

SYNODIC_MONTH_DAYS = 29.53

# Named lunar phases with their synodic fraction ranges (equal eighths, centred on the quarters)
PHASE_NAMES = [
    (0.000, 0.0625, "new"),
    (0.0625, 0.1875, "waxing_crescent"),
    (0.1875, 0.3125, "first_quarter"),
    (0.3125, 0.4375, "waxing_gibbous"),
    (0.4375, 0.5625, "full"),
    (0.5625, 0.6875, "waning_gibbous"),
    (0.6875, 0.8125, "last_quarter"),
    (0.8125, 0.9375, "waning_crescent"),
    (0.9375, 1.000, "new"),
]

# Distance from the nearest new/full point -> rating, checked in order
FISHING_RATING_BANDS = [
    (0.05, 5),
    (0.1, 4),
    (0.2, 3),
    (0.3, 2),
]


def moon_age_days(target_date: date) -> int:
    """Approximate days since new moon (0-29) via Conway's century-corrected rule."""
    year, month, day = target_date.year, target_date.month, target_date.day
    r = (year % 100) % 19
    if r > 9:
        r -= 19
    r = (r * 11) % 30 + month + day
    if month < 3:
        r += 2
    r -= 4 if year < 2000 else 8.3
    return math.floor(r + 0.5) % 30


def phase_name(fraction: float) -> str:
    for low, high, name in PHASE_NAMES:
        if low <= fraction < high:
            return name
    return "new"


def illumination_percent(fraction: float) -> float:
    """Lit percentage of the disc; 0 at new moon, 100 at full."""
    return round(50.0 * (1.0 - math.cos(2 * math.pi * fraction)), 1)


def fishing_rating(fraction: float) -> int:
    """1-5 rating, highest close to new and full moon."""
    distance = min(fraction, abs(fraction - 0.5), 1.0 - fraction)
    for limit, rating in FISHING_RATING_BANDS:
        if distance < limit:
            return rating
    return 1


def compute_moon_phase(target_date: date) -> MoonPhase:
    """Compute the phase for a calendar date. Coarse: good to roughly a day."""
    fraction = moon_age_days(target_date) / SYNODIC_MONTH_DAYS
    phase = MoonPhase(
        fraction=fraction,
        illumination_percent=illumination_percent(fraction),
        name=phase_name(fraction),
        fishing_rating=fishing_rating(fraction),
    )
    logger.debug("Moon phase for %s: %.4f (%s)", target_date, fraction, phase.name)
    return phase


def phase_delta(calculated: float, reference: float) -> float:
    """Shortest distance between two phase fractions around the cycle."""
    diff = abs(calculated - reference) % 1.0
    if diff > 0.5:
        diff = 1.0 - diff
    return diff
