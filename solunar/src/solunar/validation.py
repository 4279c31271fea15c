"""Validate the solar and lunar calculators against reference values."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from fishcast.schemas.validation import EventCheck, ReferencePoint, ValidationReport
from pydantic import ValidationError

from solunar.lunar import compute_moon_phase, phase_delta
from solunar.reference import REFERENCE_POINTS
from solunar.solar import compute_solar_times

logger = logging.getLogger(__name__)

DEFAULT_SUN_TOLERANCE_MINUTES = 15.0
DEFAULT_MOON_TOLERANCE = 0.15


class ReferenceDataError(ValueError):
    """A reference row is malformed (not merely outside tolerance)."""


def minutes_delta(calculated: float, reference: float) -> float:
    """Shortest distance in minutes between two clock times, across midnight."""
    diff = abs(calculated - reference) % 1440.0
    if diff > 720.0:
        diff = 1440.0 - diff
    return diff


def _coerce_point(point: ReferencePoint | Mapping[str, Any]) -> ReferencePoint:
    if isinstance(point, ReferencePoint):
        ref = point
    else:
        try:
            ref = ReferencePoint.model_validate(point)
        except ValidationError as exc:
            raise ReferenceDataError(f"Invalid reference row {dict(point)!r}: {exc}") from exc

    if (ref.sunrise_utc_minutes is None) != (ref.sunset_utc_minutes is None):
        raise ReferenceDataError(f"{ref.label}: sunrise and sunset must both be set or both be empty")
    if ref.sunrise_utc_minutes is not None and ref.sunset_utc_minutes <= ref.sunrise_utc_minutes:
        raise ReferenceDataError(f"{ref.label}: sunset must come after sunrise")
    return ref


def _check_sun_event(
    label: str,
    event: str,
    calculated: float | None,
    reference: float | None,
    tolerance: float,
) -> EventCheck:
    if calculated is None and reference is None:
        return EventCheck(label=label, event=event, status="skipped_polar", tolerance=tolerance)
    if calculated is None or reference is None:
        # One side says polar, the other does not
        return EventCheck(
            label=label,
            event=event,
            status="failed",
            calculated=calculated,
            reference=reference,
            tolerance=tolerance,
        )

    delta = minutes_delta(calculated, reference)
    return EventCheck(
        label=label,
        event=event,
        status="passed" if delta <= tolerance else "failed",
        calculated=round(calculated, 2),
        reference=reference,
        delta=round(delta, 2),
        tolerance=tolerance,
    )


def validate_point(
    point: ReferencePoint | Mapping[str, Any],
    sun_tolerance_minutes: float = DEFAULT_SUN_TOLERANCE_MINUTES,
    moon_tolerance: float = DEFAULT_MOON_TOLERANCE,
) -> list[EventCheck]:
    """Check sunrise, sunset and moon phase for one reference point."""
    ref = _coerce_point(point)
    solar = compute_solar_times(ref.latitude, ref.longitude, ref.date)

    checks = [
        _check_sun_event(
            ref.label, "sunrise", solar.sunrise_utc_minutes, ref.sunrise_utc_minutes, sun_tolerance_minutes
        ),
        _check_sun_event(
            ref.label, "sunset", solar.sunset_utc_minutes, ref.sunset_utc_minutes, sun_tolerance_minutes
        ),
    ]

    moon = compute_moon_phase(ref.date)
    delta = phase_delta(moon.fraction, ref.moon_phase)
    checks.append(
        EventCheck(
            label=ref.label,
            event="moon_phase",
            status="passed" if delta <= moon_tolerance else "failed",
            calculated=round(moon.fraction, 4),
            reference=ref.moon_phase,
            delta=round(delta, 4),
            tolerance=moon_tolerance,
        )
    )
    return checks


def run_validation(
    points: Iterable[ReferencePoint | Mapping[str, Any]] = REFERENCE_POINTS,
    sun_tolerance_minutes: float = DEFAULT_SUN_TOLERANCE_MINUTES,
    moon_tolerance: float = DEFAULT_MOON_TOLERANCE,
) -> ValidationReport:
    """Run every reference point and aggregate the checks.

    Raises:
        ReferenceDataError: For malformed reference rows. Deviations beyond
            tolerance are reported as failed checks, never raised.
    """
    report = ValidationReport(sun_tolerance_minutes=sun_tolerance_minutes, moon_tolerance=moon_tolerance)
    for point in points:
        checks = validate_point(point, sun_tolerance_minutes, moon_tolerance)
        for check in checks:
            if check.status == "failed":
                logger.warning(
                    "%s %s failed: calc=%s ref=%s delta=%s",
                    check.label,
                    check.event,
                    check.calculated,
                    check.reference,
                    check.delta,
                )
        report.checks.extend(checks)

    logger.info(
        "Validation finished: %d passed, %d failed, %d skipped (polar)",
        report.passed,
        report.failed,
        report.skipped,
    )
    return report


def format_report(report: ValidationReport, verbose: bool = False) -> list[str]:
    """Render a report as console lines. Non-verbose output lists only failures."""
    lines: list[str] = []
    current_label = None
    for check in report.checks:
        if not verbose and check.status != "failed":
            continue
        if check.label != current_label:
            current_label = check.label
            lines.append(f"--- {check.label} ---")
        if check.status == "skipped_polar":
            lines.append(f"  {check.event:<10} skipped (polar day/night)")
            continue
        unit = "m" if check.event != "moon_phase" else ""
        lines.append(
            f"  {check.event:<10} calc={check.calculated}{unit} ref={check.reference}{unit} "
            f"delta={check.delta}{unit} {check.status.upper()}"
        )

    total = report.passed + report.failed
    lines.append(f"Results: {report.passed}/{total} passed, {report.failed} failed, {report.skipped} skipped (polar)")
    lines.append(f"Sun tolerance:  +/-{report.sun_tolerance_minutes:g} min")
    lines.append(f"Moon tolerance: +/-{report.moon_tolerance * 100:.0f}% phase")
    return lines
