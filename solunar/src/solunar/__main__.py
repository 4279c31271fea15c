"""Validation harness entry point: python -m solunar."""

from __future__ import annotations

import argparse
import logging
import sys

from fishcast.config import get_settings

from solunar.validation import format_report, run_validation


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="python -m solunar",
        description="Check sun and moon calculations against published reference values.",
    )
    parser.add_argument("--verbose", action="store_true", help="Print every check, not only failures.")
    parser.add_argument(
        "--sun-tolerance",
        type=float,
        default=settings.sun_tolerance_minutes,
        help="Allowed sunrise/sunset deviation in minutes (default: %(default)s).",
    )
    parser.add_argument(
        "--moon-tolerance",
        type=float,
        default=settings.moon_tolerance,
        help="Allowed moon phase deviation as a cycle fraction (default: %(default)s).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the harness; returns 0 when every check is within tolerance."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    report = run_validation(sun_tolerance_minutes=args.sun_tolerance, moon_tolerance=args.moon_tolerance)
    for line in format_report(report, verbose=args.verbose):
        print(line)
    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())
