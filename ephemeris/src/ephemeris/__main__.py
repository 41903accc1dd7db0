"""Command-line entry point: python -m ephemeris generate|validate."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import UTC, datetime

from orrery.config import get_settings
from orrery.schemas.ephemeris import CoordinateSystem

from ephemeris.errors import EphemerisError
from ephemeris.generator import generate
from ephemeris.summary import summarize
from ephemeris.validation import validate

logger = logging.getLogger("ephemeris")


def _configure_logging(verbose: bool = False) -> None:
    level_name = "DEBUG" if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _parse_instant(value: str) -> datetime:
    """Parse an ISO date or datetime; naive values are UTC."""
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid date '{value}'. Expected ISO format.") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _parse_bodies(value: str) -> list[str]:
    bodies = [part.strip() for part in value.split(",") if part.strip()]
    if not bodies:
        raise argparse.ArgumentTypeError("At least one body is required")
    return bodies


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ephemeris", description="Simplified Keplerian ephemeris tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("generate", "Generate positions and aspects as JSON"),
        ("validate", "Generate positions and validate them against reference data"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("--bodies", type=_parse_bodies, default=["Mercury", "Venus"])
        cmd.add_argument("--start", type=_parse_instant, required=True)
        cmd.add_argument("--end", type=_parse_instant, required=True)
        cmd.add_argument("--step", type=float, default=1.0, help="Step in days")
        cmd.add_argument(
            "--frame",
            choices=[c.value for c in CoordinateSystem],
            default=CoordinateSystem.GEOCENTRIC.value,
        )
        cmd.add_argument("--orb", type=float, default=None, help="Aspect orb in degrees")
        cmd.add_argument("--no-aspects", action="store_true")
        cmd.add_argument("--tolerance", type=float, default=None, help="Validation tolerance in degrees")
        cmd.add_argument("--summary", action="store_true", help="Include dashboard summary")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI. Returns the process exit code."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return int(exc.code or 0)

    _configure_logging(args.verbose)

    try:
        output = generate(
            args.bodies,
            args.start,
            args.end,
            step_days=args.step,
            frame=args.frame,
            include_aspects=not args.no_aspects,
            aspect_orb=args.orb,
        )
    except EphemerisError as exc:
        logger.error("Ephemeris generation failed: %s", exc)
        return 1

    if args.command == "validate":
        payload = validate(output.positions, tolerance=args.tolerance).model_dump(mode="json")
    else:
        payload = output.model_dump(mode="json")
    if args.summary:
        payload["summary_view"] = summarize(output)

    json.dump(payload, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
