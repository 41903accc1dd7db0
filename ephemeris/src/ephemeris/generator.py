"""Ephemeris generator - generate() entry point."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from datetime import date, datetime

from orrery.config import get_settings
from orrery.schemas.ephemeris import (
    CoordinateSystem,
    EphemerisOutput,
    PlanetPosition,
    SkippedPosition,
)

from ephemeris.aspects import detect_aspects
from ephemeris.bodies import resolve_coordinate_system
from ephemeris.errors import GenerationTimeoutError, UnknownBodyError
from ephemeris.positions import compute_position
from ephemeris.timeutils import estimate_sample_count, step_timedelta, to_utc

logger = logging.getLogger(__name__)


def _iter_instants(start: datetime, end: datetime, step_days: float):
    """Yield start, start + step, ... up to and including end.

    Instants are counted before they are built, so none past ``end`` is ever
    computed and a step wider than the range yields ``start`` alone.
    """
    step = step_timedelta(step_days)
    if step is None:
        logger.warning("Step of %s days cannot advance the clock, nothing to generate", step_days)
        return
    if end < start:
        logger.warning("End %s is before start %s, nothing to generate", end.isoformat(), start.isoformat())
        return
    for index in range((end - start) // step + 1):
        yield start + step * index


def generate(
    body_names: Sequence[str],
    start: datetime | date,
    end: datetime | date,
    step_days: float = 1.0,
    frame: str | CoordinateSystem = CoordinateSystem.GEOCENTRIC,
    include_aspects: bool = True,
    aspect_orb: float | None = None,
    max_positions: int | None = None,
) -> EphemerisOutput:
    """Calculate positions for every body at every step of a date range.

    Args:
        body_names: Bodies to compute, in output order for each instant.
        start: First instant (inclusive).
        end: Last instant (inclusive).
        step_days: Spacing between instants; non-positive values yield no output.
        frame: Coordinate system for every position.
        include_aspects: Run aspect detection over the produced positions.
        aspect_orb: Aspect tolerance in degrees (settings default when None).
        max_positions: Ceiling on computed positions (settings default when None).

    Returns:
        EphemerisOutput. ``truncated`` is set when the ceiling stopped the run
        early; unknown bodies are listed in ``skipped`` instead of raising.
    """
    settings = get_settings()
    limit = settings.max_positions if max_positions is None else max_positions
    orb = settings.default_aspect_orb if aspect_orb is None else aspect_orb
    coordinate_system = resolve_coordinate_system(frame)
    start_utc = to_utc(start)
    end_utc = to_utc(end)

    positions: list[PlanetPosition] = []
    skipped: list[SkippedPosition] = []
    truncated = False

    for instant in _iter_instants(start_utc, end_utc, step_days):
        for body_name in body_names:
            if len(positions) >= limit:
                truncated = True
                break
            try:
                positions.append(compute_position(body_name, instant, coordinate_system))
            except UnknownBodyError as exc:
                logger.warning("Failed to calculate position for %s on %s: %s", body_name, instant.isoformat(), exc)
                skipped.append(SkippedPosition(body=str(body_name), at=instant, reason=str(exc)))
        if truncated:
            break

    if truncated:
        logger.warning(
            "Calculation limit reached (%d). Consider reducing date range or increasing step size.",
            limit,
        )

    aspects = detect_aspects(positions, orb) if include_aspects else []

    logger.info(
        "Generated %d positions and %d aspects (%s, step %s days)",
        len(positions),
        len(aspects),
        coordinate_system.value,
        step_days,
    )

    return EphemerisOutput(
        positions=positions,
        aspects=aspects,
        truncated=truncated,
        max_positions=limit,
        requested_samples=estimate_sample_count(start_utc, end_utc, step_days) * len(body_names),
        skipped=skipped,
    )


async def generate_async(
    body_names: Sequence[str],
    start: datetime | date,
    end: datetime | date,
    step_days: float = 1.0,
    frame: str | CoordinateSystem = CoordinateSystem.GEOCENTRIC,
    include_aspects: bool = True,
    aspect_orb: float | None = None,
    max_positions: int | None = None,
    timeout: float | None = None,
) -> EphemerisOutput:
    """Run ``generate`` in a worker thread under a wall-clock timeout.

    The worker is not interrupted on timeout; its result is discarded.

    Raises:
        GenerationTimeoutError: the run took longer than ``timeout`` seconds.
    """
    limit_seconds = get_settings().generation_timeout_seconds if timeout is None else timeout
    try:
        return await asyncio.wait_for(
            asyncio.to_thread(
                generate,
                body_names,
                start,
                end,
                step_days,
                frame,
                include_aspects,
                aspect_orb,
                max_positions,
            ),
            timeout=limit_seconds,
        )
    except TimeoutError as exc:
        logger.warning("Ephemeris generation timed out after %ss", limit_seconds)
        raise GenerationTimeoutError(f"Ephemeris generation exceeded {limit_seconds}s") from exc
