"""Accuracy check of calculated positions against reference data."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from orrery.config import get_settings
from orrery.schemas.ephemeris import Body, PlanetPosition
from orrery.schemas.validation import Discrepancy, ReferenceDataPoint, ValidationResult

from ephemeris.reference import REFERENCE_DATA
from ephemeris.timeutils import parse_reference_date

logger = logging.getLogger(__name__)

VALIDATED_BODY = Body.MERCURY
EMPTY_INPUT_MESSAGE = "No calculated positions available for validation"


def _closest_position(
    positions: Sequence[PlanetPosition],
    reference: ReferenceDataPoint,
    window_seconds: float,
) -> PlanetPosition | None:
    """Closest position of the validated body strictly inside the time window."""
    ref_at = parse_reference_date(reference.date)
    closest = None
    min_diff = window_seconds
    for pos in positions:
        if pos.body != VALIDATED_BODY.value:
            continue
        diff = abs((pos.at - ref_at).total_seconds())
        if diff < min_diff:
            min_diff = diff
            closest = pos
    return closest


def _compare(
    reference: ReferenceDataPoint,
    quantity: str,
    calculated: float,
    expected: float,
    tolerance: float,
) -> Discrepancy:
    difference = abs(calculated - expected)
    return Discrepancy(
        date=reference.date,
        body=VALIDATED_BODY.value,
        quantity=quantity,
        calculated=calculated,
        reference=expected,
        difference=difference,
        within_tolerance=difference <= tolerance,
    )


def _summary(accuracy: float, comparisons: int, within: int, tolerance: float, limit: int | None) -> str:
    lines = [
        f"Validation Results: {accuracy:.1f}% accuracy",
        f"Total comparisons: {comparisons}",
        f"Within tolerance ({tolerance}°): {within}",
        f"Outside tolerance: {comparisons - within}",
    ]
    if limit is not None:
        lines.append(f"Note: Limited to {limit} comparisons for performance")
    return "\n".join(lines)


def validate(
    positions: Sequence[PlanetPosition],
    reference_data: Sequence[ReferenceDataPoint] = REFERENCE_DATA,
    tolerance: float | None = None,
) -> ValidationResult:
    """Compare calculated Mercury positions with reference observations.

    Each reference point is matched to the nearest Mercury position less than
    the configured window (24h by default) away; points with no match are
    skipped. Longitude and latitude each produce one discrepancy record.
    Empty input is reported on the result (``input_empty``), never raised.
    """
    settings = get_settings()
    tol = settings.validation_tolerance if tolerance is None else tolerance

    if not positions:
        logger.info(EMPTY_INPUT_MESSAGE)
        return ValidationResult(
            accuracy=0.0,
            summary=EMPTY_INPUT_MESSAGE,
            tolerance=tol,
            input_empty=True,
        )

    max_points = settings.validation_max_reference_points
    limited = list(reference_data[:max_points])
    window_seconds = settings.validation_match_window_hours * 3600.0

    discrepancies: list[Discrepancy] = []
    for reference in limited:
        match = _closest_position(positions, reference, window_seconds)
        if match is None:
            continue
        discrepancies.append(_compare(reference, "longitude", match.longitude, reference.planet1_longitude, tol))
        discrepancies.append(_compare(reference, "latitude", match.latitude, reference.planet1_latitude, tol))

    comparisons = len(discrepancies)
    within = sum(1 for d in discrepancies if d.within_tolerance)
    accuracy = within / comparisons * 100.0 if comparisons else 0.0
    reference_limited = len(limited) < len(reference_data)

    logger.info(
        "Validated %d reference points: %d/%d comparisons within %.2f°",
        len(limited),
        within,
        comparisons,
        tol,
    )

    return ValidationResult(
        accuracy=accuracy,
        discrepancies=discrepancies,
        summary=_summary(accuracy, comparisons, within, tol, max_points if reference_limited else None),
        tolerance=tol,
        comparisons=comparisons,
        within_tolerance=within,
        reference_points_used=len(limited),
        reference_limited=reference_limited,
    )
