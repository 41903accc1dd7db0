"""Retrograde periods, stations, and inner-planet phases from a position series."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from datetime import datetime

from orrery.schemas.ephemeris import (
    PhaseBand,
    PhaseObservation,
    PlanetPosition,
    RetrogradePeriod,
    Station,
    StationType,
)

from ephemeris.bodies import PHASE_BANDS, PHASE_BODIES

logger = logging.getLogger(__name__)


def _series_by_body(positions: Iterable[PlanetPosition]) -> dict[str, list[PlanetPosition]]:
    """Split positions per body (first-seen order), each sorted by instant."""
    series: dict[str, list[PlanetPosition]] = {}
    for pos in positions:
        series.setdefault(pos.body, []).append(pos)
    for body_positions in series.values():
        body_positions.sort(key=lambda p: p.at)
    return series


def _duration_days(start: datetime, end: datetime) -> int:
    return math.ceil((end - start).total_seconds() / 86400.0)


def find_retrogrades(
    positions: Iterable[PlanetPosition],
    include_ongoing: bool = False,
) -> list[RetrogradePeriod]:
    """Find spans where longitude decreases from one sample to the next.

    A period starts at the first sample whose longitude is below its
    predecessor and ends at the next sample whose longitude is above its
    predecessor. A period still open at the end of the series is dropped
    unless ``include_ongoing`` is set, in which case it is reported with
    ``end=None`` and ``ongoing=True``.

    Longitudes are compared raw, without unwrapping. A series crossing 360
    back to 0 registers a one-sample period at the crossing. The geocentric
    shift never reverses apparent motion, so in generated series these
    crossings are the only periods found.
    """
    retrogrades: list[RetrogradePeriod] = []

    for body, series in _series_by_body(positions).items():
        start: datetime | None = None
        for prev, curr in zip(series, series[1:]):
            if curr.longitude < prev.longitude and start is None:
                start = curr.at
            elif curr.longitude > prev.longitude and start is not None:
                retrogrades.append(
                    RetrogradePeriod(
                        body=body,
                        start=start,
                        end=curr.at,
                        duration_days=_duration_days(start, curr.at),
                    )
                )
                start = None

        if start is not None and include_ongoing:
            retrogrades.append(
                RetrogradePeriod(
                    body=body,
                    start=start,
                    end=None,
                    duration_days=_duration_days(start, series[-1].at),
                    ongoing=True,
                )
            )

    return retrogrades


def find_stations(positions: Iterable[PlanetPosition]) -> list[Station]:
    """Find local extrema of longitude over consecutive triples.

    As with ``find_retrogrades``, a 360 to 0 crossing shows up as a peak
    before the wrap and a trough right after it.
    """
    stations: list[Station] = []

    for body, series in _series_by_body(positions).items():
        for prev, curr, nxt in zip(series, series[1:], series[2:]):
            is_peak = curr.longitude > prev.longitude and curr.longitude > nxt.longitude
            is_trough = curr.longitude < prev.longitude and curr.longitude < nxt.longitude
            if not (is_peak or is_trough):
                continue
            station_type = StationType.DIRECT if curr.longitude > prev.longitude else StationType.RETROGRADE
            stations.append(
                Station(body=body, at=curr.at, type=station_type, longitude=curr.longitude)
            )

    return stations


def phase_band(phase_angle: float) -> tuple[PhaseBand, float] | None:
    """Map a phase angle to its named band and illumination fraction."""
    for upper, band, illumination in PHASE_BANDS:
        if phase_angle <= upper:
            return band, illumination
    return None


def find_phases(positions: Iterable[PlanetPosition]) -> list[PhaseObservation]:
    """Classify Mercury and Venus positions into illumination phases."""
    positions = list(positions)
    phases: list[PhaseObservation] = []

    for body in PHASE_BODIES:
        for pos in positions:
            if pos.body != body.value:
                continue
            banded = phase_band(pos.phase_angle)
            if banded is None:
                logger.debug("Phase angle %.2f out of range for %s", pos.phase_angle, pos.body)
                continue
            band, illumination = banded
            phases.append(
                PhaseObservation(
                    body=pos.body,
                    at=pos.at,
                    phase=band,
                    phase_angle=pos.phase_angle,
                    illumination=illumination,
                )
            )

    return phases


def is_retrograde_at(periods: Iterable[RetrogradePeriod], body: str, instant: datetime) -> bool:
    """Whether ``instant`` falls inside one of ``body``'s retrograde periods."""
    for period in periods:
        if period.body != body or period.start > instant:
            continue
        if period.end is None or period.end >= instant:
            return True
    return False
