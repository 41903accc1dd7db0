"""Aspect detection and orb calculations."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from orrery.schemas.ephemeris import AspectEvent, AspectStrength, AspectType, PlanetPosition

from ephemeris.bodies import (
    ASPECT_INFLUENCES,
    ASPECT_NAMES,
    ASPECTS,
    MODERATE_ORB,
    STRENGTH_MODIFIERS,
    STRONG_ORB,
)

logger = logging.getLogger(__name__)

ASPECT_DURATION_HOURS = 24.0


def angular_distance(lon1: float, lon2: float) -> float:
    """Calculate the shortest angular distance between two longitudes."""
    diff = abs(lon1 - lon2) % 360.0
    if diff > 180.0:
        diff = 360.0 - diff
    return diff


def aspect_strength(orb: float) -> AspectStrength:
    """Classify an aspect by how far it is from exact."""
    if orb == 0:
        return AspectStrength.EXACT
    elif orb <= STRONG_ORB:
        return AspectStrength.STRONG
    elif orb <= MODERATE_ORB:
        return AspectStrength.MODERATE
    return AspectStrength.WEAK


def aspect_influence(aspect_type: AspectType, strength: AspectStrength) -> str:
    return f"{STRENGTH_MODIFIERS[strength]} {ASPECT_INFLUENCES[aspect_type]}"


def _group_by_date(positions: Iterable[PlanetPosition]) -> dict[date, list[PlanetPosition]]:
    by_date: dict[date, list[PlanetPosition]] = {}
    for pos in positions:
        by_date.setdefault(pos.at.date(), []).append(pos)
    return by_date


def detect_aspects(positions: Iterable[PlanetPosition], orb: float = 5.0) -> list[AspectEvent]:
    """Find aspects between bodies observed on the same calendar date.

    Args:
        positions: Positions from one or more dates; only same-date pairs are compared.
        orb: Tolerance in degrees applied to every aspect angle.

    Returns:
        Aspect events sorted by date. Each aspect angle is tested on its own,
        so a wide orb can report one pair under more than one aspect type.
    """
    aspects_found: list[AspectEvent] = []

    for day_positions in _group_by_date(positions).values():
        for i, pos1 in enumerate(day_positions):
            for pos2 in day_positions[i + 1:]:
                if pos1.body == pos2.body:
                    continue
                angle = angular_distance(pos1.longitude, pos2.longitude)

                for aspect_type, aspect_angle in ASPECTS.items():
                    orb_value = abs(angle - aspect_angle)
                    if orb_value > orb:
                        continue

                    strength = aspect_strength(orb_value)
                    aspects_found.append(
                        AspectEvent(
                            body1=pos1.body,
                            body2=pos2.body,
                            type=aspect_type,
                            name=ASPECT_NAMES[aspect_type],
                            angle=angle,
                            orb=orb_value,
                            at=pos1.at,
                            strength=strength,
                            influence=aspect_influence(aspect_type, strength),
                            duration_hours=ASPECT_DURATION_HOURS,
                        )
                    )

    aspects_found.sort(key=lambda a: a.at)
    logger.debug("Detected %d aspects with orb %.2f", len(aspects_found), orb)
    return aspects_found
