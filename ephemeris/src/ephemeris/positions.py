"""Position engine: simplified Keplerian positions from mean orbital elements.

This is a low-precision model. Mean anomaly advances linearly from the J2000.0
mean longitude, Kepler's equation gets a bounded number of Newton corrections,
and the geocentric view is a coarse 180 degree shift with a law-of-cosines
distance. Every result is tagged ``accuracy="medium"``.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime

from orrery.schemas.ephemeris import Body, CoordinateSystem, OrbitalElements, PlanetPosition

from ephemeris.bodies import (
    DAYS_PER_YEAR,
    EARTH_OBLIQUITY,
    ORBITAL_ELEMENTS,
    get_elements,
    longitude_to_sign,
    normalize_degrees,
    resolve_coordinate_system,
)
from ephemeris.timeutils import days_since_epoch, julian_date, to_utc

logger = logging.getLogger(__name__)

KEPLER_MAX_ITERATIONS = 5
KEPLER_TOLERANCE = 1e-4
PHASE_MAGNITUDE_COEFFICIENT = 0.1


def mean_anomaly(elements: OrbitalElements, days: float) -> float:
    """Mean anomaly in degrees, ``days`` after J2000.0."""
    return normalize_degrees(
        elements.mean_longitude_deg
        + elements.perihelion_longitude_deg
        + 360.0 * days / (elements.period_years * DAYS_PER_YEAR)
    )


def solve_kepler(mean_anomaly_deg: float, eccentricity: float) -> float:
    """Bounded Newton iteration on Kepler's equation, in degrees.

    Stops when the correction drops below ``KEPLER_TOLERANCE`` or after
    ``KEPLER_MAX_ITERATIONS`` rounds, whichever comes first; the estimate at
    that point is returned as is.
    """
    anomaly = mean_anomaly_deg
    for _ in range(KEPLER_MAX_ITERATIONS):
        anomaly_rad = math.radians(anomaly)
        delta = (mean_anomaly_deg - anomaly + eccentricity * math.sin(anomaly_rad)) / (
            1.0 - eccentricity * math.cos(anomaly_rad)
        )
        anomaly += delta
        if abs(delta) < KEPLER_TOLERANCE:
            break
    return anomaly


def heliocentric_ecliptic(elements: OrbitalElements, days: float) -> tuple[float, float, float]:
    """Heliocentric (longitude, latitude, radius) for a body."""
    anomaly = solve_kepler(mean_anomaly(elements, days), elements.eccentricity)
    radius = elements.mean_distance_au * (1.0 - elements.eccentricity * math.cos(math.radians(anomaly)))
    longitude = normalize_degrees(elements.perihelion_longitude_deg + anomaly)
    latitude = elements.inclination_deg * math.sin(
        math.radians(longitude - elements.perihelion_longitude_deg)
    )
    return longitude, latitude, radius


def earth_longitude(days: float) -> float:
    """Earth's heliocentric longitude from its mean elements alone.

    Kept separate from ``compute_position`` so the geocentric correction never
    recurses into itself.
    """
    return mean_anomaly(ORBITAL_ELEMENTS[Body.EARTH], days)


def separation(lon1: float, lon2: float) -> float:
    """Angular separation wrapped to [0, 180]."""
    diff = abs(lon1 - lon2) % 360.0
    return min(diff, 360.0 - diff)


def apparent_magnitude(elements: OrbitalElements, distance_au: float, phase_angle: float) -> float:
    phase_term = PHASE_MAGNITUDE_COEFFICIENT * phase_angle / 180.0
    return elements.base_magnitude + 5.0 * math.log10(distance_au) + phase_term


def ecliptic_to_equatorial(longitude: float, latitude: float) -> tuple[float, float]:
    """Convert ecliptic (lon, lat) to (right ascension, declination), all degrees."""
    obliquity = math.radians(EARTH_OBLIQUITY)
    lon = math.radians(longitude)
    lat = math.radians(latitude)

    sin_dec = math.sin(lat) * math.cos(obliquity) + math.cos(lat) * math.sin(obliquity) * math.sin(lon)
    declination = math.degrees(math.asin(max(-1.0, min(1.0, sin_dec))))
    right_ascension = math.degrees(
        math.atan2(
            math.sin(lon) * math.cos(obliquity) - math.tan(lat) * math.sin(obliquity),
            math.cos(lon),
        )
    )
    return normalize_degrees(right_ascension), declination


def compute_position(
    body_name: str | Body,
    instant: datetime | date,
    frame: str | CoordinateSystem = CoordinateSystem.GEOCENTRIC,
) -> PlanetPosition:
    """Calculate the position of one body at one instant.

    Raises:
        UnknownBodyError: body is not in the orbital element table.
        UnknownCoordinateSystemError: frame is not a known coordinate system.
    """
    elements = get_elements(body_name)
    coordinate_system = resolve_coordinate_system(frame)
    at = to_utc(instant)
    days = days_since_epoch(at)

    longitude, latitude, radius = heliocentric_ecliptic(elements, days)
    earth_lon = earth_longitude(days)

    final_longitude = longitude
    final_distance = radius
    if coordinate_system is CoordinateSystem.GEOCENTRIC and elements.name is not Body.EARTH:
        earth_radius = ORBITAL_ELEMENTS[Body.EARTH].mean_distance_au
        cos_angle = math.cos(math.radians(longitude - earth_lon))
        final_distance = math.sqrt(
            radius * radius + earth_radius * earth_radius - 2.0 * radius * earth_radius * cos_angle
        )
        final_longitude = normalize_degrees(longitude + 180.0)
    # barycentric and topocentric fall back to heliocentric values

    phase_angle = separation(longitude, earth_lon)
    elongation = separation(longitude, earth_lon)
    magnitude = apparent_magnitude(elements, radius, phase_angle)
    right_ascension, declination = ecliptic_to_equatorial(final_longitude, latitude)
    sign, degree = longitude_to_sign(final_longitude)

    return PlanetPosition(
        body=elements.name.value,
        at=at,
        julian_date=julian_date(at),
        longitude=final_longitude,
        latitude=latitude,
        distance_au=final_distance,
        right_ascension=right_ascension,
        declination=declination,
        magnitude=magnitude,
        phase_angle=phase_angle,
        elongation=elongation,
        coordinate_system=coordinate_system,
        accuracy="medium",
        sign=sign,
        degree=degree,
    )
