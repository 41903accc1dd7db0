"""Orbital element table, aspect definitions, and sign data."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from orrery.schemas.ephemeris import (
    AspectStrength,
    AspectType,
    Body,
    CoordinateSystem,
    CoordinateSystemInfo,
    OrbitalElements,
    PhaseBand,
)

from ephemeris.errors import UnknownBodyError, UnknownCoordinateSystemError

J2000_EPOCH = 2451545.0  # JD of 2000-01-01 12:00 TT
EARTH_OBLIQUITY = 23.4393  # degrees
DAYS_PER_YEAR = 365.25

# Mean elements at J2000.0
ORBITAL_ELEMENTS: Mapping[Body, OrbitalElements] = MappingProxyType({
    Body.MERCURY: OrbitalElements(
        name=Body.MERCURY, symbol="☿", color="#FFA500",
        mean_distance_au=0.387098, period_years=0.240846, inclination_deg=7.00487,
        eccentricity=0.205630, perihelion_longitude_deg=77.45645,
        mean_longitude_deg=252.25084, mass_earths=0.055, diameter_km=4879,
        albedo=0.119, base_magnitude=-0.42,
    ),
    Body.VENUS: OrbitalElements(
        name=Body.VENUS, symbol="♀", color="#FFC649",
        mean_distance_au=0.723332, period_years=0.615197, inclination_deg=3.39471,
        eccentricity=0.006773, perihelion_longitude_deg=131.53298,
        mean_longitude_deg=181.97973, mass_earths=0.815, diameter_km=12104,
        albedo=0.65, base_magnitude=-4.4,
    ),
    Body.EARTH: OrbitalElements(
        name=Body.EARTH, symbol="♁", color="#6B93D6",
        mean_distance_au=1.0, period_years=1.0, inclination_deg=0.0,
        eccentricity=0.016709, perihelion_longitude_deg=102.94719,
        mean_longitude_deg=100.46435, mass_earths=1.0, diameter_km=12742,
        albedo=0.367, base_magnitude=-3.86, moons=1,
    ),
    Body.MARS: OrbitalElements(
        name=Body.MARS, symbol="♂", color="#CD5C5C",
        mean_distance_au=1.523688, period_years=1.880848, inclination_deg=1.85061,
        eccentricity=0.093405, perihelion_longitude_deg=336.04084,
        mean_longitude_deg=355.45332, mass_earths=0.107, diameter_km=6779,
        albedo=0.15, base_magnitude=-2.91, moons=2,
    ),
    Body.JUPITER: OrbitalElements(
        name=Body.JUPITER, symbol="♃", color="#D8CA9D",
        mean_distance_au=5.202561, period_years=11.862615, inclination_deg=1.30530,
        eccentricity=0.048498, perihelion_longitude_deg=14.72813,
        mean_longitude_deg=34.40438, mass_earths=317.8, diameter_km=139822,
        albedo=0.52, base_magnitude=-2.94, moons=95,
    ),
    Body.SATURN: OrbitalElements(
        name=Body.SATURN, symbol="♄", color="#FAD5A5",
        mean_distance_au=9.554747, period_years=29.447498, inclination_deg=2.48446,
        eccentricity=0.054509, perihelion_longitude_deg=92.43194,
        mean_longitude_deg=49.94432, mass_earths=95.2, diameter_km=116464,
        albedo=0.47, base_magnitude=-0.55, moons=146,
    ),
    Body.URANUS: OrbitalElements(
        name=Body.URANUS, symbol="♅", color="#4FD0E7",
        mean_distance_au=19.218140, period_years=84.016846, inclination_deg=0.77446,
        eccentricity=0.047318, perihelion_longitude_deg=170.96424,
        mean_longitude_deg=313.23218, mass_earths=14.5, diameter_km=50724,
        albedo=0.51, base_magnitude=5.38, moons=27,
    ),
    Body.NEPTUNE: OrbitalElements(
        name=Body.NEPTUNE, symbol="♆", color="#4B70DD",
        mean_distance_au=30.110387, period_years=164.79132, inclination_deg=1.77004,
        eccentricity=0.008606, perihelion_longitude_deg=44.97135,
        mean_longitude_deg=304.88003, mass_earths=17.1, diameter_km=49244,
        albedo=0.41, base_magnitude=7.67, moons=16,
    ),
    Body.PLUTO: OrbitalElements(
        name=Body.PLUTO, symbol="♇", color="#A0522D",
        mean_distance_au=39.481686, period_years=248.0208, inclination_deg=17.14175,
        eccentricity=0.248808, perihelion_longitude_deg=224.06676,
        mean_longitude_deg=238.92881, mass_earths=0.0022, diameter_km=2376,
        albedo=0.52, base_magnitude=13.65, moons=5, discovery_year=1930,
    ),
    Body.MOON: OrbitalElements(
        name=Body.MOON, symbol="☽", color="#E6E6FA",
        mean_distance_au=0.00257, period_years=0.0748, inclination_deg=5.145,
        eccentricity=0.0549, perihelion_longitude_deg=318.15,
        mean_longitude_deg=125.08, mass_earths=0.0123, diameter_km=3474,
        albedo=0.12, base_magnitude=-12.74,
    ),
})

ALL_BODIES = list(ORBITAL_ELEMENTS.keys())

# Bodies whose illumination phase is reported
PHASE_BODIES = (Body.MERCURY, Body.VENUS)

COORDINATE_SYSTEMS: Mapping[CoordinateSystem, CoordinateSystemInfo] = MappingProxyType({
    CoordinateSystem.GEOCENTRIC: CoordinateSystemInfo(
        id=CoordinateSystem.GEOCENTRIC,
        name="Geocentric",
        description="Earth-centered coordinates relative to ecliptic",
        use_case="Earth-based observations, astrology, navigation",
        accuracy="High precision for terrestrial applications",
    ),
    CoordinateSystem.HELIOCENTRIC: CoordinateSystemInfo(
        id=CoordinateSystem.HELIOCENTRIC,
        name="Heliocentric",
        description="Sun-centered coordinates relative to ecliptic",
        use_case="Solar system dynamics, orbital mechanics",
        accuracy="Highest precision for solar system modeling",
    ),
    CoordinateSystem.BARYCENTRIC: CoordinateSystemInfo(
        id=CoordinateSystem.BARYCENTRIC,
        name="Barycentric",
        description="Solar system barycenter coordinates",
        use_case="Precise astronomical calculations, JPL ephemeris",
        accuracy="Highest precision for advanced astronomy",
    ),
    CoordinateSystem.TOPOCENTRIC: CoordinateSystemInfo(
        id=CoordinateSystem.TOPOCENTRIC,
        name="Topocentric",
        description="Observer location-based coordinates",
        use_case="Local observations, telescope pointing",
        accuracy="High precision for specific locations",
    ),
})

# Zodiac signs in order
SIGNS = [
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
]

# Aspect definitions: type -> exact angle, in detection order
ASPECTS: Mapping[AspectType, float] = MappingProxyType({
    AspectType.CONJUNCTION: 0.0,
    AspectType.SEXTILE: 60.0,
    AspectType.SQUARE: 90.0,
    AspectType.TRINE: 120.0,
    AspectType.OPPOSITION: 180.0,
    AspectType.QUINCUNX: 150.0,
    AspectType.SEMI_SEXTILE: 30.0,
    AspectType.SEMI_SQUARE: 45.0,
    AspectType.SESQUIQUADRATE: 135.0,
})

ASPECT_NAMES: Mapping[AspectType, str] = MappingProxyType({
    AspectType.CONJUNCTION: "Conjunction",
    AspectType.SEXTILE: "Sextile",
    AspectType.SQUARE: "Square",
    AspectType.TRINE: "Trine",
    AspectType.OPPOSITION: "Opposition",
    AspectType.QUINCUNX: "Quincunx",
    AspectType.SEMI_SEXTILE: "Semi-Sextile",
    AspectType.SEMI_SQUARE: "Semi-Square",
    AspectType.SESQUIQUADRATE: "Sesquiquadrate",
})

ASPECT_INFLUENCES: Mapping[AspectType, str] = MappingProxyType({
    AspectType.CONJUNCTION: "Unification, new beginnings, powerful energy",
    AspectType.SEXTILE: "Harmony, opportunity, positive flow",
    AspectType.SQUARE: "Challenge, tension, growth through conflict",
    AspectType.TRINE: "Ease, harmony, natural talent",
    AspectType.OPPOSITION: "Awareness, balance, relationship dynamics",
    AspectType.QUINCUNX: "Adjustment, fine-tuning, subtle influence",
    AspectType.SEMI_SEXTILE: "Minor harmony, gentle support",
    AspectType.SEMI_SQUARE: "Minor tension, slight friction",
    AspectType.SESQUIQUADRATE: "Minor challenge, subtle adjustment",
})

STRENGTH_MODIFIERS: Mapping[AspectStrength, str] = MappingProxyType({
    AspectStrength.EXACT: "Very strong",
    AspectStrength.STRONG: "Strong",
    AspectStrength.MODERATE: "Moderate",
    AspectStrength.WEAK: "Weak",
})

# Orb cutoffs (inclusive upper bounds); anything wider is weak
STRONG_ORB = 1.0
MODERATE_ORB = 3.0

# Phase bands: inclusive upper bound of phase angle -> (band, illumination)
PHASE_BANDS: tuple[tuple[float, PhaseBand, float], ...] = (
    (10.0, PhaseBand.NEW, 0.0),
    (80.0, PhaseBand.CRESCENT, 0.25),
    (100.0, PhaseBand.QUARTER, 0.5),
    (170.0, PhaseBand.GIBBOUS, 0.75),
    (180.0, PhaseBand.FULL, 1.0),
)


def resolve_body(body_name: str | Body) -> Body:
    """Map a body name (case-insensitive) to its table key."""
    if isinstance(body_name, Body):
        return body_name
    key = str(body_name).strip().lower()
    for body in Body:
        if body.value.lower() == key:
            return body
    raise UnknownBodyError(str(body_name))


def get_elements(body_name: str | Body) -> OrbitalElements:
    """Return the orbital elements for a body or raise UnknownBodyError."""
    return ORBITAL_ELEMENTS[resolve_body(body_name)]


def resolve_coordinate_system(frame: str | CoordinateSystem) -> CoordinateSystem:
    if isinstance(frame, CoordinateSystem):
        return frame
    try:
        return CoordinateSystem(str(frame).strip().lower())
    except ValueError:
        raise UnknownCoordinateSystemError(str(frame)) from None


def normalize_degrees(angle: float) -> float:
    """Reduce an angle to [0, 360)."""
    angle = angle % 360.0
    # float modulo can round up to exactly 360.0 for tiny negative inputs
    if angle >= 360.0:
        angle = 0.0
    return angle


def longitude_to_sign(longitude: float) -> tuple[str, float]:
    """Convert ecliptic longitude to sign and degree within sign."""
    longitude = normalize_degrees(longitude)
    sign_index = int(longitude / 30.0)
    degree = longitude - (sign_index * 30.0)
    return SIGNS[sign_index], degree
