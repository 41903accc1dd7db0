"""Simplified Keplerian ephemeris, aspect, and validation engine."""

from ephemeris.aspects import detect_aspects
from ephemeris.bodies import COORDINATE_SYSTEMS, ORBITAL_ELEMENTS
from ephemeris.errors import (
    EphemerisError,
    GenerationTimeoutError,
    ReferenceDateError,
    UnknownBodyError,
    UnknownCoordinateSystemError,
)
from ephemeris.generator import generate, generate_async
from ephemeris.phenomena import find_phases, find_retrogrades, find_stations
from ephemeris.positions import compute_position
from ephemeris.reference import REFERENCE_DATA
from ephemeris.timeutils import (
    days_since_epoch,
    format_reference_date,
    julian_date,
    parse_reference_date,
)
from ephemeris.validation import validate

__all__ = [
    "COORDINATE_SYSTEMS",
    "ORBITAL_ELEMENTS",
    "REFERENCE_DATA",
    "EphemerisError",
    "GenerationTimeoutError",
    "ReferenceDateError",
    "UnknownBodyError",
    "UnknownCoordinateSystemError",
    "compute_position",
    "days_since_epoch",
    "detect_aspects",
    "find_phases",
    "find_retrogrades",
    "find_stations",
    "format_reference_date",
    "generate",
    "generate_async",
    "julian_date",
    "parse_reference_date",
    "validate",
]
