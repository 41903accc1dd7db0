"""Pydantic schemas for ephemeris data."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Body(StrEnum):
    """Bodies carried by the orbital element table."""

    MERCURY = "Mercury"
    VENUS = "Venus"
    EARTH = "Earth"
    MARS = "Mars"
    JUPITER = "Jupiter"
    SATURN = "Saturn"
    URANUS = "Uranus"
    NEPTUNE = "Neptune"
    PLUTO = "Pluto"
    MOON = "Moon"


class CoordinateSystem(StrEnum):
    GEOCENTRIC = "geocentric"
    HELIOCENTRIC = "heliocentric"
    BARYCENTRIC = "barycentric"
    TOPOCENTRIC = "topocentric"


class AspectType(StrEnum):
    CONJUNCTION = "conjunction"
    SEXTILE = "sextile"
    SQUARE = "square"
    TRINE = "trine"
    OPPOSITION = "opposition"
    QUINCUNX = "quincunx"
    SEMI_SEXTILE = "semi-sextile"
    SEMI_SQUARE = "semi-square"
    SESQUIQUADRATE = "sesquiquadrate"


class AspectStrength(StrEnum):
    EXACT = "exact"
    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"


class PhaseBand(StrEnum):
    NEW = "New"
    CRESCENT = "Crescent"
    QUARTER = "Quarter"
    GIBBOUS = "Gibbous"
    FULL = "Full"


class StationType(StrEnum):
    DIRECT = "direct"
    RETROGRADE = "retrograde"


class OrbitalElements(BaseModel):
    """Mean orbital elements and descriptive data for one body (J2000.0)."""

    model_config = ConfigDict(frozen=True)

    name: Body
    symbol: str
    color: str
    mean_distance_au: float = Field(gt=0.0)
    period_years: float = Field(gt=0.0)
    inclination_deg: float
    eccentricity: float = Field(ge=0.0, lt=1.0)
    perihelion_longitude_deg: float
    mean_longitude_deg: float
    mass_earths: float
    diameter_km: float
    albedo: float
    base_magnitude: float
    moons: int | None = None
    discovery_year: int | None = None


class CoordinateSystemInfo(BaseModel):
    """Read-only description of a reference frame."""

    model_config = ConfigDict(frozen=True)

    id: CoordinateSystem
    name: str
    description: str
    use_case: str
    accuracy: str


class PlanetPosition(BaseModel):
    """Position of a body at one instant."""

    model_config = ConfigDict(frozen=True)

    body: str
    at: datetime
    julian_date: float
    longitude: float = Field(ge=0.0, lt=360.0)
    latitude: float
    distance_au: float = Field(gt=0.0)
    right_ascension: float = Field(ge=0.0, lt=360.0)  # degrees
    declination: float
    magnitude: float
    phase_angle: float
    elongation: float
    coordinate_system: CoordinateSystem
    accuracy: str = "medium"  # 'high', 'medium', 'low'
    sign: str
    degree: float


class AspectEvent(BaseModel):
    """An aspect between two bodies on one date."""

    model_config = ConfigDict(frozen=True)

    body1: str
    body2: str
    type: AspectType
    name: str
    angle: float
    orb: float = Field(ge=0.0)
    at: datetime
    strength: AspectStrength
    influence: str
    duration_hours: float = 24.0


class RetrogradePeriod(BaseModel):
    """A span of decreasing longitude."""

    model_config = ConfigDict(frozen=True)

    body: str
    start: datetime
    end: datetime | None = None
    duration_days: int
    ongoing: bool = False


class Station(BaseModel):
    """A local extremum of longitude."""

    model_config = ConfigDict(frozen=True)

    body: str
    at: datetime
    type: StationType
    longitude: float


class PhaseObservation(BaseModel):
    """Illumination phase of an inner planet."""

    model_config = ConfigDict(frozen=True)

    body: str
    at: datetime
    phase: PhaseBand
    phase_angle: float
    illumination: float = Field(ge=0.0, le=1.0)


class SkippedPosition(BaseModel):
    """A body/instant the generator could not compute."""

    model_config = ConfigDict(frozen=True)

    body: str
    at: datetime
    reason: str


class EphemerisOutput(BaseModel):
    """Positions and aspects for a date range."""

    model_config = ConfigDict(frozen=True)

    positions: list[PlanetPosition] = Field(default_factory=list)
    aspects: list[AspectEvent] = Field(default_factory=list)
    truncated: bool = False
    max_positions: int
    requested_samples: int = 0
    skipped: list[SkippedPosition] = Field(default_factory=list)
