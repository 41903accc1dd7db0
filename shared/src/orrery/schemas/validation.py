"""Pydantic schemas for reference validation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ReferenceDataPoint(BaseModel):
    """One row of observed reference data (YYYY.MMDD date key)."""

    model_config = ConfigDict(frozen=True)

    date: str
    planet1_longitude: float
    planet1_latitude: float
    planet2_longitude: float
    planet2_latitude: float
    aspect: str


class Discrepancy(BaseModel):
    """Calculated vs reference value for one quantity."""

    model_config = ConfigDict(frozen=True)

    date: str
    body: str
    quantity: str  # 'longitude' or 'latitude'
    calculated: float
    reference: float
    difference: float = Field(ge=0.0)
    within_tolerance: bool


class ValidationResult(BaseModel):
    """Aggregate accuracy of calculated positions against reference data."""

    model_config = ConfigDict(frozen=True)

    accuracy: float = Field(ge=0.0, le=100.0)
    discrepancies: list[Discrepancy] = Field(default_factory=list)
    summary: str
    tolerance: float
    comparisons: int = 0
    within_tolerance: int = 0
    reference_points_used: int = 0
    reference_limited: bool = False
    input_empty: bool = False
