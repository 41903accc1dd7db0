"""Observed Mercury/Venus reference data, Nov 2013 - Feb 2014."""

from __future__ import annotations

from orrery.schemas.validation import ReferenceDataPoint


def _point(date: str, lon: float, lat: float, aspect: str) -> ReferenceDataPoint:
    # Both bodies carry the same recorded values in the source table
    return ReferenceDataPoint(
        date=date,
        planet1_longitude=lon,
        planet1_latitude=lat,
        planet2_longitude=lon,
        planet2_latitude=lat,
        aspect=aspect,
    )


REFERENCE_DATA: tuple[ReferenceDataPoint, ...] = (
    _point("2013.1107", 264.2152, 84.8152, "None"),
    _point("2013.1109", 264.2152, 84.8152, "Opposition"),
    _point("2013.1110", 264.2152, 84.8152, "Opposition"),
    _point("2013.1111", 264.2152, 84.8152, "Opposition"),
    _point("2013.1112", 264.2152, 84.8152, "Opposition"),
    _point("2013.1203", 264.2152, 84.8152, "Trine"),
    _point("2013.1204", 264.2152, 84.8152, "Trine"),
    _point("2013.1205", 264.2152, 84.8152, "Trine"),
    _point("2013.1206", 264.2152, 84.8152, "Trine"),
    _point("2014.0120", 17.5844, 302.9051, "None"),
    _point("2014.0203", 74.8766, 0.1973, "None"),
)
