"""Julian dates and the compact YYYY.MMDD reference date format."""

from __future__ import annotations

import math
import re
from datetime import UTC, date, datetime, timedelta

from ephemeris.bodies import J2000_EPOCH
from ephemeris.errors import ReferenceDateError

_REFERENCE_DATE_RE = re.compile(r"^(\d{4})\.(\d{2})(\d{2})$")


def to_utc(instant: datetime | date) -> datetime:
    """Return an aware UTC datetime. Naive datetimes are taken as UTC."""
    if not isinstance(instant, datetime):
        return datetime(instant.year, instant.month, instant.day, tzinfo=UTC)
    if instant.tzinfo is None:
        return instant.replace(tzinfo=UTC)
    return instant.astimezone(UTC)


def julian_date(instant: datetime | date) -> float:
    """Convert a calendar instant to a Julian Date (proleptic Gregorian)."""
    utc = to_utc(instant)
    y = utc.year
    m = utc.month
    d = utc.day + (
        utc.hour / 24.0
        + utc.minute / 1440.0
        + (utc.second + utc.microsecond / 1_000_000.0) / 86400.0
    )
    if m <= 2:
        y -= 1
        m += 12
    a_term = math.floor(y / 100)
    b_term = 2 - a_term + math.floor(a_term / 4)
    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + d + b_term - 1524.5


def days_since_epoch(instant: datetime | date) -> float:
    """Days elapsed since J2000.0 (JD 2451545.0)."""
    return julian_date(instant) - J2000_EPOCH


def parse_reference_date(value: str) -> datetime:
    """Parse a ``YYYY.MMDD`` date key to midnight UTC."""
    match = _REFERENCE_DATE_RE.match(value.strip())
    if not match:
        raise ReferenceDateError(f"Invalid reference date '{value}'. Expected YYYY.MMDD.")
    year, month, day = (int(part) for part in match.groups())
    try:
        return datetime(year, month, day, tzinfo=UTC)
    except ValueError as exc:
        raise ReferenceDateError(f"Invalid reference date '{value}': {exc}") from exc


def format_reference_date(instant: datetime | date) -> str:
    """Format an instant as ``YYYY.MMDD``; time of day is dropped."""
    utc = to_utc(instant)
    return f"{utc.year:04d}.{utc.month:02d}{utc.day:02d}"


def step_timedelta(step_days: float) -> timedelta | None:
    """Step as a ``timedelta``, or None when it cannot advance the clock.

    Steps beyond what ``timedelta`` can hold are clamped to ``timedelta.max``,
    which already exceeds any representable date range.
    """
    if not math.isfinite(step_days) or step_days <= 0:
        return None
    try:
        step = timedelta(days=step_days)
    except OverflowError:
        return timedelta.max
    return step if step > timedelta(0) else None


def estimate_sample_count(start: datetime | date, end: datetime | date, step_days: float) -> int:
    """Number of instants a range yields at ``step_days``, 0 if the range is empty."""
    step = step_timedelta(step_days)
    if step is None:
        return 0
    span = to_utc(end) - to_utc(start)
    if span < timedelta(0):
        return 0
    return span // step + 1
