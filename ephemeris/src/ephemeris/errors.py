"""Exceptions raised by the ephemeris engine."""

from __future__ import annotations


class EphemerisError(Exception):
    """Base class for engine errors."""


class UnknownBodyError(EphemerisError, ValueError):
    """Requested body is not in the orbital element table."""

    def __init__(self, body_name: str) -> None:
        super().__init__(f"Planet {body_name} not found")
        self.body_name = body_name


class UnknownCoordinateSystemError(EphemerisError, ValueError):
    """Requested reference frame is not a known coordinate system."""

    def __init__(self, frame: str) -> None:
        super().__init__(f"Unknown coordinate system: {frame}")
        self.frame = frame


class ReferenceDateError(EphemerisError, ValueError):
    """Reference date key is not in YYYY.MMDD form."""


class GenerationTimeoutError(EphemerisError, TimeoutError):
    """Ephemeris generation exceeded the caller's wall-clock limit."""
