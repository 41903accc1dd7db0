"""Integration test configuration."""

from datetime import UTC, datetime

import pytest
from orrery.config import reset_settings_cache

from ephemeris.generator import generate


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so env overrides apply per test."""
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def mercury_season():
    """Daily geocentric Mercury and Venus over a full Mercury synodic cycle."""
    return generate(
        ["Mercury", "Venus"],
        datetime(2013, 11, 1, tzinfo=UTC),
        datetime(2014, 3, 1, tzinfo=UTC),
        step_days=1,
    )
