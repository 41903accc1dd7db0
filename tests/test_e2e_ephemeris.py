"""End-to-end: generate -> aspects -> phenomena -> validate -> summary."""

from datetime import UTC, datetime

import pytest
from orrery.config import reset_settings_cache
from orrery.schemas.ephemeris import PhaseBand

from ephemeris.generator import generate, generate_async
from ephemeris.phenomena import find_phases, find_retrogrades, find_stations
from ephemeris.summary import summarize
from ephemeris.validation import validate


def test_positions_cover_range(mercury_season):
    # 2013-11-01 .. 2014-03-01 inclusive is 121 days
    assert len(mercury_season.positions) == 242
    assert mercury_season.requested_samples == 242
    assert mercury_season.truncated is False
    assert all(p.accuracy == "medium" for p in mercury_season.positions)
    assert all(0.0 <= p.longitude < 360.0 for p in mercury_season.positions)


def test_aspects_are_within_default_orb(mercury_season):
    for aspect in mercury_season.aspects:
        assert aspect.orb <= 5.0
        assert {aspect.body1, aspect.body2} == {"Mercury", "Venus"}
    assert [a.at for a in mercury_season.aspects] == sorted(a.at for a in mercury_season.aspects)


def test_every_inner_planet_position_has_a_phase(mercury_season):
    phases = find_phases(mercury_season.positions)
    assert len(phases) == len(mercury_season.positions)
    bodies = [p.body for p in phases]
    assert bodies == ["Mercury"] * 121 + ["Venus"] * 121
    assert {p.phase for p in phases} <= set(PhaseBand)


def test_retrogrades_and_stations_are_well_formed(mercury_season):
    for period in find_retrogrades(mercury_season.positions):
        assert period.end > period.start
        assert period.duration_days >= 1
    for station in find_stations(mercury_season.positions):
        assert datetime(2013, 11, 1, tzinfo=UTC) < station.at < datetime(2014, 3, 1, tzinfo=UTC)


def test_validation_against_bundled_reference(mercury_season):
    result = validate(mercury_season.positions)
    assert result.input_empty is False
    assert result.reference_points_used == 11
    assert result.reference_limited is False
    assert result.comparisons == 22
    assert len(result.discrepancies) == 22
    assert 0.0 <= result.accuracy <= 100.0
    assert "Total comparisons: 22" in result.summary


def test_validation_reference_cap(monkeypatch, mercury_season):
    monkeypatch.setenv("ORRERY_VALIDATION_MAX_REFERENCE_POINTS", "3")
    reset_settings_cache()
    result = validate(mercury_season.positions)
    assert result.reference_points_used == 3
    assert result.reference_limited is True
    assert result.comparisons == 6
    assert result.summary.endswith("Note: Limited to 3 comparisons for performance")


def test_summary(mercury_season):
    view = summarize(mercury_season, now=datetime(2013, 10, 1, tzinfo=UTC))
    assert view["metrics"]["active_bodies"] == 2
    assert view["metrics"]["total_aspects"] == len(mercury_season.aspects)
    assert [c["body"] for c in view["current"]] == ["Mercury", "Venus"]


@pytest.mark.asyncio
async def test_async_generation_matches(mercury_season):
    result = await generate_async(
        ["Mercury", "Venus"],
        datetime(2013, 11, 1, tzinfo=UTC),
        datetime(2014, 3, 1, tzinfo=UTC),
        timeout=30,
    )
    assert result == mercury_season


def test_heliocentric_run_is_independent_of_geocentric():
    start = datetime(2024, 1, 1, tzinfo=UTC)
    geo = generate(["Mars"], start, start, frame="geocentric", include_aspects=False)
    helio = generate(["Mars"], start, start, frame="heliocentric", include_aspects=False)
    diff = (geo.positions[0].longitude - helio.positions[0].longitude) % 360.0
    assert diff == pytest.approx(180.0)
