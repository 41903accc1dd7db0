"""Tests for the dashboard summary."""

from datetime import UTC, datetime, timedelta

from orrery.schemas.ephemeris import CoordinateSystem, EphemerisOutput, PlanetPosition

from ephemeris.aspects import detect_aspects
from ephemeris.summary import summarize

START = datetime(2024, 1, 1, tzinfo=UTC)


def _pos(body: str, day: int, longitude: float) -> PlanetPosition:
    return PlanetPosition(
        body=body,
        at=START + timedelta(days=day),
        julian_date=0.0,
        longitude=longitude,
        latitude=1.0,
        distance_au=2.0,
        right_ascension=0.0,
        declination=0.0,
        magnitude=3.0,
        phase_angle=0.0,
        elongation=0.0,
        coordinate_system=CoordinateSystem.HELIOCENTRIC,
        sign="Aries",
        degree=0.0,
    )


def _output() -> EphemerisOutput:
    mercury = [10.0, 12.0, 11.0, 10.0]
    venus = [100.0, 101.0, 102.0, 103.0]
    positions = []
    for day, (m, v) in enumerate(zip(mercury, venus)):
        positions.append(_pos("Mercury", day, m))
        positions.append(_pos("Venus", day, v))
    return EphemerisOutput(
        positions=positions,
        aspects=detect_aspects(positions, 5),
        max_positions=10_000,
        requested_samples=8,
    )


def test_metrics():
    summary = summarize(_output(), now=START)
    assert summary["metrics"] == {
        "active_bodies": 2,
        "total_aspects": 4,
        "retrograde_periods": 0,
        "station_points": 1,
        "truncated": False,
    }


def test_current_status_uses_latest_instant():
    summary = summarize(_output(), now=START)
    current = {c["body"]: c for c in summary["current"]}
    assert set(current) == {"Mercury", "Venus"}
    assert current["Mercury"]["longitude"] == 10.0
    assert current["Venus"]["retrograde"] is False
    assert current["Venus"]["distance_au"] == 2.0


def test_alerts():
    summary = summarize(_output(), now=START)
    types = [a["type"] for a in summary["alerts"]]
    # day 0 is an exact square; the Mercury peak on day 1 is a station
    assert types == ["exact_aspect", "station_warning"]
    assert summary["alerts"][1]["message"] == "1 planet(s) changing direction soon"


def test_exact_aspect_alert():
    positions = [_pos("Mars", 0, 0.0), _pos("Jupiter", 0, 90.0)]
    output = EphemerisOutput(positions=positions, aspects=detect_aspects(positions, 1), max_positions=10)
    alerts = summarize(output, now=START + timedelta(days=30))["alerts"]
    assert alerts == [
        {"type": "exact_aspect", "message": "1 exact planetary aspect(s) detected", "severity": "high"}
    ]


def test_empty_output():
    summary = summarize(EphemerisOutput(max_positions=10), now=START)
    assert summary["current"] == []
    assert summary["alerts"] == []
    assert summary["metrics"]["active_bodies"] == 0


def test_past_station_is_not_an_alert():
    summary = summarize(_output(), now=START + timedelta(days=5))
    assert [a["type"] for a in summary["alerts"]] == ["exact_aspect"]


def test_ongoing_retrograde_not_flagged_in_current():
    # Mercury is still decreasing at the last sample, so the open period is dropped
    current = {c["body"]: c for c in summarize(_output(), now=START)["current"]}
    assert current["Mercury"]["retrograde"] is False


def test_aspects_by_type_counts_every_type():
    by_type = summarize(_output(), now=START)["aspects_by_type"]
    assert by_type["square"] == 4
    assert len(by_type) == 9
    assert sum(by_type.values()) == 4


def test_upcoming_aspects_window_and_limit():
    positions = []
    for day in range(10):
        positions.append(_pos("Mars", day, 20.0))
        positions.append(_pos("Jupiter", day, 20.0))
    output = EphemerisOutput(positions=positions, aspects=detect_aspects(positions, 1), max_positions=100)

    upcoming = summarize(output, now=START + timedelta(days=1))["upcoming_aspects"]
    assert len(upcoming) == 5
    assert [a["at"][:10] for a in upcoming] == [
        "2024-01-02", "2024-01-03", "2024-01-04", "2024-01-05", "2024-01-06",
    ]
    assert {a["type"] for a in upcoming} == {"conjunction"}


def test_no_upcoming_aspects_after_range():
    summary = summarize(_output(), now=START + timedelta(days=30))
    assert summary["upcoming_aspects"] == []
