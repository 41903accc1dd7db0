"""Dashboard summary of a generated ephemeris."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from orrery.schemas.ephemeris import AspectType, EphemerisOutput

from ephemeris.phenomena import find_retrogrades, find_stations, is_retrograde_at
from ephemeris.timeutils import to_utc

RETROGRADE_ALERT_WINDOW = timedelta(days=7)
STATION_ALERT_WINDOW = timedelta(days=3)
UPCOMING_ASPECT_WINDOW = timedelta(days=7)
UPCOMING_ASPECT_LIMIT = 5


def summarize(output: EphemerisOutput, now: datetime | None = None) -> dict[str, Any]:
    """Build metric counts, latest per-body status, upcoming aspects, and alerts.

    Args:
        output: Result of ``generate``.
        now: Reference time for upcoming-event alerts (defaults to current UTC time).

    Returns:
        Dict with ``metrics``, ``aspects_by_type``, ``current``,
        ``upcoming_aspects``, and ``alerts`` keys. ``upcoming_aspects`` holds
        at most five aspects dated within a week of ``now``, earliest first.
    """
    now = to_utc(now) if now is not None else datetime.now(UTC)
    retrogrades = find_retrogrades(output.positions)
    stations = find_stations(output.positions)

    metrics = {
        "active_bodies": len({p.body for p in output.positions}),
        "total_aspects": len(output.aspects),
        "retrograde_periods": len(retrogrades),
        "station_points": len(stations),
        "truncated": output.truncated,
    }

    aspects_by_type = {aspect_type.value: 0 for aspect_type in AspectType}
    for aspect in output.aspects:
        aspects_by_type[aspect.type.value] += 1

    current = []
    if output.positions:
        latest = output.positions[-1].at
        for pos in output.positions:
            if pos.at != latest:
                continue
            current.append({
                "body": pos.body,
                "longitude": pos.longitude,
                "latitude": pos.latitude,
                "distance_au": pos.distance_au,
                "magnitude": pos.magnitude,
                "retrograde": is_retrograde_at(retrogrades, pos.body, pos.at),
            })

    upcoming = sorted(
        (a for a in output.aspects if now <= a.at <= now + UPCOMING_ASPECT_WINDOW),
        key=lambda a: a.at,
    )
    upcoming_aspects = [a.model_dump(mode="json") for a in upcoming[:UPCOMING_ASPECT_LIMIT]]

    alerts = []
    exact = [a for a in output.aspects if a.orb == 0]
    if exact:
        alerts.append({
            "type": "exact_aspect",
            "message": f"{len(exact)} exact planetary aspect(s) detected",
            "severity": "high",
        })
    upcoming_retrogrades = [r for r in retrogrades if timedelta(0) <= r.start - now < RETROGRADE_ALERT_WINDOW]
    if upcoming_retrogrades:
        alerts.append({
            "type": "retrograde_warning",
            "message": f"{len(upcoming_retrogrades)} planet(s) entering retrograde soon",
            "severity": "medium",
        })
    upcoming_stations = [s for s in stations if timedelta(0) <= s.at - now < STATION_ALERT_WINDOW]
    if upcoming_stations:
        alerts.append({
            "type": "station_warning",
            "message": f"{len(upcoming_stations)} planet(s) changing direction soon",
            "severity": "medium",
        })

    return {
        "metrics": metrics,
        "aspects_by_type": aspects_by_type,
        "current": current,
        "upcoming_aspects": upcoming_aspects,
        "alerts": alerts,
    }
