"""Tests for Julian dates and the reference date codec."""

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from ephemeris.errors import ReferenceDateError
from ephemeris.timeutils import (
    days_since_epoch,
    estimate_sample_count,
    format_reference_date,
    julian_date,
    parse_reference_date,
    step_timedelta,
    to_utc,
)


def test_julian_date_j2000():
    assert julian_date(datetime(2000, 1, 1, 12, 0, 0, tzinfo=UTC)) == 2451545.0
    assert days_since_epoch(datetime(2000, 1, 1, 12, 0, 0, tzinfo=UTC)) == 0.0


def test_julian_date_mjd_epoch():
    assert julian_date(datetime(1858, 11, 17, tzinfo=UTC)) == pytest.approx(2400000.5)


def test_julian_date_fraction_of_day():
    midnight = julian_date(datetime(2013, 11, 7, tzinfo=UTC))
    assert julian_date(datetime(2013, 11, 7, 6, 0, 0, tzinfo=UTC)) == pytest.approx(midnight + 0.25)
    assert julian_date(datetime(2013, 11, 7, 0, 0, 30, tzinfo=UTC)) == pytest.approx(midnight + 30 / 86400)


def test_julian_date_naive_and_aware_agree():
    naive = datetime(2014, 1, 20, 3, 0)
    aware = datetime(2014, 1, 20, 5, 0, tzinfo=timezone(timedelta(hours=2)))
    assert julian_date(naive) == julian_date(aware)


def test_julian_date_accepts_date():
    assert julian_date(date(2000, 1, 1)) == 2451544.5


def test_to_utc():
    assert to_utc(date(2013, 11, 7)) == datetime(2013, 11, 7, tzinfo=UTC)
    assert to_utc(datetime(2013, 11, 7, 1)).tzinfo is UTC


def test_parse_reference_date():
    assert parse_reference_date("2013.1107") == datetime(2013, 11, 7, tzinfo=UTC)
    assert parse_reference_date("2014.0203") == datetime(2014, 2, 3, tzinfo=UTC)


@pytest.mark.parametrize("value", ["2013-11-07", "2013.117", "13.1107", "2013.1307", "2013.0230", ""])
def test_parse_reference_date_rejects_malformed(value):
    with pytest.raises(ReferenceDateError):
        parse_reference_date(value)


def test_reference_date_error_is_value_error():
    with pytest.raises(ValueError):
        parse_reference_date("nope")


def test_format_reference_date_drops_time():
    assert format_reference_date(datetime(2013, 11, 7, 23, 59, tzinfo=UTC)) == "2013.1107"
    assert format_reference_date(date(999, 1, 2)) == "0999.0102"


def test_reference_date_round_trip():
    day = datetime(1999, 12, 31, tzinfo=UTC)
    for _ in range(400):
        assert parse_reference_date(format_reference_date(day)) == day
        day += timedelta(days=17)


def test_estimate_sample_count():
    start = datetime(2013, 11, 7, tzinfo=UTC)
    end = datetime(2013, 11, 12, tzinfo=UTC)
    assert estimate_sample_count(start, end, 1) == 6
    assert estimate_sample_count(start, end, 2) == 3
    assert estimate_sample_count(end, start, 1) == 0
    assert estimate_sample_count(start, end, 0) == 0
    assert estimate_sample_count(start, end, float("nan")) == 0
    assert estimate_sample_count(start, end, 1e-12) == 0
    assert estimate_sample_count(start, end, 1e10) == 1
    assert estimate_sample_count(start, end, 0.1) == 51


def test_step_timedelta():
    assert step_timedelta(1.5) == timedelta(days=1, hours=12)
    assert step_timedelta(0) is None
    assert step_timedelta(-2) is None
    assert step_timedelta(float("inf")) is None
    assert step_timedelta(1e-12) is None
    assert step_timedelta(1e10) == timedelta.max
