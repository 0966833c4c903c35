from datetime import date, datetime, timedelta, timezone

import pytest

from wsdottie.core.dates import (
    EPOCH,
    PACIFIC,
    coerce_iso_datetime,
    convert_12_to_24_hour,
    datetime_to_epoch_ms,
    datetime_to_wsdot_date,
    is_wsdot_date_string,
    parse_mm_dd_yyyy,
    parse_mm_dd_yyyy_datetime,
    to_yyyy_mm_dd,
    wsdot_date_to_datetime,
)


@pytest.mark.parametrize("ms", [0, 1, 1703123456789, 1753121700000, -86400000, 253402300799000])
def test_epoch_wrapper_round_trips_milliseconds(ms):
    dt = wsdot_date_to_datetime(f"/Date({ms})/")
    assert dt is not None
    assert datetime_to_epoch_ms(dt) == ms
    assert datetime_to_wsdot_date(dt) == f"/Date({ms})/"


def test_epoch_wrapper_is_utc():
    dt = wsdot_date_to_datetime("/Date(1703123456789)/")
    assert dt == EPOCH + timedelta(milliseconds=1703123456789)
    assert dt.utcoffset() == timedelta(0)


def test_epoch_wrapper_offset_suffix_is_not_applied():
    with_offset = wsdot_date_to_datetime("/Date(1753121700000-0700)/")
    without = wsdot_date_to_datetime("/Date(1753121700000)/")
    assert with_offset == without == datetime(2025, 7, 21, 18, 15, tzinfo=timezone.utc)
    assert wsdot_date_to_datetime("/Date(1753121700000+0100)/") == without


def test_epoch_wrapper_accepts_escaped_slashes():
    assert wsdot_date_to_datetime("\\/Date(1703123456789)\\/") == wsdot_date_to_datetime(
        "/Date(1703123456789)/"
    )


@pytest.mark.parametrize("value", ["/Date(abc)/", "/Date()/", "/Date(12.5)/", "/Date(1-07)/"])
def test_epoch_wrapper_with_bad_interior_is_none(value):
    assert wsdot_date_to_datetime(value) is None


def test_epoch_wrapper_out_of_range_is_none():
    assert wsdot_date_to_datetime("/Date(99999999999999999999)/") is None


@pytest.mark.parametrize(
    "value,expected",
    [
        ("/Date(1)/", True),
        ("\\/Date(1)\\/", True),
        ("/date(1)/", False),
        ("Date(1)", False),
        ("12/25/2024", False),
        ("", False),
    ],
)
def test_is_wsdot_date_string(value, expected):
    assert is_wsdot_date_string(value) is expected


def test_mm_dd_yyyy_valid_date_is_pacific_midnight():
    assert parse_mm_dd_yyyy("12/25/2024") == datetime(2024, 12, 25, tzinfo=PACIFIC)
    assert parse_mm_dd_yyyy("2/29/2024") == datetime(2024, 2, 29, tzinfo=PACIFIC)


@pytest.mark.parametrize("value", ["02/30/2024", "02/29/2023", "04/31/2024", "13/01/2024", "00/10/2024"])
def test_mm_dd_yyyy_rejects_impossible_dates(value):
    assert parse_mm_dd_yyyy(value) is None


@pytest.mark.parametrize("value", ["", "01/01/1899", "2024-12-25", "12/25/24", "hello"])
def test_mm_dd_yyyy_rejects_other_shapes(value):
    assert parse_mm_dd_yyyy(value) is None


@pytest.mark.parametrize(
    "value,hour",
    [
        ("12/25/2024 02:30:45 PM", 14),
        ("12/25/2024 12:00:00 AM", 0),
        ("12/25/2024 12:15:00 PM", 12),
        ("12/25/2024 11:59:59 pm", 23),
        ("12/25/2024 01:00:00 AM", 1),
    ],
)
def test_mm_dd_yyyy_datetime_converts_12_hour_clock(value, hour):
    dt = parse_mm_dd_yyyy_datetime(value)
    assert dt is not None
    assert (dt.year, dt.month, dt.day, dt.hour) == (2024, 12, 25, hour)
    assert dt.tzinfo is PACIFIC


@pytest.mark.parametrize("value", ["", "02/30/2024 01:00:00 AM", "12/25/2024 14:00", "12/25/2024", "invalid"])
def test_mm_dd_yyyy_datetime_invalid_is_none(value):
    assert parse_mm_dd_yyyy_datetime(value) is None


@pytest.mark.parametrize(
    "hour,meridiem,expected",
    [(12, "AM", 0), (1, "AM", 1), (11, "AM", 11), (12, "PM", 12), (1, "PM", 13), (11, "pm", 23)],
)
def test_convert_12_to_24_hour(hour, meridiem, expected):
    assert convert_12_to_24_hour(hour, meridiem) == expected


def test_to_yyyy_mm_dd_uses_pacific_date_for_aware_datetimes():
    assert to_yyyy_mm_dd(date(2025, 8, 26)) == "2025-08-26"
    # 05:00 UTC on Jan 1 is still Dec 31 in Seattle
    assert to_yyyy_mm_dd(datetime(2024, 1, 1, 5, tzinfo=timezone.utc)) == "2023-12-31"


def test_coerce_iso_datetime():
    assert coerce_iso_datetime("2025-08-26") == datetime(2025, 8, 26)
    aware = coerce_iso_datetime("2025-08-26T10:00:00Z")
    assert aware is not None and aware.utcoffset() == timedelta(0)
    assert coerce_iso_datetime("Seattle") is None
    assert coerce_iso_datetime("2025-13-45") is None
