"""Date parsing and formatting for the WSDOT and WSF wire formats.

Three string shapes show up in responses:

    "/Date(1703123456789)/"          WSDOT/WSF epoch wrapper, optional "-0800"
    "12/25/2024"                     WSF Schedule date-only fields
    "12/25/2024 02:30:45 PM"         WSF Schedule timestamp fields

Parsers never raise on bad input; they return None so one malformed field
does not abort a whole response.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from dateutil import parser, tz

# WSF publishes schedule dates as Pacific wall-clock values
PACIFIC = tz.gettz("America/Los_Angeles")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

WSDOT_DATE_PREFIX = "/Date("
WSDOT_DATE_SUFFIX = ")/"

# Interior of the epoch wrapper: signed milliseconds, then an optional
# signed 4-digit offset that is informational only
_EPOCH_INTERIOR_RE = re.compile(r"^(-?\d+)(?:[+-]\d{4})?$")

MM_DD_YYYY_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
MM_DD_YYYY_DATETIME_RE = re.compile(
    r"^(\d{1,2})/(\d{1,2})/(\d{4})\s+(\d{1,2}):(\d{2}):(\d{2})\s+(AM|PM)$",
    re.IGNORECASE,
)

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?$")


def _unescape_slashes(value: str) -> str:
    return value.replace("\\/", "/")


def is_wsdot_date_string(value: str) -> bool:
    """
    Return True if `value` has the `/Date(...)/` epoch-wrapper shape.

    The escaped form `\\/Date(...)\\/` also matches. Only the prefix and
    suffix are checked; the interior is validated when parsing.
    """
    if not isinstance(value, str):
        return False
    clean = _unescape_slashes(value)
    return clean.startswith(WSDOT_DATE_PREFIX) and clean.endswith(WSDOT_DATE_SUFFIX)


def epoch_ms_to_datetime(ms: int) -> Optional[datetime]:
    """Convert milliseconds since the Unix epoch to an aware UTC datetime."""
    try:
        return EPOCH + timedelta(milliseconds=ms)
    except (OverflowError, ValueError):
        return None


def datetime_to_epoch_ms(dt: datetime) -> int:
    """Milliseconds since the Unix epoch; naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return (dt - EPOCH) // timedelta(milliseconds=1)


def wsdot_date_to_datetime(value: str) -> Optional[datetime]:
    """
    Parse a `/Date(ms[+-hhmm])/` string into an aware UTC datetime.

    The millisecond count is interpreted as UTC. A trailing offset such as
    `-0700` is accepted but not applied, because the count is already an
    absolute instant.

    Examples:
        wsdot_date_to_datetime("/Date(1703123456789)/") -> 2023-12-21 01:50:56.789+00:00
        wsdot_date_to_datetime("/Date(1753121700000-0700)/") -> 2025-07-21 18:15:00+00:00
        wsdot_date_to_datetime("/Date(abc)/") -> None

    Args:
        value: Candidate string, escaped slashes allowed.

    Returns:
        Aware UTC datetime, or None if the shape or the number is invalid.
    """
    if not is_wsdot_date_string(value):
        return None
    clean = _unescape_slashes(value)
    interior = clean[len(WSDOT_DATE_PREFIX) : -len(WSDOT_DATE_SUFFIX)]
    match = _EPOCH_INTERIOR_RE.match(interior)
    if not match:
        return None
    return epoch_ms_to_datetime(int(match.group(1)))


def datetime_to_wsdot_date(dt: datetime) -> str:
    """Format a datetime as `/Date(ms)/`."""
    return f"{WSDOT_DATE_PREFIX}{datetime_to_epoch_ms(dt)}{WSDOT_DATE_SUFFIX}"


def _valid_date_parts(month: int, day: int, year: int) -> bool:
    return 1 <= month <= 12 and 1 <= day <= 31 and year >= 1900


def parse_mm_dd_yyyy(value: str) -> Optional[datetime]:
    """
    Parse a WSF `MM/DD/YYYY` string into midnight Pacific time.

    Impossible calendar dates (e.g. 02/30/2024) return None instead of
    rolling over into the next month.

    Args:
        value: Date string such as "12/25/2024".

    Returns:
        Aware datetime in America/Los_Angeles, or None.
    """
    if not value or not isinstance(value, str):
        return None
    match = MM_DD_YYYY_RE.match(value)
    if not match:
        return None

    month, day, year = (int(g) for g in match.groups())
    if not _valid_date_parts(month, day, year):
        return None

    try:
        return datetime(year, month, day, tzinfo=PACIFIC)
    except ValueError:
        return None


def convert_12_to_24_hour(hour: int, meridiem: str) -> int:
    """Convert a 12-hour clock hour to 24-hour (12 AM -> 0, 12 PM -> 12)."""
    meridiem = meridiem.upper()
    if meridiem == "PM":
        return 12 if hour == 12 else hour + 12
    if meridiem == "AM":
        return 0 if hour == 12 else hour
    return hour


def parse_mm_dd_yyyy_datetime(value: str) -> Optional[datetime]:
    """
    Parse a WSF `MM/DD/YYYY HH:MM:SS AM|PM` string into Pacific time.

    Examples:
        parse_mm_dd_yyyy_datetime("12/25/2024 02:30:45 PM") -> 2024-12-25 14:30:45-08:00
        parse_mm_dd_yyyy_datetime("12/25/2024 12:00:00 AM") -> 2024-12-25 00:00:00-08:00
        parse_mm_dd_yyyy_datetime("invalid") -> None
    """
    if not value or not isinstance(value, str):
        return None
    match = MM_DD_YYYY_DATETIME_RE.match(value)
    if not match:
        return None

    month, day, year, hours, minutes, seconds = (int(g) for g in match.groups()[:6])
    if not _valid_date_parts(month, day, year):
        return None

    try:
        return datetime(
            year,
            month,
            day,
            convert_12_to_24_hour(hours, match.group(7)),
            minutes,
            seconds,
            tzinfo=PACIFIC,
        )
    except ValueError:
        return None


def to_yyyy_mm_dd(value: date) -> str:
    """Format a date or datetime as `YYYY-MM-DD` for URL parameters."""
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(PACIFIC)
    return value.strftime("%Y-%m-%d")


def coerce_iso_datetime(value: str) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or datetime string, or return None.

    Used for command-line parameters, where "2025-08-26" should become a
    date value rather than stay a string.
    """
    if not isinstance(value, str) or not ISO_DATE_RE.match(value.strip()):
        return None
    try:
        return parser.isoparse(value.strip())
    except (ValueError, OverflowError):
        return None


def today_pacific() -> date:
    """Current calendar date in the ferry system's time zone."""
    return datetime.now(PACIFIC).date()


def days_from_today(days: int) -> date:
    return today_pacific() + timedelta(days=days)
