"""Response normalization.

Turns raw WSDOT/WSF JSON text into plain Python values where:

* keys in ``EXCLUDED_FIELDS`` are removed at every depth,
* string values under a key in ``FIELD_DATE_PARSERS`` go through that
  field's parser (None when the parser rejects the value),
* any other string with the ``/Date(ms)/`` shape becomes a UTC datetime,
* everything else is left as decoded.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import orjson

from wsdottie.core.dates import (
    is_wsdot_date_string,
    parse_mm_dd_yyyy,
    parse_mm_dd_yyyy_datetime,
    wsdot_date_to_datetime,
)
from wsdottie.core.errors import ParseError


# Undocumented vessel-watch metadata returned by WSF Vessels
EXCLUDED_FIELDS = frozenset(
    {
        "VesselWatchShutID",
        "VesselWatchShutMsg",
        "VesselWatchShutFlag",
        "VesselWatchStatus",
        "VesselWatchMsg",
    }
)

DateParser = Callable[[str], Optional[Any]]

# Exact key name -> parser. Checked before the generic /Date()/ sniff.
FIELD_DATE_PARSERS: dict[str, DateParser] = {
    # WSF Schedule valid date ranges
    "FromDate": parse_mm_dd_yyyy,
    "ThruDate": parse_mm_dd_yyyy,
    # WSF Schedule timestamps
    "ModifiedDate": parse_mm_dd_yyyy_datetime,
    # WSF Vessels
    "ScheduledDeparture": wsdot_date_to_datetime,
    "TimeStamp": wsdot_date_to_datetime,
    "LeftDock": wsdot_date_to_datetime,
    "Eta": wsdot_date_to_datetime,
}


def _convert_string(key: Optional[str], value: str) -> Any:
    parser = FIELD_DATE_PARSERS.get(key) if key is not None else None
    if parser is not None:
        return parser(value)
    if is_wsdot_date_string(value):
        return wsdot_date_to_datetime(value)
    return value


def normalize_value(value: Any, key: Optional[str] = None) -> Any:
    """
    Normalize an already-decoded JSON value.

    Args:
        value: Decoded JSON (dict, list, str, number, bool or None).
        key: Name of the object key `value` was found under, if any.
            Array elements inherit no key.

    Returns:
        A new value of the same shape with dates converted and excluded
        fields removed. The input is not modified.
    """
    if isinstance(value, dict):
        return {k: normalize_value(v, k) for k, v in value.items() if k not in EXCLUDED_FIELDS}
    if isinstance(value, list):
        return [normalize_value(item) for item in value]
    if isinstance(value, str):
        return _convert_string(key, value)
    return value


def parse_wsdot_json(text: str | bytes) -> Any:
    """
    Decode WSDOT/WSF JSON text and normalize it.

    Args:
        text: JSON text as str or UTF-8 bytes.

    Returns:
        The normalized value (see module docstring).

    Raises:
        ParseError: If `text` is not valid JSON. The decoder's position
            details are copied onto the error. orjson only accepts valid
            UTF-8, so a string holding a lone surrogate escape such as
            ``"\\ud800"`` is rejected here too, although RFC 8259 parsers
            accept it. The upstream APIs have not been seen to send one.
    """
    try:
        decoded = orjson.loads(text)
    except orjson.JSONDecodeError as e:
        raise ParseError(e.msg, pos=e.pos, lineno=e.lineno, colno=e.colno) from e
    return normalize_value(decoded)
