from datetime import datetime, timedelta

import orjson
import pytest

from wsdottie.core.dates import EPOCH, PACIFIC
from wsdottie.core.errors import ParseError
from wsdottie.core.normalize import EXCLUDED_FIELDS, normalize_value, parse_wsdot_json


def test_timestamp_epoch_wrapper_becomes_datetime():
    out = parse_wsdot_json('{"TimeStamp":"/Date(1703123456789)/","Name":"Test"}')
    assert out["TimeStamp"] == EPOCH + timedelta(milliseconds=1703123456789)
    assert out["Name"] == "Test"


def test_from_and_thru_dates():
    out = parse_wsdot_json('{"FromDate":"12/25/2024","ThruDate":"02/30/2024"}')
    assert out["FromDate"] == datetime(2024, 12, 25, tzinfo=PACIFIC)
    assert out["ThruDate"] is None


def test_vessel_watch_field_removed_siblings_kept():
    out = parse_wsdot_json('{"VesselID":1,"VesselWatchStatus":"active","VesselName":"Cathlamet","InService":true}')
    assert out == {"VesselID": 1, "VesselName": "Cathlamet", "InService": True}


def test_malformed_json_raises_parse_error_with_location():
    with pytest.raises(ParseError) as excinfo:
        parse_wsdot_json('{"a": 1,}')
    err = excinfo.value
    assert isinstance(err, ValueError)
    assert err.lineno == 1
    assert err.pos > 0
    assert isinstance(err.__cause__, orjson.JSONDecodeError)


def test_lone_surrogate_escape_is_parse_error():
    with pytest.raises(ParseError):
        parse_wsdot_json('{"Name": "\\ud800"}')


def test_paired_surrogate_escape_decodes():
    assert parse_wsdot_json('{"Name": "\\ud83d\\ude00"}') == {"Name": "\U0001f600"}


@pytest.mark.parametrize("field", sorted(EXCLUDED_FIELDS))
def test_excluded_fields_removed_at_any_depth(field):
    payload = {
        field: 1,
        "Vessels": [{"VesselID": 2, field: "x", "Inner": {field: None, "Keep": True}}],
    }
    out = parse_wsdot_json(orjson.dumps(payload))
    text = orjson.dumps(out, default=str).decode()
    assert field not in text
    assert out["Vessels"][0]["Inner"] == {"Keep": True}


def test_generic_epoch_sniff_for_unmapped_keys():
    out = parse_wsdot_json('{"TimeUpdated":"/Date(1700000000000-0800)/","Other":"/Date(x)/"}')
    assert out["TimeUpdated"] == EPOCH + timedelta(milliseconds=1700000000000)
    assert out["Other"] is None


def test_escaped_epoch_wrapper_in_raw_text():
    out = parse_wsdot_json('{"Time":"\\/Date(1703123456789)\\/"}')
    assert out["Time"] == EPOCH + timedelta(milliseconds=1703123456789)


def test_field_parser_takes_priority_over_sniff():
    # ModifiedDate is registered for MM/DD/YYYY HH:MM:SS AM|PM, so an
    # epoch wrapper under that key is not sniffed
    out = parse_wsdot_json('{"ModifiedDate":"/Date(1703123456789)/"}')
    assert out["ModifiedDate"] is None


def test_modified_date_12_hour_format():
    out = parse_wsdot_json('{"ModifiedDate":"03/15/2025 04:05:06 PM"}')
    assert out["ModifiedDate"] == datetime(2025, 3, 15, 16, 5, 6, tzinfo=PACIFIC)


def test_list_items_are_not_keyed():
    # A bare MM/DD/YYYY string inside an array has no field parser
    out = parse_wsdot_json('{"FromDate":["12/25/2024"],"Dates":["/Date(0)/"]}')
    assert out["FromDate"] == ["12/25/2024"]
    assert out["Dates"] == [EPOCH]


def test_non_string_values_pass_through():
    payload = {"a": 1, "b": 2.5, "c": None, "d": False, "e": [1, [2, {"f": "g"}]]}
    assert parse_wsdot_json(orjson.dumps(payload)) == payload


def test_key_order_preserved():
    out = parse_wsdot_json('{"z":1,"a":2,"m":3}')
    assert list(out) == ["z", "a", "m"]


def test_idempotent_on_plain_values():
    payload = {"Name": "Anacortes", "Items": [{"Description": "Car", "Amount": 12.5}], "Note": "Date(1)"}
    once = parse_wsdot_json(orjson.dumps(payload))
    twice = parse_wsdot_json(orjson.dumps(once))
    assert once == twice == payload


def test_top_level_array_and_scalars():
    assert parse_wsdot_json('["/Date(0)/", 1]') == [EPOCH, 1]
    assert parse_wsdot_json('"/Date(0)/"') == EPOCH
    assert parse_wsdot_json(b"null") is None


def test_normalize_value_does_not_mutate_input():
    data = {"TimeStamp": "/Date(0)/", "VesselWatchMsg": "x"}
    normalize_value(data)
    assert data == {"TimeStamp": "/Date(0)/", "VesselWatchMsg": "x"}
