from datetime import date, datetime

import pytest

from wsdottie.core.urls import (
    api_key_param,
    build_url,
    fill_template,
    format_param_value,
    redact_url,
    template_placeholders,
)

BASE = "https://www.wsdot.wa.gov"


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, "true"),
        (False, "false"),
        (7, "7"),
        (date(2025, 8, 26), "2025-08-26"),
        (datetime(2025, 8, 26, 13, 45), "2025-08-26"),
        ([1, 2, 3], "1,2,3"),
        ("SR 520", "SR 520"),
    ],
)
def test_format_param_value(value, expected):
    assert format_param_value(value) == expected


def test_template_placeholders_in_order():
    assert template_placeholders("/a/{x}/{y}?z={z}") == ["x", "y", "z"]


def test_fill_path_placeholders():
    path = fill_template(
        "/ferries/api/fares/rest/terminalcombo/{tripDate}/{departingTerminalID}/{arrivingTerminalID}",
        {"tripDate": date(2025, 8, 26), "departingTerminalID": 1, "arrivingTerminalID": 10},
    )
    assert path == "/ferries/api/fares/rest/terminalcombo/2025-08-26/1/10"


def test_path_values_are_percent_encoded_except_commas():
    assert fill_template("/x/{name}/{ids}", {"name": "a b/c", "ids": [1, 2]}) == "/x/a%20b%2Fc/1,2"


def test_unknown_parameter_is_an_error():
    with pytest.raises(ValueError, match="Unknown parameter"):
        fill_template("/x/{id}", {"id": 1, "extra": 2})


def test_missing_path_parameter_is_an_error():
    with pytest.raises(ValueError, match="Missing required path parameter 'id'"):
        fill_template("/x/{id}", {})


def test_unfilled_query_pairs_are_dropped():
    template = "/SearchAlertsAsJson?StateRoute={StateRoute}&Region={Region}&StartingMilepost={StartingMilepost}"
    assert fill_template(template, {"Region": "NW"}) == "/SearchAlertsAsJson?Region=NW"
    assert fill_template(template, {}) == "/SearchAlertsAsJson"
    assert fill_template(template, {"StateRoute": None}) == "/SearchAlertsAsJson"


def test_api_key_param_by_family():
    assert api_key_param("/Traffic/api/HighwayAlerts/HighwayAlertsREST.svc/GetAlertsAsJson") == "AccessCode"
    assert api_key_param("/traffic/api/api/Scanweb") == "AccessCode"
    assert api_key_param("/ferries/api/vessels/rest/vessellocations") == "apiaccesscode"


def test_build_url_appends_key():
    assert (
        build_url(BASE, "/ferries/api/vessels/rest/vesselbasics/{vesselId}", {"vesselId": 1}, api_key="K")
        == f"{BASE}/ferries/api/vessels/rest/vesselbasics/1?apiaccesscode=K"
    )
    assert (
        build_url(
            BASE + "/",
            "/Traffic/api/Bridges/ClearanceREST.svc/GetClearancesAsJson?Route={route}",
            {"route": "005"},
            api_key="K",
        )
        == f"{BASE}/Traffic/api/Bridges/ClearanceREST.svc/GetClearancesAsJson?Route=005&AccessCode=K"
    )


def test_build_url_without_key():
    assert build_url(BASE, "/ferries/api/vessels/rest/cacheflushdate") == f"{BASE}/ferries/api/vessels/rest/cacheflushdate"


def test_redact_url():
    assert redact_url("https://x/y?a=1&AccessCode=SECRET&b=2") == "https://x/y?a=1&AccessCode=***&b=2"
    assert redact_url("https://x/y?apiaccesscode=SECRET") == "https://x/y?apiaccesscode=***"
    assert redact_url(None) is None
