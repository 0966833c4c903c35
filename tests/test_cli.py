from datetime import datetime

import orjson
import pytest

from conftest import TEST_KEY, FakeResponse, FakeSession
from wsdottie import cli
from wsdottie.core.fetch import WsdotClient

BORDER = '[{"CrossingName": "I5General", "Time": "/Date(1703123456789-0800)/", "WaitTime": 5}]'


@pytest.fixture
def fake_session(monkeypatch):
    """Route the CLI's client through a FakeSession; returns the session."""
    session = FakeSession(BORDER)

    def client_factory(config):
        return WsdotClient(config.with_overrides(api_key=TEST_KEY), session=session)

    monkeypatch.setattr(cli, "WsdotClient", client_factory)
    return session


def test_list_prints_every_family(capsys):
    assert cli.main_dottie(["--list"]) == 0
    out = capsys.readouterr().out
    assert "wsf-vessels" in out
    assert "fetch_border_crossings" in out


def test_missing_function_name(capsys):
    assert cli.main_dottie([]) == 1
    assert "Function name is required" in capsys.readouterr().err


def test_unknown_function(capsys):
    assert cli.main_native(["fetch_nothing"]) == 1
    assert "'fetch_nothing' not found" in capsys.readouterr().err


def test_silent_suppresses_errors(capsys):
    assert cli.main_dottie(["fetch_nothing", "--silent"]) == 1
    assert capsys.readouterr().err == ""


def test_invalid_params_json(capsys):
    assert cli.main_dottie(["fetch_border_crossings", "{not json"]) == 1
    assert "Params must be valid JSON" in capsys.readouterr().err


def test_fetch_dottie_prints_validated_json(fake_session, capsys):
    assert cli.main_dottie(["fetch_border_crossings"]) == 0

    captured = capsys.readouterr()
    data = orjson.loads(captured.out)
    assert data[0]["CrossingName"] == "I5General"
    assert data[0]["Time"].startswith("2023-12-21")
    assert "Calling fetch_border_crossings" in captured.err
    assert len(fake_session.calls) == 1


def test_fetch_native_passes_params(fake_session, capsys):
    fake_session.responses = ["[]"]

    assert cli.main_native(["fetch_bridge_clearances_by_route", '{"route": "005"}', "--quiet"]) == 0

    captured = capsys.readouterr()
    assert captured.out.strip() == "[]"
    assert captured.err == ""
    assert "Route=005" in fake_session.calls[0]


def test_head_truncates_pretty_output(fake_session, capsys):
    assert cli.main_native(["fetch_border_crossings", "--head", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["[", "  {"]


def test_upstream_error_returns_one(fake_session, capsys):
    fake_session.responses = [FakeResponse("oops", status_code=500, reason="Server Error")]

    assert cli.main_dottie(["fetch_border_crossings"]) == 1
    assert "Error calling fetch_border_crossings" in capsys.readouterr().err


def test_parse_params():
    assert cli.parse_params(None) is None
    assert cli.parse_params('{"vesselId": 1}') == {"vesselId": 1}
    with pytest.raises(ValueError, match="JSON object"):
        cli.parse_params("[1, 2]")


def test_coerce_params_converts_nested_iso_dates():
    params = cli.coerce_params({"tripDate": "2025-08-26", "names": ["Tacoma", "2025-01-02"], "n": 3})

    assert params["tripDate"] == datetime(2025, 8, 26)
    assert params["names"][0] == "Tacoma"
    assert params["names"][1] == datetime(2025, 1, 2)
    assert params["n"] == 3


def test_format_output():
    assert cli.format_output({"a": 1}) == '{"a":1}'
    assert cli.format_output({"a": 1}, pretty=True) == '{\n  "a": 1\n}'
