import re

import pytest
import requests

from conftest import FakeResponse, FakeSession
from wsdottie.config.settings import WsdotConfig
from wsdottie.core import http
from wsdottie.core.http import (
    fetch_jsonp,
    fetch_native,
    make_callback_name,
    make_session,
    select_fetch_strategy,
    strip_jsonp_padding,
)


def test_make_session_headers_and_retry():
    s = make_session(user_agent="wsdottie-tests")
    assert s.headers["User-Agent"] == "wsdottie-tests"
    assert s.headers["Accept"] == "application/json"
    retry = s.get_adapter("https://www.wsdot.wa.gov").max_retries
    assert retry.total == 3
    assert 429 in retry.status_forcelist
    assert retry.raise_on_status is False


def test_fetch_native_returns_body():
    session = FakeSession('[{"VesselID": 1}]')
    assert fetch_native("https://x/y", session=session, timeout=5) == '[{"VesselID": 1}]'
    assert session.calls == ["https://x/y"]


def test_fetch_native_raises_http_error_with_response():
    session = FakeSession(FakeResponse("Bad things", status_code=500, reason="Server Error"))
    with pytest.raises(requests.HTTPError) as excinfo:
        fetch_native("https://x/y?AccessCode=SECRET", session=session, timeout=5)
    assert excinfo.value.response.status_code == 500
    assert "HTTP 500 (Server Error)" in str(excinfo.value)
    assert "SECRET" not in str(excinfo.value)


def test_callback_name_shape():
    assert re.fullmatch(r"jsonp_\d+_\d+", make_callback_name())


@pytest.mark.parametrize(
    "text,expected",
    [
        ('cb({"a": 1})', '{"a": 1}'),
        ('/**/ jsonp_1_2([1, 2]);', "[1, 2]"),
        ('  cb(\n{"a": "x)"}\n);  ', '\n{"a": "x)"}\n'),
        ('{"a": 1}', '{"a": 1}'),
        ("[1, 2]", "[1, 2]"),
    ],
)
def test_strip_jsonp_padding(text, expected):
    assert strip_jsonp_padding(text) == expected


def test_fetch_jsonp_appends_callback(monkeypatch):
    monkeypatch.setattr(http, "make_callback_name", lambda: "jsonp_1_2")
    session = FakeSession('jsonp_1_2({"ok": true});')
    assert fetch_jsonp("https://x/y?AccessCode=K", session=session, timeout=5) == '{"ok": true}'
    assert session.calls == ["https://x/y?AccessCode=K&callback=jsonp_1_2"]

    session = FakeSession("jsonp_1_2([])")
    fetch_jsonp("https://x/y", session=session, timeout=5)
    assert session.calls == ["https://x/y?callback=jsonp_1_2"]


@pytest.mark.parametrize("strategy,expected", [("auto", fetch_native), ("native", fetch_native), ("jsonp", fetch_jsonp)])
def test_select_fetch_strategy(strategy, expected):
    assert select_fetch_strategy(WsdotConfig(fetch_strategy=strategy)) is expected


def test_force_jsonp_env(monkeypatch):
    monkeypatch.setenv("FORCE_JSONP", "true")
    monkeypatch.setenv("WSDOT_FETCH_STRATEGY", "native")
    assert select_fetch_strategy(WsdotConfig.from_env()) is fetch_jsonp
