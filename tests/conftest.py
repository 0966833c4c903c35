"""Shared fixtures: a fake requests session and a client bound to it."""

import pytest
import requests

from wsdottie.config import settings
from wsdottie.config.settings import WsdotConfig
from wsdottie.core import fetch as fetch_module
from wsdottie.core.fetch import WsdotClient

TEST_KEY = "TESTKEY"


class FakeResponse:
    def __init__(self, text="", status_code=200, reason="OK"):
        self.text = text
        self.status_code = status_code
        self.reason = reason

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error: {self.reason}", response=self)


class FakeSession:
    """Stands in for requests.Session.

    `responses` is consumed in order; each item is a FakeResponse, a plain
    string (a 200 body) or an exception to raise. The last item repeats.
    """

    def __init__(self, *responses):
        self.responses = list(responses) or [FakeResponse("[]")]
        self.calls = []
        self.closed = False

    def get(self, url, timeout=None):
        self.calls.append(url)
        item = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(item, BaseException):
            raise item
        if isinstance(item, str):
            return FakeResponse(item)
        return item

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep the process-wide config and default client out of every test."""
    for key in ("WSDOT_ACCESS_TOKEN", "WSDOT_BASE_URL", "WSDOT_TIMEOUT", "WSDOT_FETCH_STRATEGY", "WSDOT_LOG_MODE", "FORCE_JSONP"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(settings, "_default_config", None)
    monkeypatch.setattr(fetch_module, "_default_client", None)
    yield


@pytest.fixture
def make_client():
    """Factory: make_client(*responses, **config_overrides) -> (client, session)."""

    def _make(*responses, **overrides):
        session = FakeSession(*responses)
        config = WsdotConfig(api_key=TEST_KEY, **overrides)
        return WsdotClient(config, session=session), session

    return _make
