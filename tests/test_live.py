"""Calls against the real servers; run with WSDOT_ACCESS_TOKEN set and `-m live`."""

import os

import pytest

from wsdottie.config.settings import WsdotConfig
from wsdottie.core.fetch import WsdotClient
from wsdottie.endpoints import endpoints_flat, find_endpoint

pytestmark = [
    pytest.mark.live,
    pytest.mark.skipif(not os.environ.get("WSDOT_ACCESS_TOKEN"), reason="WSDOT_ACCESS_TOKEN not set"),
]

SMOKE_ENDPOINTS = [
    "fetch_vessel_basics",
    "fetch_terminal_basics",
    "fetch_schedule_valid_date_range",
    "fetch_fares_valid_date_range",
    "fetch_border_crossings",
    "fetch_mountain_pass_conditions",
    "fetch_weather_stations",
]


@pytest.fixture(scope="module")
def live_client():
    # The autouse fixture clears the variable per test; read it before that
    token = os.environ["WSDOT_ACCESS_TOKEN"]
    with WsdotClient(WsdotConfig(api_key=token)) as client:
        yield client


@pytest.mark.parametrize("name", SMOKE_ENDPOINTS)
def test_smoke(live_client, name):
    endpoint = find_endpoint(name)
    assert endpoint is not None
    data = live_client.fetch(endpoint, endpoint.get_sample_params())
    assert data is not None


def test_every_cache_flush_date_parses(live_client):
    for endpoint in endpoints_flat():
        if endpoint.function_name.startswith("fetch_cache_flush_date"):
            assert live_client.fetch(endpoint) is not None
