import pytest

import apis
from app import create_app
from conftest import FakeResponse
from wsdottie.core.cache import QueryCache
from wsdottie.endpoints import endpoints_flat

VESSEL = '{"VesselID": 1, "VesselName": "Cathlamet"}'


@pytest.fixture
def client():
    app = create_app(log_level="WARNING")
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def upstream(monkeypatch, make_client):
    """Swap the proxy's cache for one backed by a fake session; returns the session."""

    def _install(*responses):
        wsdot_client, session = make_client(*responses)
        monkeypatch.setattr(apis, "query_cache", QueryCache(wsdot_client, sleep=lambda _: None))
        return session

    return _install


def test_echo(client):
    response = client.get("/echo")
    assert response.status_code == 200
    assert response.get_json() == "Server active!"


def test_up(client):
    response = client.get("/up")
    assert response.status_code == 200
    assert response.get_json() == ":)"


def test_cors_header(client):
    response = client.get("/up", headers={"Origin": "https://example.org"})
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_endpoint_catalog(client):
    response = client.get("/endpoints")
    assert response.status_code == 200
    rows = response.get_json()
    assert len(rows) == len(endpoints_flat())
    first = rows[0]
    assert first["route"] == f"/{first['api']}/{first['function_name']}"


def test_endpoint_catalog_filtered_by_api(client):
    rows = client.get("/endpoints?api=wsf-terminals").get_json()
    assert rows
    assert {row["api"] for row in rows} == {"wsf-terminals"}


def test_proxy_returns_upstream_json(client, upstream):
    session = upstream(VESSEL)

    response = client.get("/wsf-vessels/fetch_vessel_basics_by_vessel_id?vesselId=1")

    assert response.status_code == 200
    assert response.get_json()["VesselName"] == "Cathlamet"
    assert session.calls[0].startswith("https://www.wsdot.wa.gov/ferries/api/vessels/rest/vesselbasics/1?")


def test_proxy_serves_repeat_requests_from_cache(client, upstream):
    session = upstream(VESSEL)

    client.get("/wsf-vessels/fetch_vessel_basics_by_vessel_id?vesselId=1")
    client.get("/wsf-vessels/fetch_vessel_basics_by_vessel_id?vesselId=1")

    assert len(session.calls) == 1


def test_proxy_missing_required_param(client, upstream):
    session = upstream(VESSEL)

    response = client.get("/wsf-vessels/fetch_vessel_basics_by_vessel_id")

    assert response.status_code == 400
    assert session.calls == []


def test_proxy_invalid_param_is_400(client, upstream):
    session = upstream(VESSEL)

    response = client.get("/wsf-vessels/fetch_vessel_basics_by_vessel_id?vesselId=abc")

    assert response.status_code == 400
    body = response.get_json()
    assert body["error"] == "TRANSFORM_ERROR"
    assert body["endpoint"] == "wsf-vessels:fetch_vessel_basics_by_vessel_id"
    assert session.calls == []


def test_proxy_upstream_failure_is_502(client, upstream):
    upstream(FakeResponse("nope", status_code=503, reason="Service Unavailable"))

    response = client.get("/wsdot-border-crossings/fetch_border_crossings")

    assert response.status_code == 502
    body = response.get_json()
    assert body["error"] == "API_ERROR"
    assert body["status"] == 503
    assert "TESTKEY" not in (body["url"] or "")


def test_proxy_list_params_are_split(client, upstream):
    session = upstream("[]")

    response = client.get("/wsdot-weather-information/fetch_weather_information_for_stations?StationList=1909,1910")

    assert response.status_code == 200
    assert "1909,1910" in session.calls[0]


def test_create_app_with_explicit_client(monkeypatch, make_client):
    monkeypatch.setattr(apis, "query_cache", apis.query_cache)
    wsdot_client, session = make_client(VESSEL)

    app = create_app(log_level="WARNING", client=wsdot_client)
    response = app.test_client().get("/wsf-vessels/fetch_vessel_basics_by_vessel_id?vesselId=1")

    assert response.status_code == 200
    assert apis.query_cache.client is wsdot_client
    assert len(session.calls) == 1
