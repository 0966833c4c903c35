from datetime import timedelta

import pytest

from conftest import FakeResponse
from wsdottie.core.cache import CACHE_POLICIES, CacheStrategy, QueryCache, cache_key
from wsdottie.core.errors import ErrorCode, WsdotApiError
from wsdottie.endpoints import find_endpoint


class Clock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return Clock()


def _cache(client, clock, sleeps=None):
    return QueryCache(client, clock=clock, sleep=(sleeps.append if sleeps is not None else lambda s: None))


def test_every_strategy_has_a_policy():
    assert set(CACHE_POLICIES) == set(CacheStrategy)
    assert CacheStrategy.REALTIME_UPDATES.policy.stale_time == timedelta(seconds=5)
    assert CacheStrategy.NONE.policy.gc_time == timedelta(0)


def test_cache_key_is_order_independent():
    assert cache_key("a:b", {"x": 1, "y": 2}) == cache_key("a:b", {"y": 2, "x": 1})
    assert cache_key("a:b", None) == cache_key("a:b", {})
    assert cache_key("a:b", {"x": 1}) != cache_key("a:c", {"x": 1})


def test_fresh_entry_is_served_from_cache(make_client, clock):
    client, session = make_client("[]")
    cache = _cache(client, clock)
    endpoint = find_endpoint("fetch_border_crossings")  # FIVE_MINUTE_UPDATES

    assert cache.get(endpoint) == []
    clock.advance(60)
    assert cache.get(endpoint) == []
    assert len(session.calls) == 1

    clock.advance(5 * 60)
    cache.get(endpoint)
    assert len(session.calls) == 2


def test_params_are_part_of_the_key(make_client, clock):
    client, session = make_client("{}")
    cache = _cache(client, clock)
    endpoint = find_endpoint("fetch_alert_by_id")
    session.responses = ['{"AlertID": 1}', '{"AlertID": 2}']

    first = cache.get(endpoint, {"AlertID": 1})
    second = cache.get(endpoint, {"AlertID": 2})
    assert (first.AlertID, second.AlertID) == (1, 2)
    assert len(cache) == 2


def test_none_strategy_never_stores(make_client, clock):
    client, session = make_client("[]")
    cache = _cache(client, clock)
    endpoint = find_endpoint("fetch_border_crossings")

    cache.get(endpoint, strategy=CacheStrategy.NONE)
    cache.get(endpoint, strategy=CacheStrategy.NONE)
    assert len(session.calls) == 2
    assert len(cache) == 0


def test_retries_transient_failures(make_client, clock):
    client, session = make_client(
        FakeResponse("busy", status_code=503, reason="Service Unavailable"),
        FakeResponse("busy", status_code=503, reason="Service Unavailable"),
        "[]",
    )
    sleeps = []
    cache = _cache(client, clock, sleeps)
    endpoint = find_endpoint("fetch_border_crossings")  # retry 3, 5 s apart

    assert cache.get(endpoint) == []
    assert len(session.calls) == 3
    assert sleeps == [5.0, 5.0]


def test_gives_up_after_retry_budget(make_client, clock):
    client, session = make_client(FakeResponse("down", status_code=500, reason="Server Error"))
    cache = _cache(client, clock)
    endpoint = find_endpoint("fetch_alerts")  # MINUTE_UPDATES: no retries

    with pytest.raises(WsdotApiError) as excinfo:
        cache.get(endpoint)
    assert len(session.calls) == 1
    assert excinfo.value.context.retry_count == 0

    endpoint = find_endpoint("fetch_vessel_locations")  # REALTIME_UPDATES: 1 retry
    with pytest.raises(WsdotApiError) as excinfo:
        cache.get(endpoint)
    assert len(session.calls) == 3
    assert excinfo.value.context.retry_count == 1


def test_transform_errors_are_not_retried(make_client, clock):
    client, session = make_client('[{"CrossingName": "I5General"}]')
    cache = _cache(client, clock)
    with pytest.raises(WsdotApiError) as excinfo:
        cache.get(find_endpoint("fetch_border_crossings"))
    assert excinfo.value.code == ErrorCode.TRANSFORM_ERROR
    assert len(session.calls) == 1


def test_sweep_drops_entries_past_gc_time(make_client, clock):
    client, _ = make_client("[]")
    cache = _cache(client, clock)
    cache.get(find_endpoint("fetch_border_crossings"))  # gc 1 hour
    cache.get(find_endpoint("fetch_weather_stations"))  # gc 2 days

    clock.advance(2 * 3600)
    assert cache.sweep() == 1
    assert len(cache) == 1


def test_invalidate_by_api(make_client, clock):
    client, _ = make_client("[]")
    cache = _cache(client, clock)
    cache.get(find_endpoint("fetch_border_crossings"))
    cache.get(find_endpoint("fetch_weather_stations"))

    assert cache.invalidate("wsdot-border-crossings") == 1
    assert len(cache) == 1
    assert cache.invalidate() == 1
    assert len(cache) == 0


def test_flush_date_change_invalidates_family(make_client, clock):
    client, session = make_client(
        '"/Date(1700000000000)/"',
        "[]",
        '"/Date(1700000000000)/"',
        '"/Date(1800000000000)/"',
        "[]",
    )
    cache = _cache(client, clock)

    assert cache.check_flush_date("wsf-vessels") is False  # first sighting
    cache.get(find_endpoint("fetch_vessel_basics"))
    assert len(cache) == 1

    assert cache.check_flush_date("wsf-vessels") is False
    assert len(cache) == 1

    assert cache.check_flush_date("wsf-vessels") is True
    assert len(cache) == 0
    assert session.calls[0].startswith("https://www.wsdot.wa.gov/ferries/api/vessels/rest/cacheflushdate?")


def test_flush_date_requires_wsf_family(make_client, clock):
    client, _ = make_client("[]")
    with pytest.raises(KeyError):
        _cache(client, clock).check_flush_date("wsdot-border-crossings")
