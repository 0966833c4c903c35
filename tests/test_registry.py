"""Invariants that must hold for every registered endpoint."""

import pytest

from wsdottie.core.cache import CacheStrategy
from wsdottie.core.urls import fill_template, template_placeholders
from wsdottie.endpoints import (
    all_apis,
    endpoints_by_api,
    endpoints_flat,
    find_api,
    find_cache_flush_endpoint,
    find_endpoint,
)
from wsdottie.endpoints.types import NoInput

EXPECTED_APIS = {
    "wsdot-border-crossings",
    "wsdot-bridge-clearances",
    "wsdot-commercial-vehicle-restrictions",
    "wsdot-highway-alerts",
    "wsdot-highway-cameras",
    "wsdot-mountain-pass-conditions",
    "wsdot-toll-rates",
    "wsdot-traffic-flow",
    "wsdot-travel-times",
    "wsdot-weather-information",
    "wsdot-weather-readings",
    "wsdot-weather-stations",
    "wsf-fares",
    "wsf-schedule",
    "wsf-terminals",
    "wsf-vessels",
}

ALL_ENDPOINTS = endpoints_flat()


def test_sixteen_api_families():
    assert {api.name for api in all_apis()} == EXPECTED_APIS


def test_function_names_are_unique():
    names = [ep.function_name for ep in ALL_ENDPOINTS]
    assert len(names) == len(set(names))


def test_endpoints_by_api_covers_everything():
    nested = endpoints_by_api()
    assert set(nested) == EXPECTED_APIS
    count = sum(len(fns) for groups in nested.values() for fns in groups.values())
    assert count == len(ALL_ENDPOINTS)


def test_find_endpoint_by_id_or_name():
    by_name = find_endpoint("fetch_vessel_locations")
    assert by_name is find_endpoint("wsf-vessels:fetch_vessel_locations")
    assert by_name.path == "/ferries/api/vessels/rest/vessellocations"
    assert by_name.cache_strategy is CacheStrategy.REALTIME_UPDATES
    assert find_endpoint("nope") is None
    assert find_api("wsf-fares").title == "WSF Fares API"


@pytest.mark.parametrize("api_name", sorted(n for n in EXPECTED_APIS if n.startswith("wsf-")))
def test_every_wsf_family_has_cache_flush_date(api_name):
    endpoint = find_cache_flush_endpoint(api_name)
    assert endpoint is not None
    assert endpoint.api == api_name
    assert endpoint.path.endswith("/cacheflushdate")
    assert endpoint.input_model is NoInput


def test_wsdot_families_have_no_cache_flush_date():
    assert find_cache_flush_endpoint("wsdot-border-crossings") is None


@pytest.mark.parametrize("endpoint", ALL_ENDPOINTS, ids=lambda ep: ep.id)
def test_placeholders_match_input_model(endpoint):
    placeholders = set(template_placeholders(endpoint.path))
    fields = set(endpoint.input_model.model_fields)
    assert placeholders == fields


@pytest.mark.parametrize("endpoint", ALL_ENDPOINTS, ids=lambda ep: ep.id)
def test_sample_params_validate_and_fill(endpoint):
    sample = endpoint.get_sample_params()
    params = endpoint.input_model.model_validate(sample).model_dump(exclude_none=True)
    path = fill_template(endpoint.path, params)
    assert "{" not in path


@pytest.mark.parametrize("endpoint", ALL_ENDPOINTS, ids=lambda ep: ep.id)
def test_required_params_have_samples(endpoint):
    required = {n for n, f in endpoint.input_model.model_fields.items() if f.is_required()}
    assert required <= set(endpoint.get_sample_params())


@pytest.mark.parametrize("endpoint", ALL_ENDPOINTS, ids=lambda ep: ep.id)
def test_metadata_is_complete(endpoint):
    assert endpoint.function_name.startswith(("fetch_", "search_"))
    assert endpoint.description
    assert endpoint.path.startswith("/")
    assert isinstance(endpoint.cache_strategy, CacheStrategy)
    assert endpoint.id == f"{endpoint.api}:{endpoint.function_name}"


def test_generated_client_modules_expose_every_endpoint():
    import importlib

    for api in all_apis():
        module = importlib.import_module(f"wsdottie.sources.{api.name.replace('-', '_')}.client")
        for endpoint in api.resolve():
            fn = getattr(module, endpoint.function_name)
            assert fn.endpoint.id == endpoint.id
