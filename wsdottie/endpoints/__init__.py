"""
Registry of every endpoint across all API families.

Each family's `ApiDefinition` lives in `wsdottie.sources.<family>.endpoints`;
this module aggregates them for tooling (CLI, OpenAPI generation, the proxy
server and the registry tests).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from wsdottie.endpoints.types import (
    ApiDefinition,
    Endpoint,
    EndpointGroup,
    EndpointMeta,
    NoInput,
    WsdotInput,
    WsdotModel,
)
from wsdottie.sources.wsdot_border_crossings import wsdot_border_crossings_api
from wsdottie.sources.wsdot_bridge_clearances import wsdot_bridge_clearances_api
from wsdottie.sources.wsdot_commercial_vehicle_restrictions import (
    wsdot_commercial_vehicle_restrictions_api,
)
from wsdottie.sources.wsdot_highway_alerts import wsdot_highway_alerts_api
from wsdottie.sources.wsdot_highway_cameras import wsdot_highway_cameras_api
from wsdottie.sources.wsdot_mountain_pass_conditions import wsdot_mountain_pass_conditions_api
from wsdottie.sources.wsdot_toll_rates import wsdot_toll_rates_api
from wsdottie.sources.wsdot_traffic_flow import wsdot_traffic_flow_api
from wsdottie.sources.wsdot_travel_times import wsdot_travel_times_api
from wsdottie.sources.wsdot_weather_information import wsdot_weather_information_api
from wsdottie.sources.wsdot_weather_readings import wsdot_weather_readings_api
from wsdottie.sources.wsdot_weather_stations import wsdot_weather_stations_api
from wsdottie.sources.wsf_fares import wsf_fares_api
from wsdottie.sources.wsf_schedule import wsf_schedule_api
from wsdottie.sources.wsf_terminals import wsf_terminals_api
from wsdottie.sources.wsf_vessels import wsf_vessels_api

__all__ = [
    "ApiDefinition",
    "Endpoint",
    "EndpointGroup",
    "EndpointMeta",
    "NoInput",
    "WsdotInput",
    "WsdotModel",
    "all_apis",
    "endpoints_by_api",
    "endpoints_flat",
    "find_api",
    "find_cache_flush_endpoint",
    "find_endpoint",
]

_APIS: tuple[ApiDefinition, ...] = (
    wsdot_border_crossings_api,
    wsdot_bridge_clearances_api,
    wsdot_commercial_vehicle_restrictions_api,
    wsdot_highway_alerts_api,
    wsdot_highway_cameras_api,
    wsdot_mountain_pass_conditions_api,
    wsdot_toll_rates_api,
    wsdot_traffic_flow_api,
    wsdot_travel_times_api,
    wsdot_weather_information_api,
    wsdot_weather_readings_api,
    wsdot_weather_stations_api,
    wsf_fares_api,
    wsf_schedule_api,
    wsf_terminals_api,
    wsf_vessels_api,
)

# WSF family -> the function name of its cache flush date endpoint
_CACHE_FLUSH_FUNCTIONS = {
    "wsf-fares": "fetch_cache_flush_date_fares",
    "wsf-schedule": "fetch_cache_flush_date_schedule",
    "wsf-terminals": "fetch_cache_flush_date_terminals",
    "wsf-vessels": "fetch_cache_flush_date_vessels",
}


def all_apis() -> tuple[ApiDefinition, ...]:
    return _APIS


def find_api(name: str) -> Optional[ApiDefinition]:
    return next((a for a in _APIS if a.name == name), None)


@lru_cache(maxsize=1)
def endpoints_flat() -> tuple[Endpoint, ...]:
    """Every resolved endpoint, in registry order."""
    return tuple(ep for api in _APIS for ep in api.resolve())


def endpoints_by_api() -> dict[str, dict[str, dict[str, Endpoint]]]:
    """Nested view: api name -> group name -> function name -> endpoint."""
    out: dict[str, dict[str, dict[str, Endpoint]]] = {}
    for ep in endpoints_flat():
        out.setdefault(ep.api, {}).setdefault(ep.group, {})[ep.function_name] = ep
    return out


@lru_cache(maxsize=1)
def _index() -> dict[str, Endpoint]:
    index: dict[str, Endpoint] = {}
    for ep in endpoints_flat():
        index[ep.id] = ep
        index[ep.function_name] = ep
    return index


def find_endpoint(name: str) -> Optional[Endpoint]:
    """Look up an endpoint by id (`api:function_name`) or bare function name."""
    return _index().get(name)


def find_cache_flush_endpoint(api_name: str) -> Optional[Endpoint]:
    """The cache flush date endpoint of a WSF family, or None for others."""
    function_name = _CACHE_FLUSH_FUNCTIONS.get(api_name)
    if function_name is None:
        return None
    return find_endpoint(f"{api_name}:{function_name}")
