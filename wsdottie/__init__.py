"""
Typed Python client for the WSDOT Traveler Information and WSF APIs.

Per-endpoint fetch functions live in ``wsdottie.sources.<family>.client``:

    from wsdottie.sources.wsf_vessels.client import fetch_vessel_locations

    locations = fetch_vessel_locations()
"""

from wsdottie.config.settings import WsdotConfig, configure, get_config
from wsdottie.core.cache import CacheStrategy, QueryCache
from wsdottie.core.errors import ErrorCode, ParseError, WsdotApiError, WsdotError
from wsdottie.core.fetch import (
    WsdotClient,
    fetch_dottie,
    fetch_native,
    get_default_client,
)
from wsdottie.core.normalize import parse_wsdot_json

__version__ = "0.9.0"

__all__ = [
    "CacheStrategy",
    "ErrorCode",
    "ParseError",
    "QueryCache",
    "WsdotApiError",
    "WsdotClient",
    "WsdotConfig",
    "WsdotError",
    "configure",
    "fetch_dottie",
    "fetch_native",
    "get_config",
    "get_default_client",
    "parse_wsdot_json",
]
