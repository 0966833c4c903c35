"""Fetch functions for the WSDOT Bridge Clearances API."""

from wsdottie.core.fetch import make_fetch_function

from .endpoints import wsdot_bridge_clearances_api as api

fetch_bridge_clearances = make_fetch_function(api.endpoint("fetch_bridge_clearances"))
fetch_bridge_clearances_by_route = make_fetch_function(api.endpoint("fetch_bridge_clearances_by_route"))
