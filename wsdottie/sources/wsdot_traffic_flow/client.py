"""Fetch functions for the WSDOT Traffic Flow API."""

from wsdottie.core.fetch import make_fetch_function

from .endpoints import wsdot_traffic_flow_api as api

fetch_traffic_flows = make_fetch_function(api.endpoint("fetch_traffic_flows"))
fetch_traffic_flow_by_id = make_fetch_function(api.endpoint("fetch_traffic_flow_by_id"))
