"""Fetch functions for the WSDOT Travel Times API."""

from wsdottie.core.fetch import make_fetch_function

from .endpoints import wsdot_travel_times_api as api

fetch_travel_times = make_fetch_function(api.endpoint("fetch_travel_times"))
fetch_travel_time_by_id = make_fetch_function(api.endpoint("fetch_travel_time_by_id"))
