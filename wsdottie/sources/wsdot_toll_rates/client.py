"""Fetch functions for the WSDOT Toll Rates API."""

from wsdottie.core.fetch import make_fetch_function

from .endpoints import wsdot_toll_rates_api as api

fetch_toll_rates = make_fetch_function(api.endpoint("fetch_toll_rates"))
fetch_toll_trip_rates = make_fetch_function(api.endpoint("fetch_toll_trip_rates"))
fetch_toll_trip_version = make_fetch_function(api.endpoint("fetch_toll_trip_version"))
fetch_toll_trip_info = make_fetch_function(api.endpoint("fetch_toll_trip_info"))
fetch_trip_rates_by_date = make_fetch_function(api.endpoint("fetch_trip_rates_by_date"))
