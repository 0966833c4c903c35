"""Fetch functions for the WSDOT Mountain Pass Conditions API."""

from wsdottie.core.fetch import make_fetch_function

from .endpoints import wsdot_mountain_pass_conditions_api as api

fetch_mountain_pass_conditions = make_fetch_function(api.endpoint("fetch_mountain_pass_conditions"))
fetch_mountain_pass_condition_by_id = make_fetch_function(api.endpoint("fetch_mountain_pass_condition_by_id"))
