"""Fetch functions for the WSDOT Commercial Vehicle Restrictions API."""

from wsdottie.core.fetch import make_fetch_function

from .endpoints import wsdot_commercial_vehicle_restrictions_api as api

fetch_commercial_vehicle_restrictions = make_fetch_function(
    api.endpoint("fetch_commercial_vehicle_restrictions")
)
fetch_commercial_vehicle_restrictions_with_id = make_fetch_function(
    api.endpoint("fetch_commercial_vehicle_restrictions_with_id")
)
