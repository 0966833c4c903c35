"""Fetch functions for the WSDOT Border Crossings API."""

from wsdottie.core.fetch import make_fetch_function

from .endpoints import wsdot_border_crossings_api as api

fetch_border_crossings = make_fetch_function(api.endpoint("fetch_border_crossings"))
