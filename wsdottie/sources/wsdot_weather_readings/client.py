"""Fetch functions for the WSDOT Weather Readings (extended)."""

from wsdottie.core.fetch import make_fetch_function

from .endpoints import wsdot_weather_readings_api as api

fetch_weather_readings = make_fetch_function(api.endpoint("fetch_weather_readings"))
