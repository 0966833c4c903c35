"""Fetch functions for the WSDOT Weather Stations API."""

from wsdottie.core.fetch import make_fetch_function

from .endpoints import wsdot_weather_stations_api as api

fetch_weather_stations = make_fetch_function(api.endpoint("fetch_weather_stations"))
