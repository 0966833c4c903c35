"""Fetch functions for the WSDOT Weather Information API."""

from wsdottie.core.fetch import make_fetch_function

from .endpoints import wsdot_weather_information_api as api

fetch_weather_information = make_fetch_function(api.endpoint("fetch_weather_information"))
fetch_weather_information_by_station_id = make_fetch_function(
    api.endpoint("fetch_weather_information_by_station_id")
)
fetch_weather_information_for_stations = make_fetch_function(
    api.endpoint("fetch_weather_information_for_stations")
)
search_weather_information = make_fetch_function(api.endpoint("search_weather_information"))
