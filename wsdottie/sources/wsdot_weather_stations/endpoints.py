"""Endpoint definitions for the WSDOT Weather Stations API."""

from wsdottie.core.cache import CacheStrategy
from wsdottie.endpoints.types import ApiDefinition, EndpointGroup, EndpointMeta

from .schemas import WeatherStation

wsdot_weather_stations_api = ApiDefinition(
    name="wsdot-weather-stations",
    title="WSDOT Weather Stations API",
    base_path="/Traffic/api/WeatherStations/WeatherStationsREST.svc",
    description="Locations of roadside weather stations.",
    groups=(
        EndpointGroup(
            name="weather-stations",
            description="Station list; rarely changes.",
            cache_strategy=CacheStrategy.DAILY_STATIC,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_weather_stations",
                    endpoint="/GetCurrentStationsAsJson",
                    output_type=list[WeatherStation],
                    description="List all weather stations.",
                ),
            ),
        ),
    ),
)
