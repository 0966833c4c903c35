"""Endpoint definitions for the extended weather readings feed."""

from wsdottie.core.cache import CacheStrategy
from wsdottie.endpoints.types import ApiDefinition, EndpointGroup, EndpointMeta

from .schemas import WeatherReading

wsdot_weather_readings_api = ApiDefinition(
    name="wsdot-weather-readings",
    title="WSDOT Weather Readings (extended)",
    base_path="/traffic/api/api",
    description="Detailed road weather station readings including pavement sensors.",
    groups=(
        EndpointGroup(
            name="weather-readings",
            description="Latest extended reading per station.",
            cache_strategy=CacheStrategy.FIVE_MINUTE_UPDATES,
            endpoints=(
                EndpointMeta(
                    function_name="fetch_weather_readings",
                    endpoint="/Scanweb",
                    output_type=list[WeatherReading],
                    description="List extended readings for every station.",
                ),
            ),
        ),
    ),
)
