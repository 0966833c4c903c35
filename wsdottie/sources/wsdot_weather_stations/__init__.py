from .endpoints import wsdot_weather_stations_api

__all__ = ["wsdot_weather_stations_api"]
