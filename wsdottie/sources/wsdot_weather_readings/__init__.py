from .endpoints import wsdot_weather_readings_api

__all__ = ["wsdot_weather_readings_api"]
