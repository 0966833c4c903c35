from .endpoints import wsdot_weather_information_api

__all__ = ["wsdot_weather_information_api"]
