from .endpoints import wsdot_travel_times_api

__all__ = ["wsdot_travel_times_api"]
