from .endpoints import wsdot_commercial_vehicle_restrictions_api

__all__ = ["wsdot_commercial_vehicle_restrictions_api"]
