from .endpoints import wsdot_highway_alerts_api

__all__ = ["wsdot_highway_alerts_api"]
