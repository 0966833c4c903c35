from .endpoints import wsdot_bridge_clearances_api

__all__ = ["wsdot_bridge_clearances_api"]
