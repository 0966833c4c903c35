from .endpoints import wsdot_border_crossings_api

__all__ = ["wsdot_border_crossings_api"]
