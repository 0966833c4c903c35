from .endpoints import wsdot_toll_rates_api

__all__ = ["wsdot_toll_rates_api"]
