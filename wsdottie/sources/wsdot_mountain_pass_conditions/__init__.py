from .endpoints import wsdot_mountain_pass_conditions_api

__all__ = ["wsdot_mountain_pass_conditions_api"]
