from .endpoints import wsdot_traffic_flow_api

__all__ = ["wsdot_traffic_flow_api"]
