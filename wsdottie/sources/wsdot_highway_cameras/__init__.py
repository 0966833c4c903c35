from .endpoints import wsdot_highway_cameras_api

__all__ = ["wsdot_highway_cameras_api"]
