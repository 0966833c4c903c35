from .endpoints import wsf_vessels_api

__all__ = ["wsf_vessels_api"]
