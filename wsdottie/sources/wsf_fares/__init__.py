from .endpoints import wsf_fares_api

__all__ = ["wsf_fares_api"]
