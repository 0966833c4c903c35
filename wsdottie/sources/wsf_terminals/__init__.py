from .endpoints import wsf_terminals_api

__all__ = ["wsf_terminals_api"]
