from .endpoints import wsf_schedule_api

__all__ = ["wsf_schedule_api"]
