"""Configuration for wsdottie.

The library reads its API key and base URL once, either from an explicit
``WsdotConfig`` or from the environment / a local .env file.
"""

from wsdottie.config.settings import WsdotConfig, configure, get_config

__all__ = ["WsdotConfig", "configure", "get_config"]
