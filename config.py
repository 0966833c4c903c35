"""Configuration for the proxy application.

This module serves as the Flask configuration module.
Flask loads every uppercase attribute from it via app.config.from_object().
Values come from a local .env file or the system environment.
"""

from wsdottie.config.env import get_env

# Swagger UI: collapse all operations by default
SWAGGER_UI_DOC_EXPANSION = "none"

# Disable masking of Swagger documentation
RESTX_MASK_SWAGGER = False

# Keep flask-restx from appending "You have requested this URI..." to 404s
ERROR_404_HELP = False

# Key passed through to the upstream APIs (read again by the library itself)
WSDOT_ACCESS_TOKEN = get_env("WSDOT_ACCESS_TOKEN")
