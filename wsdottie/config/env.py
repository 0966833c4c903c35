"""Environment access for wsdottie.

Configuration can come from a local .env file or from the process
environment. The .env file wins when it defines the key.
"""

from os import environ
from pathlib import Path

from dotenv import dotenv_values

# Check if `.env` file exists in the current directory
# This allows the library to work with or without a .env file
env_path = Path(".") / ".env"

# Flag to indicate whether a local .env file is present
LOCAL_ENV_FILE = env_path.exists()

# dotenv_values() returns an empty dict when the file is missing
config = dotenv_values(env_path) if LOCAL_ENV_FILE else {}


def get_env(key):
    """Return environment variable from .env or native environment.

    It first checks the local .env file (if it exists), then falls back
    to system environment variables.

    Args:
        key (str): The environment variable key to retrieve

    Returns:
        str or None: The value of the environment variable, or None if not found
    """
    value = config.get(key) if LOCAL_ENV_FILE else None
    if value is None:
        value = environ.get(key)
    return value
