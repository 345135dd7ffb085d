"""Path and environment handling for the custom model browser.

Durable files live in the platformdirs user state directory unless an
environment variable points somewhere else.
"""

import os
from pathlib import Path

import platformdirs

# Application name used for directory paths
APP_NAME = "custom-model-browser"

# Environment variable names
ENV_ENDPOINT = "CMB_ENDPOINT"
ENV_TIMEOUT = "CMB_TIMEOUT"
ENV_MAX_WORKERS = "CMB_MAX_WORKERS"
ENV_PREFERENCES_PATH = "CMB_PREFERENCES_PATH"

ENV_VARS = [ENV_ENDPOINT, ENV_TIMEOUT, ENV_MAX_WORKERS, ENV_PREFERENCES_PATH]

# Default filenames
PREFERENCES_FILENAME = "preferences.yml"


def get_user_state_dir() -> Path:
    """Get the path to the user's state directory for this application."""
    return Path(platformdirs.user_state_dir(APP_NAME))


def get_preferences_path() -> str:
    """Get the path to the preferences file.

    Returns:
        ``CMB_PREFERENCES_PATH`` when set, else the file in the user state directory
    """
    env_path = os.environ.get(ENV_PREFERENCES_PATH)
    if env_path:
        return env_path

    return str(get_user_state_dir() / PREFERENCES_FILENAME)
