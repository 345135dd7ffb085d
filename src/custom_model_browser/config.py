"""Configuration for the registry client and aggregator."""

import os
from typing import Optional

from .config_paths import ENV_ENDPOINT, ENV_MAX_WORKERS, ENV_TIMEOUT
from .errors import ConfigurationError

DEFAULT_ENDPOINT = "http://127.0.0.1:9997"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_WORKERS = 8


class BrowserConfig:
    """Configuration for talking to the model registration service."""

    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        max_workers: Optional[int] = None,
    ):
        """Initialize browser configuration.

        Args:
            endpoint: Base URL of the serving control plane. If None,
                      ``CMB_ENDPOINT`` or the local default is used.
            timeout: Per-request transport timeout in seconds. If None,
                     ``CMB_TIMEOUT`` or 30 seconds is used.
            max_workers: Size of the detail fetch thread pool. If None,
                         ``CMB_MAX_WORKERS`` or 8 is used.

        Raises:
            ConfigurationError: If a value is out of range or not a number
        """
        endpoint = endpoint or os.getenv(ENV_ENDPOINT) or DEFAULT_ENDPOINT
        self.endpoint = endpoint.rstrip("/")
        if not self.endpoint:
            raise ConfigurationError("endpoint must not be empty", path=ENV_ENDPOINT)

        if timeout is None:
            timeout = _env_number(ENV_TIMEOUT, float, DEFAULT_TIMEOUT)
        if timeout <= 0:
            raise ConfigurationError("timeout must be positive", path=ENV_TIMEOUT)
        self.timeout = float(timeout)

        if max_workers is None:
            max_workers = _env_number(ENV_MAX_WORKERS, int, DEFAULT_MAX_WORKERS)
        if max_workers < 1:
            raise ConfigurationError("max_workers must be at least 1", path=ENV_MAX_WORKERS)
        if max_workers > 64:
            raise ConfigurationError("max_workers must not exceed 64", path=ENV_MAX_WORKERS)
        self.max_workers = int(max_workers)

    def __repr__(self) -> str:
        return f"BrowserConfig(endpoint={self.endpoint!r}, timeout={self.timeout}, max_workers={self.max_workers})"


def _env_number(name, cast, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}", path=name)
