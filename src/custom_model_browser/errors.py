"""Error types for the custom model browser.

This module defines the error types raised while reading custom model
registrations from the registry service and while loading configuration.
"""

from typing import Optional


class CustomModelBrowserError(Exception):
    """Base class for all browser-related errors.

    This is the parent class for all package-specific exceptions.
    """

    pass


class ConfigurationError(CustomModelBrowserError):
    """Raised for errors related to configuration loading or validation."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        """Initialize configuration error.

        Args:
            message: Error message
            path: Optional path or variable name that caused the error
        """
        super().__init__(message)
        self.message = message
        self.path = path


class RegistryClientError(CustomModelBrowserError):
    """Base class for failures while talking to the registry service.

    The aggregator treats every subclass as one undifferentiated failure.
    """

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        """Initialize registry client error.

        Args:
            message: Error message
            url: Optional URL that was being accessed
        """
        super().__init__(message)
        self.message = message
        self.url = url


class NetworkError(RegistryClientError):
    """Raised when a request to the registry service fails.

    Examples:
        >>> try:
        ...     client.list_registrations(Category.LLM)
        ... except NetworkError as e:
        ...     print(f"Network error: {e.url}")
    """

    pass


class DecodeError(RegistryClientError):
    """Raised when a response cannot be parsed into the expected shape."""

    pass


class NotFound(RegistryClientError):
    """Raised when a detail fetch targets a registration the service does not know.

    Examples:
        >>> try:
        ...     client.get_registration(Category.LLM, "my-llm")
        ... except NotFound as e:
        ...     print(f"{e.category}/{e.model_name} is gone")
    """

    def __init__(
        self,
        message: str,
        model_name: str,
        category: str,
        url: Optional[str] = None,
    ) -> None:
        """Initialize not found error.

        Args:
            message: Error message
            model_name: The registration that was requested
            category: Registry category segment of the request
            url: Optional URL that was being accessed
        """
        super().__init__(message, url)
        self.model_name = model_name
        self.category = category

    def __str__(self) -> str:
        return self.message
