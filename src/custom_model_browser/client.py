"""Read-only client for the model registration service.

Typical usage:

    from custom_model_browser import BrowserConfig, Category, RegistryClient

    client = RegistryClient(BrowserConfig(endpoint="http://127.0.0.1:9997"))
    summaries = client.list_registrations(Category.EMBEDDING)
    descriptor = client.get_registration(Category.EMBEDDING, summaries[0]["model_name"])

Calls share no mutable state, so any number of them may run concurrently.
"""

from typing import Any, Dict, List, Optional, Union
from urllib.parse import quote

import requests

from .categories import Category
from .config import BrowserConfig
from .errors import DecodeError, NetworkError, NotFound
from .logging import LogEvent, log_debug

REGISTRATIONS_PATH = "/v1/model_registrations"


class RegistryClient:
    """Issues GET requests against ``/v1/model_registrations``."""

    def __init__(self, config: Optional[BrowserConfig] = None):
        self.config = config or BrowserConfig()

    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    def list_url(self, category: Category) -> str:
        return f"{self.endpoint}{REGISTRATIONS_PATH}/{Category(category).value}"

    def detail_url(self, category: Category, model_name: str) -> str:
        return f"{self.list_url(category)}/{quote(model_name, safe='')}"

    def list_registrations(self, category: Union[Category, str]) -> List[Dict[str, Any]]:
        """Fetch the registration summaries of one category.

        Args:
            category: Category to list, as a member or its name

        Returns:
            Summaries in service order, built-in ones included

        Raises:
            NetworkError: If the request fails or the service answers with an error status
            DecodeError: If the body is not a JSON list of objects with a ``model_name``
        """
        category = Category(category)
        url = self.list_url(category)
        payload = self._get_json(url)
        if not isinstance(payload, list):
            raise DecodeError(f"Expected a list of registrations, got {type(payload).__name__}", url=url)
        for item in payload:
            if not isinstance(item, dict) or not isinstance(item.get("model_name"), str):
                raise DecodeError("Registration summary without a model_name", url=url)

        log_debug(LogEvent.REGISTRY_CLIENT, "Listed registrations", category=category.value, count=len(payload))
        return payload

    def get_registration(self, category: Union[Category, str], model_name: str) -> Dict[str, Any]:
        """Fetch the full descriptor of one registration.

        Args:
            category: Category the registration was listed under
            model_name: Registered model name

        Returns:
            The descriptor as returned by the service

        Raises:
            NotFound: If the service answers 404
            NetworkError: If the request fails otherwise
            DecodeError: If the body is not a JSON object
        """
        category = Category(category)
        url = self.detail_url(category, model_name)
        payload = self._get_json(url, model_name=model_name, category=category)
        if not isinstance(payload, dict):
            raise DecodeError(f"Expected a registration object, got {type(payload).__name__}", url=url)
        return payload

    def _get_json(
        self,
        url: str,
        model_name: Optional[str] = None,
        category: Optional[Category] = None,
    ) -> Any:
        try:
            response = requests.get(url, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise NetworkError(f"Request to {url} failed: {e}", url=url) from e

        try:
            if response.status_code == 404 and model_name is not None and category is not None:
                raise NotFound(
                    f"Registration '{model_name}' not found in category '{category.value}'",
                    model_name=model_name,
                    category=category.value,
                    url=url,
                )
            if response.status_code != 200:
                raise NetworkError(f"HTTP error {response.status_code} from {url}", url=url)

            try:
                return response.json()
            except ValueError as e:
                raise DecodeError(f"Response from {url} is not valid JSON: {e}", url=url) from e
        finally:
            # Ensure response is closed to prevent resource leaks
            response.close()
