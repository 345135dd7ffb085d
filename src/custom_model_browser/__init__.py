"""Browser for custom model registrations of a model-serving control plane.

This package retrieves the custom (non built-in) language, embedding and
rerank model registrations from the registry service, classifies them by
field heuristics, filters them by name and groups them under category tabs.
"""

# Version of the package
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _version

try:
    __version__ = _version("custom-model-browser")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Import main components for easier access
from .aggregator import Aggregator
from .api_context import ApiContext
from .categories import CATEGORIES, ROUTES, Category
from .classifier import classify, is_embedding, is_llm, is_rerank, select_for_tab
from .client import RegistryClient
from .config import BrowserConfig
from .errors import (
    ConfigurationError,
    CustomModelBrowserError,
    DecodeError,
    NetworkError,
    NotFound,
    RegistryClientError,
)
from .preferences import PreferenceStore
from .search import filter_registrations
from .view import CustomModelView

# Define public API
__all__ = [
    # Pipeline
    "RegistryClient",
    "Aggregator",
    "classify",
    "is_llm",
    "is_embedding",
    "is_rerank",
    "select_for_tab",
    "filter_registrations",
    # View state
    "CustomModelView",
    "ApiContext",
    "PreferenceStore",
    "BrowserConfig",
    "Category",
    "CATEGORIES",
    "ROUTES",
    # Errors
    "CustomModelBrowserError",
    "ConfigurationError",
    "RegistryClientError",
    "NetworkError",
    "DecodeError",
    "NotFound",
]
