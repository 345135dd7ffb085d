"""CLI commands package."""

from . import models, tabs

__all__ = ["models", "tabs"]
