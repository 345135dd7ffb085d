"""Model categories and the routes of their tabs."""

from enum import Enum
from typing import Optional


class Category(str, Enum):
    """Registry category, valued by its case-sensitive URL segment."""

    LLM = "LLM"
    EMBEDDING = "embedding"
    RERANK = "rerank"

    @property
    def route(self) -> str:
        """Navigable route of the category's tab."""
        return f"{ROUTE_PREFIX}/{_ROUTE_NAMES[self]}"

    @property
    def label(self) -> str:
        """Tab label."""
        return _LABELS[self]

    @property
    def tab_name(self) -> str:
        """Short name used on the command line, e.g. ``llm``."""
        return _ROUTE_NAMES[self]

    @classmethod
    def from_route(cls, route: str) -> "Category":
        """Look up the category of a tab route.

        Raises:
            ValueError: If the route is not one of the three tab routes
        """
        for category in cls:
            if category.route == route:
                return category
        raise ValueError(f"Unknown tab route '{route}'. Must be one of: {', '.join(ROUTES)}")

    @classmethod
    def parse(cls, value: str) -> "Category":
        """Parse a tab name, route or registry segment (case-insensitive).

        Raises:
            ValueError: If nothing matches
        """
        lowered = value.strip().lower()
        for category in cls:
            if lowered in (category.value.lower(), category.tab_name, category.route):
                return category
        raise ValueError(f"Unknown category '{value}'. Must be one of: {', '.join(c.tab_name for c in cls)}")


ROUTE_PREFIX = "/launch_model/custom"

_ROUTE_NAMES = {
    Category.LLM: "llm",
    Category.EMBEDDING: "embedding",
    Category.RERANK: "rerank",
}

_LABELS = {
    Category.LLM: "Language Models",
    Category.EMBEDDING: "Embedding Models",
    Category.RERANK: "Rerank Models",
}

# Aggregation and tab order
CATEGORIES = [Category.LLM, Category.EMBEDDING, Category.RERANK]

ROUTES = [category.route for category in CATEGORIES]


def category_for_route(route: Optional[str]) -> Optional[Category]:
    """Return the category of a route, or None for anything else."""
    if not isinstance(route, str):
        return None
    try:
        return Category.from_route(route)
    except ValueError:
        return None
