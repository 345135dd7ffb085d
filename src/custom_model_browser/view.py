"""Headless state of the custom model launch screen.

The view owns the merged collection, the search term and the active tab. The
router and the model card are external collaborators passed in as callables:

    navigate(route)
    card_renderer(endpoint, descriptor, gpu_available, is_custom, model_type)

A tab switch re-runs aggregation without cancelling a cycle that is still in
flight, so a slow earlier cycle can overwrite the collection after a newer one.
"""

from typing import Any, Callable, Dict, List, Optional

from .aggregator import Aggregator
from .api_context import ApiContext
from .categories import Category, category_for_route
from .classifier import select_for_tab
from .client import RegistryClient
from .logging import LogEvent, log_debug, log_warning
from .preferences import SUB_TYPE_KEY, PreferenceStore
from .search import filter_registrations

CardRenderer = Callable[..., Any]
Navigator = Callable[[str], Any]

DEFAULT_TAB = Category.LLM.route


class CustomModelView:
    """Browse custom LLM, embedding and rerank registrations by tab."""

    def __init__(
        self,
        client: RegistryClient,
        api_context: Optional[ApiContext] = None,
        preferences: Optional[PreferenceStore] = None,
        navigate: Optional[Navigator] = None,
        card_renderer: Optional[CardRenderer] = None,
        gpu_available: Optional[bool] = None,
    ):
        """Initialize the view.

        Args:
            client: Registry client shared with the aggregator
            api_context: Busy flags; the process-wide context when None
            preferences: Durable store of the last active tab; a default
                         :class:`PreferenceStore` when None
            navigate: Called with the route on every tab switch
            card_renderer: Called once per visible registration by :meth:`render`
            gpu_available: Passed to language model cards only
        """
        self.client = client
        self.aggregator = Aggregator(client, api_context=api_context)
        self.preferences = preferences if preferences is not None else PreferenceStore()
        self.navigate = navigate
        self.card_renderer = card_renderer
        self.gpu_available = gpu_available
        # None means the operator has not searched; everything is shown
        self.search_term: Optional[str] = None
        self.active_tab = self._restore_tab()

    @property
    def endpoint(self) -> str:
        return self.client.endpoint

    @property
    def registrations(self) -> List[Dict[str, Any]]:
        return self.aggregator.registrations

    @property
    def active_category(self) -> Category:
        return Category.from_route(self.active_tab)

    def _restore_tab(self) -> str:
        stored = self.preferences.get(SUB_TYPE_KEY)
        if stored is None:
            return DEFAULT_TAB
        if category_for_route(stored) is None:
            log_warning(LogEvent.VIEW, "Ignoring unknown stored tab", route=stored)
            return DEFAULT_TAB
        return stored

    def mount(self) -> Optional[List[Dict[str, Any]]]:
        """Aggregate once as the view becomes active."""
        return self.aggregator.aggregate()

    def select_tab(self, route: str) -> None:
        """Switch tabs: re-aggregate, navigate and remember the route.

        Raises:
            ValueError: If the route is not one of the three tab routes
        """
        Category.from_route(route)
        self.active_tab = route
        self.aggregator.aggregate()
        if self.navigate is not None:
            self.navigate(route)
        self.preferences.set(SUB_TYPE_KEY, route)
        log_debug(LogEvent.VIEW, "Tab selected", route=route)

    def set_search_term(self, term: Optional[str]) -> None:
        """Update the search text; a cleared box shows everything again."""
        self.search_term = term if term else None

    def visible(self, tab: Optional[str] = None) -> List[Dict[str, Any]]:
        """Registrations shown under a tab, filtered and classified on each call.

        Args:
            tab: Tab route; the active tab when None
        """
        category = Category.from_route(tab or self.active_tab)
        collection = self.registrations
        if self.search_term is not None:
            collection = filter_registrations(collection, self.search_term)
        return select_for_tab(collection, category)

    def render(self, tab: Optional[str] = None) -> int:
        """Hand every visible registration of a tab to the card renderer.

        Returns:
            Number of cards rendered
        """
        if self.card_renderer is None:
            raise RuntimeError("No card renderer configured")

        category = Category.from_route(tab or self.active_tab)
        gpu_available = self.gpu_available if category is Category.LLM else None
        items = self.visible(category.route)
        for descriptor in items:
            self.card_renderer(
                self.endpoint,
                descriptor,
                gpu_available,
                is_custom=True,
                model_type=category.value,
            )
        return len(items)
