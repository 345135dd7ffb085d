"""Aggregation of custom model registrations across the three categories.

One cycle lists each category in turn (LLM, embedding, rerank), drops the
built-in registrations, expands the remaining ones into full descriptors with
a concurrent fan-out, and publishes the concatenation in a single assignment.

A cycle is all-or-nothing: any client failure aborts it and leaves the
previously published collection in place.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional

from .api_context import ApiContext
from .categories import CATEGORIES, Category
from .client import RegistryClient
from .errors import RegistryClientError
from .logging import LogEvent, log_debug, log_error, log_info


class Aggregator:
    """Builds and holds the merged collection of custom registrations."""

    def __init__(
        self,
        client: RegistryClient,
        api_context: Optional[ApiContext] = None,
        max_workers: Optional[int] = None,
    ):
        """Initialize the aggregator.

        Args:
            client: Registry client used for every request
            api_context: Busy flags to respect. If None, the process-wide
                         context is used.
            max_workers: Thread pool size for detail fetches. If None, the
                         client's configuration decides.
        """
        self.client = client
        self.api_context = api_context or ApiContext.get_default()
        self.max_workers = max_workers or client.config.max_workers
        self.registrations: List[Dict[str, Any]] = []
        self.last_error: Optional[RegistryClientError] = None
        self.cycles_completed = 0

    def aggregate(self) -> Optional[List[Dict[str, Any]]]:
        """Run one aggregation cycle.

        Returns:
            The newly published collection, or None when the cycle was dropped
            because the API context was busy or aborted because a request failed
        """
        with self.api_context.calling_api() as acquired:
            if not acquired:
                log_debug(LogEvent.AGGREGATION, "API busy, aggregation dropped")
                return None

            try:
                merged: List[Dict[str, Any]] = []
                for category in CATEGORIES:
                    merged.extend(self._collect_category(category))
            except RegistryClientError as e:
                self.last_error = e
                log_error(
                    LogEvent.AGGREGATION,
                    f"Aggregation failed: {e}",
                    error=str(e),
                    url=e.url,
                )
                return None

            self.registrations = merged
            self.last_error = None
            self.cycles_completed += 1
            log_info(LogEvent.AGGREGATION, "Aggregation completed", count=len(merged))
            return merged

    def _collect_category(self, category: Category) -> List[Dict[str, Any]]:
        summaries = self.client.list_registrations(category)
        custom = [summary for summary in summaries if not summary.get("is_builtin")]
        if not custom:
            return []

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(custom))) as executor:
            # Submit every request before waiting on any of them
            futures = [
                executor.submit(self.client.get_registration, category, summary["model_name"])
                for summary in custom
            ]
            descriptors = [future.result() for future in futures]

        log_debug(
            LogEvent.AGGREGATION,
            "Expanded custom registrations",
            category=category.value,
            listed=len(summaries),
            custom=len(custom),
        )
        return [{**descriptor, "is_builtin": summary.get("is_builtin", False)} for summary, descriptor in zip(custom, descriptors)]
