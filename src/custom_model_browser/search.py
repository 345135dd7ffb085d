"""Incremental name filtering of the merged collection."""

from typing import Any, Dict, List, Optional


def matches(registration: Optional[Dict[str, Any]], term: Any) -> bool:
    """Check whether a registration's name contains the search term.

    An empty or non-string term matches nothing. A registration without a
    ``model_name`` never matches.
    """
    if not registration or not isinstance(term, str) or term == "":
        return False
    model_name = registration.get("model_name")
    if not isinstance(model_name, str):
        return False
    return term.lower() in model_name.lower()


def filter_registrations(collection: List[Dict[str, Any]], term: Any) -> List[Dict[str, Any]]:
    """Narrow a collection to the registrations whose name contains ``term``.

    Args:
        collection: Descriptors in display order
        term: Search text, compared case-insensitively

    Returns:
        A new list preserving the input order
    """
    return [registration for registration in collection if matches(registration, term)]
