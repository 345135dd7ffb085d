"""JSON and YAML output formatters for CLI."""

import datetime as _dt
import json
import sys
from enum import Enum as _Enum
from typing import Any, Dict, List, Optional, TextIO

import yaml


def _default_serializer(obj: Any) -> Any:
    """Serialize otherwise non-JSON-serializable objects.

    - datetime/date -> ISO 8601 string
    - Enum -> value (fallback to name)
    - Fallback -> str(obj)
    """
    if isinstance(obj, (_dt.datetime, _dt.date)):
        return obj.isoformat()
    if isinstance(obj, _Enum):
        return getattr(obj, "value", obj.name)
    return str(obj)


def format_json(data: Any, output: Optional[TextIO] = None, indent: int = 2) -> None:
    """Format data as JSON and write to output.

    Args:
        data: Data to format
        output: Output stream (defaults to stdout)
        indent: JSON indentation level
    """
    if output is None:
        output = sys.stdout

    json.dump(
        data,
        output,
        indent=indent,
        ensure_ascii=False,
        sort_keys=True,
        default=_default_serializer,
    )
    output.write("\n")


def format_yaml(data: Any, output: Optional[TextIO] = None) -> None:
    """Format data as YAML and write to output."""
    if output is None:
        output = sys.stdout

    # Round-trip through JSON so enums and dates become plain scalars
    plain = json.loads(json.dumps(data, default=_default_serializer))
    output.write(yaml.safe_dump(plain, default_flow_style=False, sort_keys=True))


def format_cards_json(cards: Dict[str, List[Dict[str, Any]]], active_tab: str) -> Dict[str, Any]:
    """Format rendered cards grouped by tab for JSON output.

    Args:
        cards: Cards keyed by tab route, in display order
        active_tab: Route of the active tab

    Returns:
        Formatted data structure
    """
    return {
        "active_tab": active_tab,
        "tabs": [{"route": route, "cards": tab_cards, "count": len(tab_cards)} for route, tab_cards in cards.items()],
        "count": sum(len(tab_cards) for tab_cards in cards.values()),
    }


def format_tab_json(active_tab: str, source: str, routes: List[str]) -> Dict[str, Any]:
    """Format the active tab information for JSON output."""
    return {"active_tab": active_tab, "source": source, "routes": routes}
