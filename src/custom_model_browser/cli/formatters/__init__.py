"""CLI formatters package."""

from .json import (
    format_cards_json,
    format_json,
    format_tab_json,
    format_yaml,
)
from .table import (
    create_console,
    format_cards_table,
    format_descriptor_table,
)

__all__ = [
    "format_json",
    "format_yaml",
    "format_cards_json",
    "format_tab_json",
    "create_console",
    "format_cards_table",
    "format_descriptor_table",
]
