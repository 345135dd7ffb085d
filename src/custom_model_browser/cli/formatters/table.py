"""Rich table formatter for CLI output."""

import sys
from typing import Any, Dict, List, Optional, TextIO

from rich.console import Console
from rich.table import Table

from ...categories import Category

# Descriptor fields shown per tab, after the model name
_TAB_COLUMNS = {
    Category.LLM: [
        ("model_lang", "Languages"),
        ("model_ability", "Abilities"),
        ("context_length", "Context\nLength"),
    ],
    Category.EMBEDDING: [
        ("language", "Languages"),
        ("dimensions", "Dimensions"),
        ("max_tokens", "Max\nTokens"),
    ],
    Category.RERANK: [
        ("language", "Languages"),
        ("type", "Type"),
    ],
}


def create_console(output: Optional[TextIO] = None, no_color: bool = False) -> Console:
    """Create a Rich console instance.

    Args:
        output: Output stream (defaults to stdout)
        no_color: Disable color output

    Returns:
        Console instance
    """
    if output is None:
        output = sys.stdout

    return Console(file=output, no_color=no_color)


def _format_value(value: Any) -> str:
    if value is None:
        return "N/A"
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value) or "N/A"
    return str(value)


def format_cards_table(
    category: Category,
    cards: List[Dict[str, Any]],
    console: Optional[Console] = None,
) -> None:
    """Format the cards of one tab as a Rich table.

    Args:
        category: Category of the tab
        cards: Cards produced by the card renderer
        console: Rich console (will create if None)
    """
    if console is None:
        console = create_console()

    table = Table(title=f"{category.label} ({category.route})", show_header=True, header_style="bold magenta")
    table.add_column("Model", style="cyan", no_wrap=True)
    for _, header in _TAB_COLUMNS[category]:
        table.add_column(header, no_wrap=True)
    if category is Category.LLM:
        table.add_column("GPU", justify="center")

    for card in cards:
        descriptor = card["descriptor"]
        row = [str(descriptor.get("model_name", ""))]
        row.extend(_format_value(descriptor.get(field)) for field, _ in _TAB_COLUMNS[category])
        if category is Category.LLM:
            row.append(_format_value(card.get("gpu_available")))
        table.add_row(*row)

    console.print(table)


def format_descriptor_table(descriptor: Dict[str, Any], console: Optional[Console] = None) -> None:
    """Format one registration descriptor as a two-column Rich table."""
    if console is None:
        console = create_console()

    table = Table(title=str(descriptor.get("model_name", "Registration")), show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    for key in sorted(descriptor):
        table.add_row(key, _format_value(descriptor[key]))

    console.print(table)
