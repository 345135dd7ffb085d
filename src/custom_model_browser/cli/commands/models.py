"""Model listing and inspection commands for the CMB CLI."""

from typing import Any, Dict, List, Optional

import click

from ...categories import CATEGORIES, Category
from ...client import RegistryClient
from ...errors import RegistryClientError
from ...preferences import PreferenceStore
from ...view import CustomModelView
from ..formatters import (
    create_console,
    format_cards_json,
    format_cards_table,
    format_descriptor_table,
    format_json,
    format_yaml,
)
from ..utils import ExitCode, handle_error

TAB_CHOICES = [category.tab_name for category in CATEGORIES] + ["all"]


class CardCollector:
    """Card renderer that records each card for later output."""

    def __init__(self) -> None:
        self.cards: List[Dict[str, Any]] = []

    def __call__(
        self,
        endpoint: str,
        descriptor: Dict[str, Any],
        gpu_available: Optional[bool] = None,
        is_custom: bool = True,
        model_type: str = Category.LLM.value,
    ) -> None:
        self.cards.append(
            {
                "endpoint": endpoint,
                "model_name": descriptor.get("model_name"),
                "model_type": model_type,
                "is_custom": is_custom,
                "gpu_available": gpu_available,
                "descriptor": descriptor,
            }
        )

    def take(self) -> List[Dict[str, Any]]:
        cards, self.cards = self.cards, []
        return cards


@click.group()
def models() -> None:
    """List and inspect custom model registrations."""
    pass


@models.command(name="list")
@click.option(
    "--tab",
    type=click.Choice(TAB_CHOICES, case_sensitive=False),
    help="Tab to show and remember as last active. Defaults to the last active tab.",
)
@click.option("--search", type=str, help="Only show models whose name contains this text (case-insensitive).")
@click.option("--gpu/--no-gpu", "gpu_available", default=None, help="Mark language model cards as launchable on GPU.")
@click.pass_context
def list_models(ctx: click.Context, tab: Optional[str], search: Optional[str], gpu_available: Optional[bool]) -> None:
    """List the custom registrations under their category tabs."""
    collector = CardCollector()
    try:
        view = CustomModelView(
            RegistryClient(ctx.obj["config"]),
            preferences=PreferenceStore(),
            card_renderer=collector,
            gpu_available=gpu_available,
        )

        if tab and tab.lower() != "all":
            view.select_tab(Category.parse(tab).route)
        else:
            view.mount()

        error = view.aggregator.last_error
        if error is not None:
            handle_error(error, ExitCode.AGGREGATION_FAILED)

        view.set_search_term(search)

        routes = [category.route for category in CATEGORIES] if tab and tab.lower() == "all" else [view.active_tab]
        cards: Dict[str, List[Dict[str, Any]]] = {}
        for route in routes:
            view.render(route)
            cards[route] = collector.take()

        format_type = ctx.obj["format"]
        if format_type == "table":
            console = create_console(no_color=ctx.obj["no_color"])
            for route, tab_cards in cards.items():
                format_cards_table(Category.from_route(route), tab_cards, console)
        elif format_type == "yaml":
            format_yaml(format_cards_json(cards, view.active_tab))
        else:
            format_json(format_cards_json(cards, view.active_tab))

    except OSError as e:
        handle_error(e, ExitCode.GENERIC_ERROR)


@models.command(name="get")
@click.argument("category")
@click.argument("model_name")
@click.pass_context
def get_model(ctx: click.Context, category: str, model_name: str) -> None:
    """Show the full descriptor of one registration.

    CATEGORY is one of llm, embedding or rerank.
    """
    try:
        parsed = Category.parse(category)
    except ValueError as e:
        handle_error(click.BadParameter(str(e)), ExitCode.INVALID_USAGE)

    try:
        descriptor = RegistryClient(ctx.obj["config"]).get_registration(parsed, model_name)
    except RegistryClientError as e:
        handle_error(e)

    format_type = ctx.obj["format"]
    if format_type == "table":
        format_descriptor_table(descriptor, create_console(no_color=ctx.obj["no_color"]))
    elif format_type == "yaml":
        format_yaml(descriptor)
    else:
        format_json(descriptor)
