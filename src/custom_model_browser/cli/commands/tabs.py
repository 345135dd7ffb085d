"""Tab preference commands for the CMB CLI."""

import click

from ...categories import ROUTES, Category, category_for_route
from ...preferences import SUB_TYPE_KEY, PreferenceStore
from ...view import DEFAULT_TAB
from ..formatters import create_console, format_json, format_tab_json, format_yaml
from ..utils import ExitCode, handle_error


@click.group()
def tabs() -> None:
    """Inspect and change the remembered tab."""
    pass


@tabs.command()
@click.pass_context
def current(ctx: click.Context) -> None:
    """Show the tab restored on the next launch and where it comes from."""
    try:
        store = PreferenceStore()
        stored = store.get(SUB_TYPE_KEY)
    except OSError as e:
        handle_error(e, ExitCode.GENERIC_ERROR)

    if category_for_route(stored) is not None:
        active_tab, source = stored, f"Preference ({store.path})"
    else:
        active_tab, source = DEFAULT_TAB, "Default"

    format_type = ctx.obj["format"]
    if format_type == "json":
        format_json(format_tab_json(active_tab, source, ROUTES))
    elif format_type == "yaml":
        format_yaml(format_tab_json(active_tab, source, ROUTES))
    else:
        console = create_console(no_color=ctx.obj["no_color"])
        console.print(f"[bold]Active Tab:[/bold] {active_tab}")
        console.print(f"[bold]Label:[/bold] {Category.from_route(active_tab).label}")
        console.print(f"[bold]Source:[/bold] {source}")


@tabs.command()
@click.argument("tab")
def select(tab: str) -> None:
    """Remember TAB (llm, embedding, rerank or a route) as the last active tab."""
    try:
        route = Category.parse(tab).route
    except ValueError as e:
        handle_error(click.BadParameter(str(e)), ExitCode.INVALID_USAGE)

    try:
        PreferenceStore().set(SUB_TYPE_KEY, route)
    except OSError as e:
        handle_error(e, ExitCode.GENERIC_ERROR)

    click.echo(route)
