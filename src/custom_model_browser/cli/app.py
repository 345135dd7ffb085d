"""Main CLI application for the custom model browser."""

from typing import Optional

import click
import rich_click as rich_click

from ..config import BrowserConfig
from ..errors import ConfigurationError
from ..logging import configure_logging
from .formatters import create_console, format_json
from .utils import ExitCode, get_cmb_env_vars, handle_error, resolve_format, resolve_log_level

# Configure rich-click
rich_click.rich_click.USE_RICH_MARKUP = True
rich_click.rich_click.USE_MARKDOWN = True
rich_click.rich_click.SHOW_ARGUMENTS = True
rich_click.rich_click.GROUP_ARGUMENTS_OPTIONS = True


@click.group(invoke_without_command=True)
@click.option(
    "--endpoint",
    type=str,
    help="Base URL of the serving control plane. Takes precedence over the CMB_ENDPOINT environment variable.",
)
@click.option(
    "--format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    help="Output format. Defaults to 'table' for TTY, 'json' for non-TTY.",
)
@click.option("--verbose", "-v", count=True, help="Increase verbosity (can be used multiple times).")
@click.option("--quiet", "-q", count=True, help="Decrease verbosity (can be used multiple times).")
@click.option("--debug", is_flag=True, help="Enable debug-level logging.")
@click.option("--no-color", is_flag=True, help="Disable color output.")
@click.option("--version", is_flag=True, is_eager=True, help="Print version information.")
@click.pass_context
def app(
    ctx: click.Context,
    endpoint: Optional[str] = None,
    format: Optional[str] = None,
    verbose: int = 0,
    quiet: int = 0,
    debug: bool = False,
    no_color: bool = False,
    version: bool = False,
) -> None:
    """Custom Model Browser - list and inspect custom model registrations.

    Custom language, embedding and rerank models registered with the serving
    control plane are grouped under three tabs. The last selected tab is
    remembered across sessions.

    Examples:
      # Show the cards of the last selected tab
      cmb models list

      # Search the embedding tab
      cmb models list --tab embedding --search bge

      # Inspect one registration
      cmb models get LLM my-llama
    """
    if version:
        from .. import __version__

        click.echo(f"CMB version: {__version__}")
        ctx.exit()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit()

    ctx.ensure_object(dict)

    log_level = resolve_log_level(verbose, quiet, debug)
    configure_logging(log_level)

    try:
        config = BrowserConfig(endpoint=endpoint)
    except ConfigurationError as e:
        handle_error(e, ExitCode.INVALID_USAGE)

    ctx.obj.update(
        {
            "config": config,
            "format": resolve_format(format),
            "format_explicit": format is not None,
            "verbose": verbose,
            "quiet": quiet,
            "debug": debug,
            "no_color": no_color,
            "log_level": log_level,
        }
    )


@app.command()
@click.pass_context
def env(ctx: click.Context) -> None:
    """Show the effective CMB_* environment variables and configuration."""
    env_vars = get_cmb_env_vars()
    config = ctx.obj["config"]
    if ctx.obj["format"] == "table":
        console = create_console(no_color=ctx.obj["no_color"])
        for key in sorted(env_vars):
            value = env_vars[key]
            console.print(f"[bold]{key}[/bold]: {value if value is not None else '[dim]not set[/dim]'}")
        console.print(f"\n[bold]Effective:[/bold] {config!r}")
    else:
        format_json(
            {
                "environment_variables": env_vars,
                "endpoint": config.endpoint,
                "timeout": config.timeout,
                "max_workers": config.max_workers,
            }
        )


# Import and register subcommands after the group exists
from .commands import models, tabs  # noqa: E402

app.add_command(models.models)
app.add_command(tabs.tabs)


if __name__ == "__main__":
    app()
