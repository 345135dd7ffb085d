"""Helper functions for CLI operations."""

import os
import sys
from typing import Dict, Optional

import click

from ...config_paths import ENV_VARS
from ...errors import DecodeError, NetworkError, NotFound


class ExitCode:
    """Standard exit codes for the CLI."""

    SUCCESS = 0
    GENERIC_ERROR = 1
    INVALID_USAGE = 2
    MODEL_NOT_FOUND = 3
    BACKEND_ERROR = 4
    AGGREGATION_FAILED = 5


def resolve_format(cli_format: Optional[str] = None, default_tty: str = "table", default_non_tty: str = "json") -> str:
    """Resolve output format with TTY detection.

    Args:
        cli_format: Format specified via CLI flag
        default_tty: Default format for TTY output
        default_non_tty: Default format for non-TTY output

    Returns:
        Resolved format name
    """
    if cli_format:
        return cli_format.lower()

    if sys.stdout.isatty():
        return default_tty
    else:
        return default_non_tty


def resolve_log_level(verbose: int = 0, quiet: int = 0, debug: bool = False) -> str:
    """Map the verbosity flags to a logging level name."""
    if debug:
        return "DEBUG"
    if verbose > quiet:
        return "DEBUG" if verbose - quiet >= 2 else "INFO"
    if quiet > verbose:
        return "CRITICAL" if quiet - verbose >= 2 else "ERROR"
    return "WARNING"


def exit_code_for(error: Exception) -> int:
    """Pick the exit code matching an exception type."""
    if isinstance(error, NotFound):
        return ExitCode.MODEL_NOT_FOUND
    if isinstance(error, (NetworkError, DecodeError)):
        return ExitCode.BACKEND_ERROR
    if isinstance(error, (click.BadParameter, ValueError)):
        return ExitCode.INVALID_USAGE
    return ExitCode.GENERIC_ERROR


def handle_error(error: Exception, exit_code: Optional[int] = None) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        error: Exception to handle
        exit_code: Exit code to use; derived from the error type when None
    """
    click.echo(f"Error: {str(error)}", err=True)
    sys.exit(exit_code if exit_code is not None else exit_code_for(error))


def get_cmb_env_vars() -> Dict[str, Optional[str]]:
    """Get all CMB_* environment variables, listing the known ones even when unset."""
    cmb_vars: Dict[str, Optional[str]] = {key: value for key, value in os.environ.items() if key.startswith("CMB_")}
    for var in ENV_VARS:
        cmb_vars.setdefault(var, None)
    return cmb_vars
