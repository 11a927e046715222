"""Command-line interface for error-state.

Each invocation builds one :class:`~error_state.state.ErrorState` from its
options and performs a single report, so shell scripts (and out-of-process
tests) get the same notices, log file and exit codes as Python callers.
"""

import logging
import sys

import click

from .cli_utils import abort
from .errors import LogWriteError
from .state import DEFAULT_LOG_FILENAME, ErrorState

_log_file_option = click.option(
    "--log-file", "-l",
    default=DEFAULT_LOG_FILENAME, show_default=True,
    type=click.Path(dir_okay=False),
    help="Error log file to overwrite.",
)


def _status(state: ErrorState) -> None:
    click.echo(
        click.style("Status: ", dim=True)
        + f"error={state.has_error_occurred()} (flag {state.get_error_flag()}), "
        + f"warning={state.has_warning_occurred()} (flag {state.get_warning_flag()})",
        err=True,
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr.")
@click.version_option(package_name="error-state")
def main(verbose: bool) -> None:
    """Report errors and warnings the way an application using error-state would.

    \b
    Examples
    --------
    Report an error and exit with status 3:

        error-state error load_config "config.toml not found" 3

    Report an error but keep going:

        error-state error --no-exit load_config "config.toml not found" 3
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@main.command()
@click.argument("function_name", metavar="FUNCTION")
@click.argument("message")
@click.argument("flag", type=int)
@_log_file_option
@click.option(
    "--no-exit", "no_exit", is_flag=True, default=False,
    help="Return normally instead of exiting with FLAG.",
)
def error(function_name: str, message: str, flag: int, log_file: str, no_exit: bool) -> None:
    """Print an error notice, write it to the log file and exit with FLAG."""
    state = ErrorState(log_filename=log_file, exit_on_error=not no_exit)
    try:
        state.report_error(function_name, message, flag)
    except LogWriteError as exc:
        abort(str(exc))
    _status(state)


@main.command()
@click.argument("function_name", metavar="FUNCTION")
@click.argument("message")
@click.argument("flag", type=int)
def warning(function_name: str, message: str, flag: int) -> None:
    """Print a warning notice. Never exits with FLAG and writes no file."""
    state = ErrorState()
    state.report_warning(function_name, message, flag)
    _status(state)


@main.command()
@click.argument("function_name", metavar="FUNCTION")
@click.argument("message")
@click.argument("flag", type=int)
@_log_file_option
def log(function_name: str, message: str, flag: int, log_file: str) -> None:
    """Write an error notice to the log file only."""
    state = ErrorState(log_filename=log_file, exit_on_error=False)
    try:
        state.log_error(function_name, message, flag)
    except LogWriteError as exc:
        abort(str(exc))
    click.echo(f"Wrote {state.get_log_filename()}", err=True)


if __name__ == "__main__":
    main()
