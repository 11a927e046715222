"""Diagnostics for problems about reporting itself.

Notices go to stdout. Anything that goes wrong while producing one (a log
file that cannot be written, an unusable argument) is printed here on stderr
instead, so a caller capturing stdout sees only notices.
"""

import click


def warn(message: str) -> None:
    """Print a yellow ``Warning:`` line on stderr and carry on."""
    click.echo(click.style(f"Warning: {message}", fg="yellow"), err=True)


def abort(message: str, code: int = 1) -> None:
    """Print a red ``Error:`` line on stderr and exit with ``code``."""
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    raise SystemExit(code)
