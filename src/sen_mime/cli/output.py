"""Output utilities for CLI commands with clear intent.

user_output: human-readable messages on stdout
error_output: failures and warnings on stderr
machine_output: structured data (JSON) on stdout
"""

import click


def user_output(message: str = "") -> None:
    """Print a message for the user on stdout."""
    click.echo(message)


def error_output(message: str) -> None:
    """Print an error or warning on stderr."""
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    """Print machine-readable data on stdout, unstyled."""
    click.echo(message, color=False)
