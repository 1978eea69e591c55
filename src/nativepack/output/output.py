"""Output helpers separating user-facing messages from machine output.

User-facing messages (progress, warnings, errors) go to stderr so that
stdout stays clean for data other tools may consume.
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Print a user-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", *, nl: bool = True) -> None:
    """Print machine-readable output to stdout."""
    click.echo(message, nl=nl)
