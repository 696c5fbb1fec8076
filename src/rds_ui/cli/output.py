"""Output helpers with clear intent.

user_output is for messages meant for the person at the terminal. It goes to
stderr so that stdout stays clean for anything a script may want to capture.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a user-facing message to stderr."""
    click.echo(message, nl=nl, err=True)
