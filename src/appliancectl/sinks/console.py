"""
Console event logger.

Writes event messages to standard output.
"""

import click

from appliancectl.sinks.base import EventLogger


class ConsoleLogger(EventLogger):
    """Event logger that prints to console."""

    PREFIX = "[Console] "

    def log(self, message: str) -> None:
        """Print message with console prefix."""
        click.echo(f"{self.PREFIX}{message}")
