"""Command-line front end for the vidkit URL engine.

``vidkit`` exposes the YouTube and TikTok helpers as shell commands: inspect a
link under a validation profile, normalise it to its canonical watch URL,
classify a YouTube link, convert between embed and short forms, and build share
links from a bare video id.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from vidkit.cli.commands import register_commands

HELP = "Validate, normalise and build YouTube and TikTok video URLs."


class CLIApplication:
    """Holds the shared console and the Typer app the URL commands are bound to."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()
        self._app = typer.Typer(
            help=HELP,
            add_completion=False,
            rich_markup_mode="rich",
            no_args_is_help=True,
        )
        register_commands(self._app, self.console)

    @property
    def app(self) -> typer.Typer:
        return self._app

    def run(self, *, prog_name: Optional[str] = None, args: Optional[list[str]] = None) -> None:
        """Dispatch ``args`` (``sys.argv`` when omitted) to the matching URL command."""

        self._app(prog_name=prog_name, args=args)


def create_app(console: Optional[Console] = None) -> typer.Typer:
    """Build the ``vidkit`` app printing through ``console``; tests pass a fixed-width one."""

    return CLIApplication(console=console).app


def main() -> None:
    """Entry point behind the ``vidkit`` script."""

    CLIApplication().run(prog_name="vidkit")


__all__ = ["CLIApplication", "create_app", "main"]
