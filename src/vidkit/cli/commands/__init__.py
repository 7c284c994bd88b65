"""Command registration utilities for the vidkit CLI."""

from __future__ import annotations

import typer
from rich.console import Console

from vidkit.cli.commands import urls


def register_commands(app: typer.Typer, console: Console) -> None:
    """Attach command groups to the provided Typer application."""

    urls.register(app, console)


__all__ = ["register_commands"]
