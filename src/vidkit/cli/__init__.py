"""Command-line interface package for vidkit."""

from vidkit.cli.main import CLIApplication, create_app

__all__ = ["CLIApplication", "create_app"]
