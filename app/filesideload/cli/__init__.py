"""CLI package for filesideload.

This package contains the Typer application and all subcommands.
"""

from filesideload.cli.main import app

__all__ = ["app"]
