"""CLI commands for filesideload.

This package contains all subcommand implementations.
"""

from filesideload.cli.commands import config, ingest, ls

__all__ = ["config", "ingest", "ls"]
