"""Entry point of the filesideload command line.

Global options only control logging; the work happens in the
``config``, ``ls`` and ``ingest`` command groups.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from filesideload import __version__
from filesideload.cli.commands import config, ingest, ls
from filesideload.utils.formatting import err_console

app = typer.Typer(
    name="filesideload",
    help="Sideload files from a directory on the server.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.add_typer(config.app, name="config")
app.add_typer(ls.app, name="ls")
app.add_typer(ingest.app, name="ingest")


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"filesideload version {__version__}")
        raise typer.Exit()


def _log_level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    return logging.ERROR if quiet else logging.WARNING


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=_print_version,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug details to stderr.")
    ] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only log errors.")] = False,
) -> None:
    """filesideload - Sideload files from a directory on the server.

    Configure a sideload directory once, then list, verify and clean up
    the files and directories it offers for import.
    """
    # stdout carries results only.
    logging.basicConfig(
        level=_log_level(verbose, quiet),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


if __name__ == "__main__":
    app()
