"""Listing commands for the sideload directory.

Provides commands to list the files and the directories available to
sideload, with paths shown relative to the sideload directory.
"""

from typing import Annotated

import typer

from filesideload.cli.display import (
    create_listing_table,
    print_listing_footer,
    print_listing_json,
)
from filesideload.cli.types import OutputFormat, require_filesystem
from filesideload.utils.formatting import console, print_info

app = typer.Typer(
    help="List files and directories available to sideload.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def files(
    directory: Annotated[
        str | None,
        typer.Argument(help="Directory to list (default: user directory)."),
    ] = None,
    recursive: Annotated[
        bool,
        typer.Option("--recursive/--flat", help="Include files of sub-directories."),
    ] = True,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", min=0, help="Maximum number of files (0 = no limit)."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
) -> None:
    """List files available to sideload."""
    fs = require_filesystem()
    config = fs.config

    if directory is None:
        result = fs.list_files(config.user_root, recursive, limit)
    else:
        result = fs.list_files(directory, recursive, limit)

    if output_format == OutputFormat.JSON:
        print_listing_json(result)
        return

    if not result:
        print_info("No file: add files in the directory or check its path.")
        return

    labels = None
    if directory is None and config.user_root != config.root:
        labels = {path: config.user_label(path) for path in result}

    console.print(create_listing_table(result, "Files to Sideload", "file", labels))
    print_listing_footer(result, "file")


@app.command()
def dirs(
    directory: Annotated[
        str | None,
        typer.Argument(help="Directory to walk (default: sideload directory)."),
    ] = None,
    depth: Annotated[
        int,
        typer.Option("--depth", min=-1, help="Levels to walk (-1 = unlimited, 0 = direct only)."),
    ] = -1,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", min=0, help="Maximum number of directories (0 = no limit)."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
) -> None:
    """List directories that can be sideloaded as a whole.

    Empty directories, and in deletion mode directories whose content
    could not be fully removed, are skipped.
    """
    fs = require_filesystem()
    result = fs.list_dirs(directory, depth, limit)

    if output_format == OutputFormat.JSON:
        print_listing_json(result)
        return

    if not result:
        print_info("No directory: add directories in the directory or check its path.")
        return

    console.print(create_listing_table(result, "Directories to Sideload", "directory"))
    print_listing_footer(result, "directory")
