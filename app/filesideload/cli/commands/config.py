"""Sideload settings commands.

Provides commands to display, update and validate the sideload
directory settings.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from filesideload.core.settings import (
    SettingsError,
    SideloadSettings,
    load_settings_or_default,
    save_settings,
    validate_directory,
)
from filesideload.filesystem.models import SideloadConfig
from filesideload.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Show and change sideload settings.",
    invoke_without_command=True,
    no_args_is_help=True,
)


def _load() -> SideloadSettings:
    """Load settings or exit with an error."""
    try:
        return load_settings_or_default()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command()
def show() -> None:
    """Display the current sideload settings."""
    settings = _load()
    config = SideloadConfig.from_settings(settings)

    table = Table(
        title="Sideload Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", style="muted")
    table.add_column("Value")

    unset = "[muted]-[/muted]"
    resolved = escape(str(config.root)) if config.root else "[error]unavailable[/error]"
    table.add_row("directory", escape(settings.directory) if settings.directory else unset)
    table.add_row("resolved", resolved)
    table.add_row("delete_file", "yes" if settings.delete_file else "no")
    table.add_row("max_files", str(settings.max_files or "unlimited"))
    table.add_row("max_directories", str(settings.max_directories or "unlimited"))
    table.add_row("user_directory", escape(settings.user_directory) or unset)

    console.print(table)


@app.command("set")
def set_(
    directory: Annotated[
        str | None,
        typer.Option("--directory", "-d", help="Absolute path of the sideload directory."),
    ] = None,
    delete_file: Annotated[
        bool | None,
        typer.Option(
            "--delete-file/--keep-file",
            help="Delete sideloaded files after import.",
        ),
    ] = None,
    max_files: Annotated[
        int | None,
        typer.Option("--max-files", min=0, help="Maximum number of files to list (0 = no limit)."),
    ] = None,
    max_directories: Annotated[
        int | None,
        typer.Option(
            "--max-directories",
            min=0,
            help="Maximum number of directories to list (0 = no limit).",
        ),
    ] = None,
    user_directory: Annotated[
        str | None,
        typer.Option("--user-directory", help="Sub-directory listed to users."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Save even if the directory is not usable."),
    ] = False,
) -> None:
    """Update sideload settings.

    Only the given options are changed. The directory is validated before
    saving: it must be readable, and writable when files are deleted
    after import.
    """
    current = _load()
    updates: dict[str, object] = {}
    if directory is not None:
        updates["directory"] = directory
    if delete_file is not None:
        updates["delete_file"] = delete_file
    if max_files is not None:
        updates["max_files"] = max_files
    if max_directories is not None:
        updates["max_directories"] = max_directories
    if user_directory is not None:
        updates["user_directory"] = user_directory

    if not updates:
        print_warning("Nothing to change.")
        return

    try:
        settings = SideloadSettings.model_validate({**current.model_dump(), **updates})
    except ValueError as e:
        print_error(f"Invalid settings: {e}")
        raise typer.Exit(code=1) from e

    problems = validate_directory(settings.directory, settings.delete_file)
    if problems and not force:
        for problem in problems:
            print_error(problem)
        raise typer.Exit(code=1)
    for problem in problems:
        print_warning(problem)

    try:
        path = save_settings(settings)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings saved to {path}")


@app.command()
def check() -> None:
    """Validate the configured sideload directory."""
    settings = _load()
    problems = validate_directory(settings.directory, settings.delete_file)
    if problems:
        for problem in problems:
            print_error(problem)
        raise typer.Exit(code=1)

    config = SideloadConfig.from_settings(settings)
    if config.user_root != config.root and config.user_root is not None:
        console.print(f"[muted]User directory:[/muted] {escape(str(config.user_root))}")
    elif settings.user_directory:
        print_warning(
            f"User directory '{settings.user_directory}' is not usable, "
            "the sideload directory is listed instead."
        )
    print_success(f"Sideload directory is usable: {config.root}")
