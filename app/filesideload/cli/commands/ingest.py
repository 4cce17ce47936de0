"""Request validation and post-import cleanup commands.

Provides commands to verify a single path, expand a sideload request
into the files it imports, and delete the sources once an external
import has succeeded.
"""

import json
from typing import Annotated

import typer

from filesideload.cli.display import create_results_table, print_results_summary
from filesideload.cli.types import OutputFormat, require_filesystem
from filesideload.ingest.cleanup import CleanupResult, SourceCleaner
from filesideload.ingest.planner import RequestPlanner
from filesideload.ingest.requests import (
    DirectoryRequest,
    SideloadRequest,
    SideloadRequestError,
    SingleFileRequest,
)
from filesideload.utils.formatting import (
    console,
    print_error,
    print_info,
    print_note,
    print_path,
    print_warning,
)

app = typer.Typer(
    help="Validate sideload requests and clean up imported sources.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def verify(
    path: Annotated[str, typer.Argument(help="Path relative to the sideload directory.")],
    directory: Annotated[
        bool,
        typer.Option("--dir", help="Expect a directory instead of a file."),
    ] = False,
) -> None:
    """Check a path and print its canonical location."""
    fs = require_filesystem()
    result = fs.check(path, as_directory=directory)
    if result.path is None:
        reason = result.reason.value if result.reason else "rejected"
        print_error(f"Rejected: {path} ({reason})")
        raise typer.Exit(code=1)
    print_path(result.path, "directory" if directory else "file")


@app.command()
def plan(
    target: Annotated[str, typer.Argument(help="File or directory to sideload.")],
    directory: Annotated[
        bool,
        typer.Option("--dir", help="Sideload every file of a directory."),
    ] = False,
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-r", help="Include files of sub-directories."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
) -> None:
    """Show the files a sideload request would import."""
    fs = require_filesystem()
    request: SideloadRequest = (
        DirectoryRequest(target, recursive) if directory else SingleFileRequest(target)
    )

    try:
        import_plan = RequestPlanner(fs).expand(request)
    except SideloadRequestError as e:
        print_error(e.message)
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        data = {
            "directory": str(import_plan.directory) if import_plan.directory else None,
            "recursive": import_plan.recursive,
            "files": [str(p) for p in import_plan.files],
        }
        console.print_json(json.dumps(data))
        return

    if not import_plan.files:
        print_info("No file to sideload in this directory.")
        return

    for path in import_plan.files:
        print_path(path)
    console.print()
    print_note(f"{len(import_plan.files)} file(s) to sideload")


@app.command()
def finalize(
    paths: Annotated[
        list[str] | None,
        typer.Argument(help="Imported files to delete from the sideload directory."),
    ] = None,
    directory: Annotated[
        str | None,
        typer.Option("--dir", help="Ingest directory to remove once it holds no file."),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete imported sources, then the emptied ingest directory."""
    fs = require_filesystem()
    cleaner = SourceCleaner(fs, dry_run=dry_run)
    files = paths or []

    if not cleaner.enabled:
        print_warning("Deletion after import is disabled in the settings, nothing to do.")
        return

    if not files and directory is None:
        print_info("Nothing to finalize.")
        return

    if not dry_run and not yes:
        confirmed = typer.confirm(
            f"Delete {len(files)} sideloaded file(s) from the sideload directory?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    results: list[CleanupResult] = cleaner.delete_sources(list(files))
    if directory is not None:
        results.append(cleaner.finalize_directory(directory))

    console.print(create_results_table(results))
    print_results_summary(results)

    if any(not r.success for r in results):
        raise typer.Exit(code=1)
