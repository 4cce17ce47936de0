"""Shared Rich display functions for listings and cleanup results.

Provides reusable table builders and summary printers used by the
listing, plan and finalize commands.
"""

import json
from collections.abc import Mapping

from rich.markup import escape
from rich.table import Table

from filesideload.filesystem.models import ScanResult
from filesideload.ingest.cleanup import CleanupResult
from filesideload.utils.formatting import console, print_note, print_success


def create_listing_table(
    result: ScanResult,
    title: str,
    style: str = "file",
    labels: Mapping[str, str] | None = None,
) -> Table:
    """Create a Rich table displaying a listing.

    Args:
        result: Listing to display.
        title: Table title.
        style: Theme style for the path column ("file" or "directory").
        labels: Optional display label per root-relative path.

    Returns:
        Rich Table configured for listing display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("#", style="muted", justify="right", width=5)
    table.add_column("Path", no_wrap=True)
    if labels is not None:
        table.add_column("Value", style="muted")

    for index, path in enumerate(result, start=1):
        label = labels.get(path, path) if labels is not None else path
        row = [str(index), f"[{style}]{escape(label)}[/{style}]"]
        if labels is not None:
            row.append(escape(path))
        table.add_row(*row)

    return table


def print_listing_footer(result: ScanResult, noun: str) -> None:
    """Print the entry count and a hint when the listing was truncated."""
    console.print()
    print_note(f"{len(result)} {noun}(s) listed")
    if result.more_available:
        console.print("[warning](only the first ones are listed, raise the limit to see more)[/]")


def print_listing_json(result: ScanResult) -> None:
    """Display a listing as JSON."""
    data = {"paths": list(result.paths), "more_available": result.more_available}
    console.print_json(json.dumps(data))


def create_results_table(results: list[CleanupResult]) -> Table:
    """Create a Rich table displaying cleanup results.

    Args:
        results: List of cleanup results to display.

    Returns:
        Rich Table configured for results display.
    """
    table = Table(
        title="Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Path", no_wrap=True)
    table.add_column("Message")

    for result in results:
        if result.dry_run:
            status = "[info]DRY[/info]"
        elif result.success:
            status = "[success]OK[/success]"
        else:
            status = "[error]FAIL[/error]"
        table.add_row(status, escape(result.path), f"[muted]{escape(result.error or '')}[/muted]")

    return table


def print_results_summary(results: list[CleanupResult]) -> None:
    """Print a one-line summary of cleanup results."""
    succeeded = sum(1 for r in results if r.success)
    failed = len(results) - succeeded
    if failed == 0:
        print_success(f"All {succeeded} operation(s) completed successfully.")
    else:
        console.print(f"[warning]{succeeded} succeeded, {failed} failed.[/warning]")
