"""Shared Rich consoles and message helpers for the CLI.

Results go to stdout, diagnostics (warnings, errors, log records) to stderr.
Messages are escaped so that paths containing brackets print verbatim.
"""

import sys

from rich.console import Console
from rich.markup import escape

from filesideload.core.theme import get_theme

# Full hex colours on a terminal, Rich's own detection otherwise.
_COLOR_SYSTEM = "truecolor" if sys.stdout.isatty() else None

console = Console(theme=get_theme(), color_system=_COLOR_SYSTEM, highlight=False)
err_console = Console(
    theme=get_theme(), stderr=True, color_system=_COLOR_SYSTEM, highlight=False
)


def print_info(message: str) -> None:
    console.print(f"[info]{escape(message)}[/]")


def print_success(message: str) -> None:
    console.print(f"[success]{escape(message)}[/]")


def print_warning(message: str) -> None:
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_note(message: str) -> None:
    """Print a secondary line such as a count or a hint."""
    console.print(f"[dim]{escape(message)}[/]")


def print_path(path: object, kind: str = "file") -> None:
    """Print one path per line, unwrapped, styled as a file or directory.

    Args:
        path: Path to print, converted with str().
        kind: Theme style to use, "file" or "directory".
    """
    console.print(f"[{kind}]{escape(str(path))}[/]", soft_wrap=True)
