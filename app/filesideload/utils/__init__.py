"""Utility modules for filesideload.

This module exports commonly used utility functions.
"""

from filesideload.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_note,
    print_path,
    print_success,
    print_warning,
)
from filesideload.utils.sorting import natural_key, natural_sorted

__all__ = [
    "console",
    "err_console",
    "natural_key",
    "natural_sorted",
    "print_error",
    "print_info",
    "print_note",
    "print_path",
    "print_success",
    "print_warning",
]
