"""Case-insensitive natural ordering for path listings."""

import re
from collections.abc import Iterable

_DIGITS = re.compile(r"(\d+)")


def natural_key(value: str) -> tuple[tuple[int, int | str], ...]:
    """Build a sort key ordering "file2" before "file10", ignoring case.

    Digit runs compare numerically and text runs compare case-folded.
    Each part is tagged so that a number and a text run never get
    compared directly.

    Args:
        value: String to build the key for.

    Returns:
        Tuple usable as a ``sorted()`` key.
    """
    parts: list[tuple[int, int | str]] = []
    for index, chunk in enumerate(_DIGITS.split(value)):
        if not chunk:
            continue
        if index % 2:
            parts.append((0, int(chunk)))
        else:
            parts.append((1, chunk.casefold()))
    return tuple(parts)


def natural_sorted(values: Iterable[str]) -> list[str]:
    """Return values deduplicated and sorted in case-insensitive natural order.

    Ties between strings differing only by case are broken on the raw
    value so the result is stable across calls.
    """
    return sorted(set(values), key=lambda v: (natural_key(v), v))
