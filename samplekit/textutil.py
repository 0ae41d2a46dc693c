"""Small string helpers: base names, digit grouping and list formatting."""

from __future__ import annotations

from typing import Iterable


def basename(s: str) -> str:
    """Remove directory components and a trailing ``.suffix``.

    e.g. a => a, a.go => a, a/b/c.go => c, a/b.c.go => b.c
    """
    name = s.rpartition("/")[2]
    stem, dot, _ = name.rpartition(".")
    return stem if dot else name


def comma(s: str) -> str:
    """Insert commas every three digits in a non-negative decimal integer string."""
    if len(s) <= 3:
        return s
    return comma(s[:-3]) + "," + s[-3:]


def ints_to_string(values: Iterable[int]) -> str:
    """Format integers like ``[1, 2, 3]``."""
    return "[" + ", ".join(str(v) for v in values) + "]"


def nonempty(strings: Iterable[str]) -> list[str]:
    """Return only the non-empty strings, in order."""
    return [s for s in strings if s != ""]