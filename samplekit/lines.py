"""Line and character counting: duplicate lines, de-duplication, rune statistics."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Iterator

_UTF_MAX = 4
_ESCAPE_LOW, _ESCAPE_HIGH = 0xDC80, 0xDCFF


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def count_lines(lines: Iterable[str], stop: str | None = None) -> Counter[str]:
    """Count occurrences of each line, stopping at a line equal to ``stop``."""
    counts: Counter[str] = Counter()
    for raw in lines:
        line = _strip_eol(raw)
        if stop is not None and line == stop:
            break
        counts[line] += 1
    return counts


def count_files(paths: Iterable[str]) -> Counter[str]:
    """Count lines across files, each read whole and split on newlines.

    Files that cannot be read are reported on standard error and skipped.
    """
    counts: Counter[str] = Counter()
    for path in paths:
        try:
            with open(path, encoding="utf-8", errors="replace", newline="") as fh:
                data = fh.read()
        except OSError as err:
            print(f"dup: {err}", file=sys.stderr)
            continue
        counts.update(data.split("\n"))
    return counts


def duplicates(counts: Counter[str]) -> Iterator[tuple[str, int]]:
    """Yield ``(line, count)`` for every line seen more than once."""
    for line, n in counts.items():
        if n > 1:
            yield line, n


def dedup(lines: Iterable[str]) -> Iterator[str]:
    """Yield each distinct line once, in order of first appearance."""
    seen: set[str] = set()
    for raw in lines:
        line = _strip_eol(raw)
        if line not in seen:
            seen.add(line)
            yield line


@dataclass
class CharCounts:
    """Character statistics of a UTF-8 byte stream."""

    counts: Counter[str] = field(default_factory=Counter)
    utflen: list[int] = field(default_factory=lambda: [0] * (_UTF_MAX + 1))
    invalid: int = 0


def char_count(data: bytes) -> CharCounts:
    """Count characters, UTF-8 encoding lengths and invalid bytes in ``data``."""
    result = CharCounts()
    for ch in data.decode("utf-8", errors="surrogateescape"):
        if _ESCAPE_LOW <= ord(ch) <= _ESCAPE_HIGH:
            result.invalid += 1
            continue
        result.counts[ch] += 1
        result.utflen[len(ch.encode("utf-8"))] += 1
    return result


def _print_char_counts(stats: CharCounts) -> None:
    print("rune\tcount")
    for ch, n in stats.counts.items():
        print(f"{ch!r}\t{n}")
    print("\nlen\tcount")
    for size, n in enumerate(stats.utflen):
        if size > 0:
            print(f"{size}\t{n}")
    if stats.invalid > 0:
        print(f"\n{stats.invalid} invalid UTF-8 characters")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lines", description="Line and character counting.")
    sub = parser.add_subparsers(dest="command", required=True)
    dup = sub.add_parser("dup", help="print lines that appear more than once")
    dup.add_argument("files", nargs="*")
    sub.add_parser("dedup", help="print each distinct line once")
    sub.add_parser("charcount", help="count Unicode characters")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the ``dup``, ``dedup`` or ``charcount`` command."""
    opts = _parser().parse_args(argv)
    if opts.command == "dup":
        if opts.files:
            counts = count_files(opts.files)
        else:
            counts = count_lines(sys.stdin, stop="end")
        for line, n in duplicates(counts):
            print(f"{n}\t{line}")
    elif opts.command == "dedup":
        for line in dedup(sys.stdin):
            print(line)
    else:
        _print_char_counts(char_count(sys.stdin.buffer.read()))
    return 0


if __name__ == "__main__":
    sys.exit(main())