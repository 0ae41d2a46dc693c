"""Print command-line arguments joined by a separator."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, TextIO


def echo(newline: bool, sep: str, args: Iterable[str], out: TextIO | None = None) -> None:
    """Write ``args`` joined by ``sep`` to ``out``, optionally ending with a newline."""
    stream = sys.stdout if out is None else out
    stream.write(sep.join(args))
    if newline:
        stream.write("\n")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="echo", description="Print its arguments.")
    parser.add_argument("-n", action="store_true", help="omit trailing newline")
    parser.add_argument("-s", default=" ", metavar="SEP", help="separator")
    parser.add_argument("args", nargs="*")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse ``-n`` and ``-s`` and echo the remaining arguments."""
    opts = _parser().parse_args(argv)
    try:
        echo(not opts.n, opts.s, opts.args)
    except OSError as err:
        print(f"echo: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())