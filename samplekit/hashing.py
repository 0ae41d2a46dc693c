"""Hash text with a SHA-2 algorithm chosen on the command line."""

from __future__ import annotations

import argparse
import hashlib
import sys

_ALGORITHMS = {"SHA512": hashlib.sha512, "SHA384": hashlib.sha384}

INVALID_ALGORITHM = "Not a valid algorithm"


def command_line_hash(algo: str, text: bytes) -> bytes:
    """Return the digest of ``text`` by ``SHA512`` or ``SHA384``.

    Raises ``ValueError`` for any other algorithm name.
    """
    try:
        make = _ALGORITHMS[algo]
    except KeyError:
        raise ValueError(INVALID_ALGORITHM) from None
    return make(text).digest()


def main(argv: list[str] | None = None) -> int:
    """Print the hex digest of ``-t`` text by the ``-a`` algorithm."""
    parser = argparse.ArgumentParser(prog="sha256", description="Hash some text.")
    parser.add_argument("-a", default="SHA256", metavar="ALGO", help="algorithm name")
    parser.add_argument(
        "-t", default="Hello World!", metavar="TEXT", help="Text which needs to be hashed"
    )
    opts = parser.parse_args(argv)
    text = opts.t.encode("utf-8")
    if opts.a or opts.t:
        try:
            result = command_line_hash(opts.a, text)
        except ValueError as err:
            result = str(err).encode("utf-8")
    else:
        result = hashlib.sha256(text).digest()
    print(f"{result.hex()} ")
    return 0


if __name__ == "__main__":
    sys.exit(main())