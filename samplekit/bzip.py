"""A writer that bzip2-compresses what is written to it, and a command using it."""

from __future__ import annotations

import bz2
import shutil
import sys
from typing import BinaryIO

_BLOCK_SIZE = 9


class Writer:
    """Compress bytes written to it into an underlying binary stream.

    Closing flushes the compressed data; it does not close the underlying stream.
    """

    def __init__(self, out: BinaryIO) -> None:
        self._out = out
        self._compressor: bz2.BZ2Compressor | None = bz2.BZ2Compressor(_BLOCK_SIZE)

    @property
    def closed(self) -> bool:
        return self._compressor is None

    def write(self, data: bytes) -> int:
        """Compress ``data`` and return the number of uncompressed bytes consumed."""
        if self._compressor is None:
            raise ValueError("closed")
        view = memoryview(data)
        chunk = self._compressor.compress(view)
        if chunk:
            self._out.write(chunk)
        return view.nbytes

    def close(self) -> None:
        """Flush the compressed data and finish the stream."""
        if self._compressor is None:
            raise ValueError("closed")
        compressor, self._compressor = self._compressor, None
        self._out.write(compressor.flush())

    def __enter__(self) -> Writer:
        return self

    def __exit__(self, *exc: object) -> None:
        if not self.closed:
            self.close()


def main(argv: list[str] | None = None) -> int:
    """Read standard input, bzip2-compress it and write it to standard output."""
    out = sys.stdout.buffer
    w = Writer(out)
    try:
        shutil.copyfileobj(sys.stdin.buffer, w)
    except OSError as err:
        print(f"bzipper: {err}", file=sys.stderr)
        return 1
    try:
        w.close()
        out.flush()
    except OSError as err:
        print(f"bzipper: close: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())