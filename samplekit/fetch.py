"""Fetch URLs, one after another or all at once with timings."""

from __future__ import annotations

import argparse
import shutil
import sys
import time
import urllib.error
import urllib.request
from concurrent.futures import ThreadPoolExecutor, as_completed
from contextlib import closing
from typing import Any, BinaryIO, Iterable, Iterator

_CHUNK = 64 * 1024


def _open(url: str) -> Any:
    try:
        return urllib.request.urlopen(url)
    except urllib.error.HTTPError as err:
        return err  # an error status still carries a response


def fetch(url: str, out: BinaryIO) -> None:
    """Write the URL, the response status and the body found at ``url`` to ``out``.

    ``http://`` is prepended when missing. Request failures propagate;
    failures while reading the body raise ``OSError``.
    """
    if not url.startswith("http://"):
        url = "http://" + url
    out.write(f"url ::  {url}\n".encode("utf-8"))
    with closing(_open(url)) as resp:
        out.write(f"Status :: {resp.getcode()} {resp.reason}\n".encode("utf-8"))
        try:
            shutil.copyfileobj(resp, out)
        except OSError as err:
            raise OSError(f"reading {url}: {err}") from err


def fetch_timing(url: str) -> str:
    """Fetch ``url`` and describe the time taken and bytes read, or the error."""
    start = time.perf_counter()
    try:
        resp = _open(url)
    except (OSError, ValueError) as err:
        return str(err)
    nbytes = 0
    with closing(resp):
        try:
            for chunk in iter(lambda: resp.read(_CHUNK), b""):
                nbytes += len(chunk)
        except OSError as err:
            return f"while reading {url}: {err}"
    secs = time.perf_counter() - start
    return f"{secs:.2f}s  {nbytes:7d}  {url}"


def fetch_all(urls: Iterable[str]) -> Iterator[str]:
    """Fetch every URL concurrently, yielding their reports as they complete."""
    targets = list(urls)
    if not targets:
        return
    with ThreadPoolExecutor(max_workers=len(targets)) as pool:
        futures = [pool.submit(fetch_timing, url) for url in targets]
        for future in as_completed(futures):
            yield future.result()


def main(argv: list[str] | None = None) -> int:
    """Print the content at each URL, or with ``--all`` fetch them in parallel with timings."""
    parser = argparse.ArgumentParser(prog="fetch", description="Fetch URLs.")
    parser.add_argument("--all", action="store_true", help="fetch in parallel, report timings")
    parser.add_argument("urls", nargs="*")
    opts = parser.parse_args(argv)
    out = sys.stdout.buffer
    if opts.all:
        start = time.perf_counter()
        for line in fetch_all(opts.urls):
            out.write(f"{line}\n".encode("utf-8"))
        out.write(f"{time.perf_counter() - start:.2f}s elapsed\n".encode("utf-8"))
        out.flush()
        return 0
    for url in opts.urls:
        try:
            fetch(url, out)
        except (OSError, ValueError) as err:
            out.flush()
            print(f"fetch: {err}", file=sys.stderr)
            return 1
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())