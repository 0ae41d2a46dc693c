"""Animated GIFs of random Lissajous figures."""

from __future__ import annotations

import argparse
import math
import random
import sys
from typing import Any, BinaryIO, Callable
from wsgiref.simple_server import make_server

from PIL import Image

CYCLES = 5  # number of complete x oscillator revolutions
RES = 0.001  # angular resolution
SIZE = 100  # image canvas covers [-SIZE..+SIZE]
NFRAMES = 64  # number of animation frames
DELAY = 8  # delay between frames in 10ms units

WHITE_INDEX = 0  # first color in palette
BLACK_INDEX = 1  # next color in palette
_PALETTE = [255, 255, 255, 0, 0, 0]


def _angles() -> list[float]:
    angles: list[float] = []
    limit = CYCLES * 2 * math.pi
    t = 0.0
    while t < limit:
        angles.append(t)
        t += RES
    return angles


def _to_pixel(v: float) -> int:
    return SIZE + int(v * SIZE + 0.5)


def lissajous(out: BinaryIO, rng: random.Random | None = None) -> None:
    """Write a GIF animation of a Lissajous figure with a random y frequency to ``out``."""
    source = rng if rng is not None else random.Random()
    freq = source.random() * 3.0  # relative frequency of y oscillator
    side = 2 * SIZE + 1
    angles = _angles()
    xs = [_to_pixel(math.sin(t)) for t in angles]
    phase = 0.0  # phase difference
    frames: list[Image.Image] = []
    for _ in range(NFRAMES):
        buf = bytearray(side * side)
        for t, px in zip(angles, xs):
            py = _to_pixel(math.sin(t * freq + phase))
            if 0 <= px < side and 0 <= py < side:
                buf[py * side + px] = BLACK_INDEX
        img = Image.frombytes("P", (side, side), bytes(buf))
        img.putpalette(_PALETTE)
        frames.append(img)
        phase += 0.1
    frames[0].save(
        out,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=DELAY * 10,
        loop=NFRAMES,
        optimize=False,
    )


class _Collector:
    def __init__(self) -> None:
        self.chunks: list[bytes] = []

    def write(self, data: bytes) -> int:
        self.chunks.append(bytes(data))
        return len(data)


def _app(environ: dict[str, Any], start_response: Callable[..., Any]) -> list[bytes]:
    sink = _Collector()
    lissajous(sink)  # type: ignore[arg-type]
    body = b"".join(sink.chunks)
    start_response(
        "200 OK", [("Content-Type", "image/gif"), ("Content-Length", str(len(body)))]
    )
    return [body]


def main(argv: list[str] | None = None) -> int:
    """Write an animation to standard output, or serve one per request with ``web``."""
    parser = argparse.ArgumentParser(prog="lissajous", description="Lissajous GIFs.")
    parser.add_argument("mode", nargs="?", choices=["web"])
    opts = parser.parse_args(argv)
    if opts.mode == "web":
        try:
            with make_server("localhost", 8000, _app) as server:
                server.serve_forever()
        except OSError as err:
            print(f"lissajous: {err}", file=sys.stderr)
            return 1
        except KeyboardInterrupt:
            pass
        return 0
    lissajous(sys.stdout.buffer)
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())