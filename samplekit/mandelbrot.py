"""PNG images of the Mandelbrot fractal and a few other complex functions."""

from __future__ import annotations

import argparse
import cmath
import math
import sys
from typing import Callable

from PIL import Image

Color = tuple[int, int, int]

XMIN, YMIN, XMAX, YMAX = -2, -2, 2, 2
WIDTH, HEIGHT = 1024, 1024

_BLACK: Color = (0, 0, 0)


def _gray(y: int) -> Color:
    y &= 0xFF
    return (y, y, y)


def _u8(x: float) -> int:
    if math.isnan(x) or math.isinf(x):
        return 0
    return int(x) & 0xFF


def _clamp_channel(v: int) -> int:
    if 0 <= v <= 0xFFFFFF:
        return v >> 16
    return 0 if v < 0 else 0xFF


def _ycbcr_to_rgb(y: int, cb: int, cr: int) -> Color:
    yy1 = y * 0x10101
    cb1 = cb - 128
    cr1 = cr - 128
    r = yy1 + 91881 * cr1
    g = yy1 - 22554 * cb1 - 46802 * cr1
    b = yy1 + 116130 * cb1
    return (_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))


def mandelbrot(z: complex) -> Color:
    """Shade ``z`` by how quickly the Mandelbrot iteration escapes; black if it does not."""
    iterations, contrast = 200, 15
    v = 0j
    for n in range(iterations):
        v = v * v + z
        if abs(v) > 2:
            return _gray(255 - contrast * n)
    return _BLACK


def acos_color(z: complex) -> Color:
    """Colour ``z`` by its complex arc cosine."""
    v = cmath.acos(z)
    blue = (_u8(v.real * 128) + 127) & 0xFF
    red = (_u8(v.imag * 128) + 127) & 0xFF
    return _ycbcr_to_rgb(192, blue, red)


def sqrt_color(z: complex) -> Color:
    """Colour ``z`` by its complex square root."""
    v = cmath.sqrt(z)
    blue = (_u8(v.real * 128) + 127) & 0xFF
    red = (_u8(v.imag * 128) + 127) & 0xFF
    return _ycbcr_to_rgb(128, blue, red)


def newton(z: complex) -> Color:
    """Shade ``z`` by how fast Newton's method converges to a root of z**4 - 1."""
    iterations, contrast = 37, 7
    try:
        for i in range(iterations):
            z -= (z - 1 / (z * z * z)) / 4
            if abs(z * z * z * z - 1) < 1e-6:
                return _gray(255 - contrast * i)
    except (ZeroDivisionError, OverflowError):
        pass
    return _BLACK


def render(
    width: int = WIDTH, height: int = HEIGHT, shade: Callable[[complex], Color] = mandelbrot
) -> Image.Image:
    """Return an RGB image of ``shade`` over the square from -2-2i to 2+2i."""
    pixels: list[Color] = []
    for py in range(height):
        y = py / height * (YMAX - YMIN) + YMIN
        for px in range(width):
            x = px / width * (XMAX - XMIN) + XMIN
            pixels.append(shade(complex(x, y)))
    img = Image.new("RGB", (width, height))
    img.putdata(pixels)
    return img


_SHADES: dict[str, Callable[[complex], Color]] = {
    "mandelbrot": mandelbrot,
    "acos": acos_color,
    "sqrt": sqrt_color,
    "newton": newton,
}


def main(argv: list[str] | None = None) -> int:
    """Write a PNG image of the chosen function to standard output."""
    parser = argparse.ArgumentParser(prog="mandelbrot", description="Fractal PNG images.")
    parser.add_argument("--function", choices=sorted(_SHADES), default="mandelbrot")
    parser.add_argument("--size", type=int, default=WIDTH)
    opts = parser.parse_args(argv)
    if opts.size <= 0:
        parser.error("size must be positive")
    img = render(opts.size, opts.size, _SHADES[opts.function])
    img.save(sys.stdout.buffer, format="PNG")
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())