"""Convert a PNG or JPEG image into a JPEG image."""

from __future__ import annotations

import sys
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

_QUALITY = 95
_DECODERS = ("PNG", "JPEG")


def _flatten(img: Image.Image) -> Image.Image:
    if img.mode == "L":
        return img
    if "A" in img.getbands() or "transparency" in img.info:
        rgba = img.convert("RGBA")
        background = Image.new("RGBA", rgba.size, (0, 0, 0, 255))
        return Image.alpha_composite(background, rgba).convert("RGB")
    return img.convert("RGB")


def to_jpeg(src: BinaryIO, dst: BinaryIO) -> str:
    """Decode an image from ``src``, write it to ``dst`` as JPEG and return its input format.

    The input format is reported on standard error. Raises ``ValueError`` when
    the input is not a PNG or JPEG image.
    """
    try:
        img = Image.open(src, formats=_DECODERS)
        img.load()
    except UnidentifiedImageError:
        raise ValueError("image: unknown format") from None
    except OSError as err:
        raise ValueError(str(err)) from None
    kind = (img.format or "").lower()
    print("Input format =", kind, file=sys.stderr)
    _flatten(img).save(dst, format="JPEG", quality=_QUALITY)
    return kind


def main(argv: list[str] | None = None) -> int:
    """Read an image from standard input and write it as JPEG to standard output."""
    try:
        to_jpeg(sys.stdin.buffer, sys.stdout.buffer)
    except (ValueError, OSError) as err:
        print(f"jpeg: {err}", file=sys.stderr)
        return 1
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())