import io

import pytest
from PIL import Image

from samplekit.mandelbrot import acos_color, main, mandelbrot, newton, render, sqrt_color


def test_origin_is_in_set():
    assert mandelbrot(0j) == (0, 0, 0)


def test_far_point_escapes_immediately():
    assert mandelbrot(2 + 2j) == (255, 255, 255)


@pytest.mark.parametrize("z", [0.3 + 0.5j, -1.5 + 0.1j, 0.26 + 0.01j, -0.75 + 0.2j])
def test_symmetric_under_conjugation(z):
    assert mandelbrot(z) == mandelbrot(z.conjugate())


@pytest.mark.parametrize("z", [1 + 0j, 0.4 + 0.3j, -1.9 + 0.0j])
def test_mandelbrot_is_gray(z):
    r, g, b = mandelbrot(z)
    assert r == g == b


def test_newton_root_converges_at_once():
    assert newton(1 + 0j) == (255, 255, 255)


def test_newton_at_zero_is_black():
    assert newton(0j) == (0, 0, 0)


@pytest.mark.parametrize("shade", [acos_color, sqrt_color])
@pytest.mark.parametrize("z", [0j, 1 + 1j, -1.5 - 0.5j, 2 + 0j])
def test_colors_are_bytes(shade, z):
    color = shade(z)
    assert len(color) == 3
    assert all(0 <= c <= 255 for c in color)


def test_render_size_and_symmetry():
    img = render(16, 16)
    assert img.size == (16, 16)
    for py in range(1, 16):
        for px in range(16):
            assert img.getpixel((px, py)) == img.getpixel((px, 16 - py))


def test_main_writes_png(capsysbinary):
    assert main(["--size", "8", "--function", "newton"]) == 0
    data = capsysbinary.readouterr().out
    img = Image.open(io.BytesIO(data))
    assert img.format == "PNG"
    assert img.size == (8, 8)