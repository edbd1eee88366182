import pytest
import torch
from PIL import Image

from ray_tracer.canvas import Canvas
from ray_tracer.color import BLACK, color


def test_new_canvas_is_black():
    c = Canvas(10, 20)

    assert c.width == 10
    assert c.height == 20
    assert c.pixels.size() == (3, 20, 10)
    assert all(c.pixel_at(x, y) == BLACK for x in range(10) for y in range(20))


def test_write_pixel():
    c = Canvas(10, 20)
    red = color(1, 0, 0)
    c.write_pixel(2, 3, red)

    assert c.pixel_at(2, 3) == red
    assert c.pixel_at(3, 2) == BLACK


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (10, 0), (0, 20)])
def test_pixel_out_of_bounds(x, y):
    c = Canvas(10, 20)

    with pytest.raises(IndexError):
        c.write_pixel(x, y, color(1, 0, 0))
    with pytest.raises(IndexError):
        c.pixel_at(x, y)


def test_from_tensor():
    pixels = torch.rand(3, 4, 5)
    c = Canvas.from_tensor(pixels)

    assert (c.width, c.height) == (5, 4)
    assert c.pixels.dtype == torch.float64


def test_ppm_header():
    lines = Canvas(5, 3).to_ppm().split("\n")

    assert lines[:3] == ["P3", "5 3", "255"]


def test_ppm_pixel_data():
    c = Canvas(5, 3)
    c.write_pixel(0, 0, color(1.5, 0, 0))
    c.write_pixel(2, 1, color(0, 0.5, 0))
    c.write_pixel(4, 2, color(-0.5, 0, 1))

    ppm = c.to_ppm()
    lines = ppm.split("\n")

    assert ppm.endswith("\n")
    assert len(lines) == 3 + 5 * 3 + 1
    assert lines[3] == "255 0 0"
    assert lines[3 + 1 * 5 + 2] == "0 127 0"
    assert lines[3 + 2 * 5 + 4] == "0 0 255"
    assert lines[4] == "0 0 0"


def test_save_ppm(tmp_path):
    c = Canvas(2, 1)
    c.write_pixel(1, 0, color(1, 1, 1))
    path = tmp_path / "out" / "image.ppm"

    c.save(str(path))

    assert path.read_text() == "P3\n2 1\n255\n0 0 0\n255 255 255\n"


def test_save_png(tmp_path):
    c = Canvas(5, 3)
    c.write_pixel(0, 0, color(1.5, 0, 0))
    path = tmp_path / "image.png"

    c.save(str(path))

    image = Image.open(path)
    assert image.size == (5, 3)
    assert image.convert("RGB").getpixel((0, 0)) == (255, 0, 0)
    assert image.convert("RGB").getpixel((1, 0)) == (0, 0, 0)
