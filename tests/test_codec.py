import numpy as np
import pytest
from PIL import Image

from mandelbrot import PlaneWindow, parse_complex, parse_pair, read_image, render_parallel, write_image


def test_parse_pair():
    assert parse_pair("", ",", int) is None
    assert parse_pair("10,", ",", int) is None
    assert parse_pair(",10", ",", int) is None
    assert parse_pair("10,20", ",", int) == (10, 20)
    assert parse_pair("10,20xy", ",", int) is None
    assert parse_pair("0.5x", "x") is None
    assert parse_pair("0.5x1.5", "x") == (0.5, 1.5)


def test_parse_pair_splits_at_first_separator():
    assert parse_pair("1x2x3", "x", int) is None
    assert parse_pair("400x600", "x", int) == (400, 600)


def test_parse_complex():
    assert parse_complex("1.25,-0.0625") == complex(1.25, -0.0625)
    assert parse_complex(",-0.0625") is None
    assert parse_complex("-1.20,0.35") == complex(-1.2, 0.35)


def test_rendered_image_round_trip(tmp_path):
    bounds = (40, 30)
    pixels = render_parallel(bounds, PlaneWindow(complex(-2.0, 1.2), complex(0.6, -1.2)), workers=3)
    path = tmp_path / "mandel.png"

    write_image(path, pixels, bounds)
    restored, restored_bounds = read_image(path)

    assert restored_bounds == bounds
    assert restored.tobytes() == pixels.tobytes()


def test_written_file_is_grayscale_png(tmp_path):
    pixels = np.arange(6, dtype=np.uint8) * 40
    path = tmp_path / "gray.png"
    write_image(path, pixels, (3, 2))

    with Image.open(path) as image:
        assert image.format == "PNG"
        assert image.mode == "L"
        assert image.size == (3, 2)
        assert image.getpixel((2, 1)) == 200
        assert image.getpixel((0, 1)) == 120


def test_write_image_rejects_wrong_size(tmp_path):
    with pytest.raises(ValueError):
        write_image(tmp_path / "bad.png", np.zeros(5, dtype=np.uint8), (3, 2))


def test_read_image_rejects_color(tmp_path):
    path = tmp_path / "rgb.png"
    Image.new("RGB", (2, 2)).save(path)
    with pytest.raises(ValueError):
        read_image(path)
