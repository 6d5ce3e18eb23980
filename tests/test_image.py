import copy

import pytest

from cslabs.image import PNG
from cslabs.pixel import RGBAPixel


def _gradient(width, height):
    image = PNG(width, height)
    for y in range(height):
        for x in range(width):
            pixel = image.get_pixel(x, y)
            pixel.r = x * 10
            pixel.g = y * 10
            pixel.b = (x + y) * 5
    return image


def test_new_image_is_white():
    image = PNG(3, 2)
    assert (image.width, image.height) == (3, 2)
    assert image.get_pixel(2, 1) == RGBAPixel()


def test_get_pixel_returns_reference():
    image = PNG(2, 2)
    image.get_pixel(1, 0).r = 7
    assert image.get_pixel(1, 0).r == 7
    assert image.get_pixel(0, 0).r == 255


def test_get_pixel_clamps_with_warning():
    image = _gradient(3, 3)
    with pytest.warns(UserWarning):
        pixel = image.get_pixel(10, 1)
    assert pixel is image.get_pixel(2, 1)
    with pytest.warns(UserWarning):
        pixel = image.get_pixel(0, 99)
    assert pixel is image.get_pixel(0, 2)


def test_get_pixel_on_empty_image_raises():
    with pytest.raises(IndexError):
        PNG().get_pixel(0, 0)


def test_equality():
    assert _gradient(4, 3) == _gradient(4, 3)
    assert _gradient(4, 3) != _gradient(3, 4)
    other = _gradient(4, 3)
    other.get_pixel(0, 0).b = 99
    assert _gradient(4, 3) != other


def test_copy_is_independent():
    original = _gradient(3, 3)
    clone = copy.copy(original)
    assert clone == original
    clone.get_pixel(1, 1).r = 200
    assert clone != original


def test_write_and_read_round_trip(tmp_path):
    image = _gradient(5, 4)
    path = tmp_path / "out.png"
    image.write_to_file(path)
    loaded = PNG()
    loaded.read_from_file(path)
    assert loaded == image
    assert (loaded.width, loaded.height) == (5, 4)


def test_transparent_pixel_survives_round_trip(tmp_path):
    image = PNG(2, 1)
    image.get_pixel(0, 0).a = 0.0
    path = tmp_path / "alpha.png"
    image.write_to_file(path)
    loaded = PNG()
    loaded.read_from_file(path)
    assert loaded.get_pixel(0, 0).a == 0.0
    assert loaded.get_pixel(1, 0).a == 1.0


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        PNG().read_from_file(tmp_path / "missing.png")


def test_write_empty_image_raises(tmp_path):
    with pytest.raises(ValueError):
        PNG().write_to_file(tmp_path / "empty.png")


def test_resize_grow_keeps_pixels():
    image = _gradient(2, 2)
    original = copy.copy(image)
    image.resize(4, 3)
    assert (image.width, image.height) == (4, 3)
    for y in range(2):
        for x in range(2):
            assert image.get_pixel(x, y) == original.get_pixel(x, y)
    assert image.get_pixel(3, 2) == RGBAPixel()


def test_resize_shrink_crops():
    image = _gradient(4, 4)
    original = copy.copy(image)
    image.resize(2, 3)
    assert (image.width, image.height) == (2, 3)
    assert image.get_pixel(1, 2) == original.get_pixel(1, 2)