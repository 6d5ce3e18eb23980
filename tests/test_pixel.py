import pytest

from cslabs.pixel import HSLAColor, RGBAColor, RGBAPixel, hsl2rgb, rgb2hsl


def test_default_pixel_is_opaque_white():
    assert RGBAPixel() == RGBAPixel(255, 255, 255, 1.0)
    assert RGBAPixel().a == 1.0


def test_three_channel_pixel_is_opaque():
    pixel = RGBAPixel(10, 20, 30)
    assert (pixel.r, pixel.g, pixel.b, pixel.a) == (10, 20, 30, 1.0)


def test_transparent_pixels_are_equal():
    assert RGBAPixel(1, 2, 3, 0.0) == RGBAPixel(200, 100, 50, 0.0)


def test_different_channels_are_unequal():
    assert not (RGBAPixel(1, 2, 3) == RGBAPixel(1, 2, 4))
    assert RGBAPixel(1, 2, 3, 0.5) != RGBAPixel(1, 2, 3, 1.0)


def test_one_transparent_pixel_differs_from_opaque():
    assert RGBAPixel(1, 2, 3, 0.0) != RGBAPixel(1, 2, 3, 1.0)


def test_pure_red_to_hsl():
    hsl = rgb2hsl(RGBAColor(255, 0, 0, 255))
    assert hsl.h == pytest.approx(0.0)
    assert hsl.s == pytest.approx(1.0)
    assert hsl.l == pytest.approx(0.5)
    assert hsl.a == pytest.approx(1.0)


def test_grey_has_no_hue_or_saturation():
    hsl = rgb2hsl(RGBAColor(128, 128, 128, 255))
    assert hsl.h == 0
    assert hsl.s == 0


def test_hue_is_within_range():
    for color in [RGBAColor(255, 0, 1, 255), RGBAColor(3, 250, 7, 255),
                  RGBAColor(9, 8, 240, 255)]:
        hsl = rgb2hsl(color)
        assert 0 <= hsl.h <= 360
        assert 0 <= hsl.s <= 1
        assert 0 <= hsl.l <= 1


@pytest.mark.parametrize("color", [
    RGBAColor(255, 0, 0, 255),
    RGBAColor(0, 255, 0, 255),
    RGBAColor(0, 0, 255, 255),
    RGBAColor(12, 200, 99, 128),
    RGBAColor(0, 0, 0, 0),
    RGBAColor(255, 255, 255, 255),
    RGBAColor(30, 60, 90, 255),
    RGBAColor(200, 100, 50, 10),
    RGBAColor(255, 0, 1, 255),
    RGBAColor(128, 128, 128, 64),
])
def test_rgb_hsl_round_trip(color):
    assert hsl2rgb(rgb2hsl(color)) == color


def test_low_saturation_gives_grey():
    rgb = hsl2rgb(HSLAColor(200.0, 0.0, 1.0, 1.0))
    assert rgb.r == rgb.g == rgb.b == 255
    assert rgb.a == 255