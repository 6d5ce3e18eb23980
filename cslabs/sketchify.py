"""Outline the edges of an image in a single colour."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, Union

from cslabs.image import PNG
from cslabs.pixel import RGBAColor, RGBAPixel, rgb2hsl

EDGE_THRESHOLD = 0.3

JOBS = (
    ("given_imgs/in_0.png", "out_ubc.png"),
    ("given_imgs/in_1.png", "out_rose.png"),
    ("given_imgs/in_2.png", "out_icics.png"),
    ("given_imgs/in_3.png", "out_nest.png"),
)


def favorite_color(blue: int) -> RGBAPixel:
    """Return the outline colour with the given blue channel."""
    return RGBAPixel(64, 191, blue)


def _lightness(pixel: RGBAPixel) -> float:
    color = RGBAColor(pixel.r, pixel.g, pixel.b, int(pixel.a * 255.0) & 0xFF)
    return rgb2hsl(color).l


def edge_score(image: PNG, x: int, y: int) -> float:
    """Return how edge-like the pixel at ``(x, y)`` is.

    Eight times its lightness less that of each of its eight neighbours;
    requires ``1 <= x < width - 1`` and ``1 <= y < height - 1``.
    """
    score = 0.0
    for i in (-1, 0, 1):
        for j in (-1, 0, 1):
            lightness = _lightness(image.get_pixel(x + i, y + j))
            if i == 0 and j == 0:
                score += 8 * lightness
            else:
                score -= lightness
    return score


def sketchify(input_file: Union[str, "os.PathLike[str]"],
              output_file: Union[str, "os.PathLike[str]"]) -> None:
    """Write to ``output_file`` a white image with the edges of ``input_file`` drawn."""
    original = PNG()
    original.read_from_file(input_file)
    width, height = original.width, original.height
    output = PNG(width, height)
    color = favorite_color(169)

    for y in range(1, height - 1):
        for x in range(1, width - 1):
            if edge_score(original, x, y) > EDGE_THRESHOLD:
                target = output.get_pixel(x, y)
                target.r, target.g, target.b, target.a = color.r, color.g, color.b, color.a

    output.write_to_file(output_file)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sketchify the four sample images."""
    for source, target in JOBS:
        sketchify(source, target)
    return 0


if __name__ == "__main__":
    sys.exit(main())