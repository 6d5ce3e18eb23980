"""An in-memory RGBA image that reads and writes PNG files."""

from __future__ import annotations

import warnings
from typing import Union

from PIL import Image

from cslabs.pixel import RGBAPixel

PathLike = Union[str, "os.PathLike[str]"]


class PNG:
    """A grid of mutable RGBA pixels; (0, 0) is the upper left corner."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._width = width
        self._height = height
        self._pixels = [RGBAPixel() for _ in range(width * height)]

    @property
    def width(self) -> int:
        """Width of the image in pixels."""
        return self._width

    @property
    def height(self) -> int:
        """Height of the image in pixels."""
        return self._height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PNG):
            return NotImplemented
        return (self._width == other._width and self._height == other._height
                and self._pixels == other._pixels)

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> "PNG":
        clone = PNG()
        clone._width = self._width
        clone._height = self._height
        clone._pixels = [RGBAPixel(p.r, p.g, p.b, p.a) for p in self._pixels]
        return clone

    def read_from_file(self, filename: PathLike) -> None:
        """Replace this image with the PNG file ``filename``.

        Raises ``OSError`` when the file cannot be read or decoded.
        """
        with Image.open(filename) as source:
            rgba = source.convert("RGBA")
            width, height = rgba.size
            data = rgba.tobytes()
        self._width = width
        self._height = height
        self._pixels = [
            RGBAPixel(data[i], data[i + 1], data[i + 2], data[i + 3] / 255.0)
            for i in range(0, len(data), 4)
        ]

    def write_to_file(self, filename: PathLike) -> None:
        """Write this image to ``filename`` as a PNG file.

        Raises ``ValueError`` for an image with no pixels.
        """
        if self._width == 0 or self._height == 0:
            raise ValueError("cannot write an image with zero width or height")
        data = bytearray()
        for p in self._pixels:
            data += bytes((p.r, p.g, p.b, int(p.a * 255) & 0xFF))
        Image.frombytes("RGBA", (self._width, self._height), bytes(data)).save(
            filename, format="PNG")

    def get_pixel(self, x: int, y: int) -> RGBAPixel:
        """Return the pixel at ``(x, y)``; changing it changes the image.

        Coordinates outside the image are clamped to the last column or row,
        with a warning. Raises ``IndexError`` for an image with no pixels.
        """
        if self._width == 0 or self._height == 0:
            raise IndexError("get_pixel called on an image with no pixels")
        if x < 0 or x >= self._width:
            warnings.warn(
                f"get_pixel({x},{y}) is outside the image width {self._width}; "
                f"truncating x to {self._width - 1}", stacklevel=2)
            x = self._width - 1
        if y < 0 or y >= self._height:
            warnings.warn(
                f"get_pixel({x},{y}) is outside the image height {self._height}; "
                f"truncating y to {self._height - 1}", stacklevel=2)
            y = self._height - 1
        return self._pixels[x + y * self._width]

    def resize(self, new_width: int, new_height: int) -> None:
        """Change the size, keeping pixels that still fit and cropping the rest.

        New pixels are opaque white; no interpolation is done.
        """
        pixels = [RGBAPixel() for _ in range(new_width * new_height)]
        for y in range(min(new_height, self._height)):
            for x in range(min(new_width, self._width)):
                old = self._pixels[x + y * self._width]
                pixels[x + y * new_width] = RGBAPixel(old.r, old.g, old.b, old.a)
        self._width = new_width
        self._height = new_height
        self._pixels = pixels