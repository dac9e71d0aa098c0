"""An in-memory 32-bit pixel buffer that frames are drawn into."""

from __future__ import annotations

import math
import sys
from array import array


class Image:
    """A width x height grid of 32-bit pixels stored as 0xAARRGGBB values.

    The byte layout produced by :meth:`to_bytes` is 32 bits per pixel,
    little-endian, one row after another.
    """

    bits_per_pixel = 32
    endian = 0

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = array("I", [0]) * (width * height)

    @property
    def line_length(self) -> int:
        """Number of bytes in one row of the buffer."""
        return self.width * (self.bits_per_pixel // 8)

    def put_pixel(self, x: float, y: float, color: int) -> None:
        """Write a pixel; coordinates are truncated and off-image writes are dropped."""
        if isinstance(x, float) and not math.isfinite(x):
            return
        if isinstance(y, float) and not math.isfinite(y):
            return
        col = int(x)
        row = int(y)
        if 0 <= col < self.width and 0 <= row < self.height:
            self._pixels[row * self.width + col] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at (x, y); raise IndexError outside the image."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self._pixels[y * self.width + x]

    def fill(self, color: int) -> None:
        """Set every pixel to one colour."""
        self._pixels = array("I", [color & 0xFFFFFFFF]) * (self.width * self.height)

    def to_bytes(self) -> bytes:
        """Return the pixels as little-endian 32-bit words, row by row."""
        data = array("I", self._pixels)
        if sys.byteorder == "big":
            data.byteswap()
        return data.tobytes()