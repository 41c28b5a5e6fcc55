"""
Bitmap utilities using a simple 1D pixel buffer.

`PixelCanvas` treats `array` as a flat, mutable 1D buffer of 32-bit RGBA
values representing a `w` by `h` bitmap in row-major order. Pixels are
addressed at index `y * w + x`.
"""

import array
from typing import Final


class PixelCanvas:
    """A minimal bitmap canvas backed by a 1D pixel buffer.

    - `array` is modified in-place.
    - Coordinates are 0-based, with origin at top-left.
    - Colors are 0xRRGGBBAA integers.
    """

    def __init__(self, w: int, h: int, color: int = 0) -> None:
        self.array: Final = array.array("I", [color]) * (w * h)
        self.width: int = w
        self.height: int = h

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        return y * self.width + x

    def get_pixel(self, x: int, y: int) -> int:
        return self.array[self._index(x, y)]

    def set_pixel(self, x: int, y: int, color: int) -> bool:
        """Write one pixel. Returns False (and writes nothing) if out of bounds."""
        if not self._in_bounds(x, y):
            return False
        self.array[self._index(x, y)] = color
        return True

    def filled_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        """Fill the rectangle with top left (x, y) and size (w, h).

        - The rectangle is clipped to the canvas.
        """

        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + w, self.width), min(y + h, self.height)
        if x0 >= x1:
            return

        span = array.array("I", [color]) * (x1 - x0)
        for row in range(y0, y1):
            start = self._index(x0, row)
            self.array[start : start + len(span)] = span

    def pixels(self) -> list[int]:
        return self.array.tolist()
