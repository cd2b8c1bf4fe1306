#
# PROJECT: braille-cli-graphics
# MODULE: braille_cli_graphics/surface.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
import shutil

from .dot_table import DOT_POSITIONS
from .errors import OutOfBounds


def round_half_up(n: float) -> int:
    return math.floor(n + 0.5)


class Surface:
    """
    A width x height grid of terminal cells, one byte per cell.

    Each byte holds the 8 dots of a 2x4 braille block, so the addressable
    pixel space is (width * 2) x (height * 4).  Pixel Y grows upward: y = 0
    is the bottom row of the display, while buffer row 0 is the top line.
    """
    __slots__ = ['width', 'height', 'data']

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive, got {width}x{height}")
        self.width, self.height = width, height
        self.data = bytearray(width * height)

    @classmethod
    def from_terminal(cls, fallback=(80, 24)) -> 'Surface':
        """Create a surface covering the current terminal window."""
        cols, rows = shutil.get_terminal_size(fallback)
        return cls(cols, rows)

    @property
    def pixel_width(self) -> int:
        return self.width * 2

    @property
    def pixel_height(self) -> int:
        return self.height * 4

    def clear(self):
        """Zero every cell."""
        self.data[:] = bytes(len(self.data))

    def _locate(self, fx: float, fy: float):
        x = round_half_up(fx)
        y = round_half_up(fy)
        if x < 0 or y < 0 or x >= self.width * 2 or y >= self.height * 4:
            raise OutOfBounds(x, y, self.width * 2, self.height * 4)
        # Buffer rows run top-down, pixel rows bottom-up
        offset = (self.height - 1 - y // 4) * self.width + x // 2
        return offset, DOT_POSITIONS[(x % 2, y % 4)]

    def plot(self, x: float, y: float, value: bool = True):
        """
        Set (value true) or clear (value false) the dot nearest to (x, y).

        Raises OutOfBounds without touching the buffer when the rounded
        point lies outside the pixel space.  Other dots in the same cell
        are left as they are.
        """
        offset, bit = self._locate(x, y)
        if value:
            self.data[offset] |= bit
        else:
            self.data[offset] &= ~bit & 0xFF

    def get_dot(self, x: float, y: float) -> bool:
        offset, bit = self._locate(x, y)
        return bool(self.data[offset] & bit)

    def lit_dots(self):
        """Set of (x, y) pixel coordinates whose dot is on."""
        dots = set()
        for y in range(self.height * 4):
            for x in range(self.width * 2):
                if self.get_dot(x, y):
                    dots.add((x, y))
        return dots
