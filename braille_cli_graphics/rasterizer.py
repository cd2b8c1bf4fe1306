#
# PROJECT: braille-cli-graphics
# MODULE: braille_cli_graphics/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#
# Every primitive draws through Surface.plot.  Points that land outside the
# surface are dropped: clipping is silent, never an error for the caller.
#

from .surface import Surface
from .errors import OutOfBounds

# Curve sampling interval along X and the Y compression applied to samples
CURVE_STEP = 0.2
CURVE_SCALE = 10.0


def _plot_clipped(surface: Surface, x, y, value=True):
    try:
        surface.plot(x, y, value)
    except OutOfBounds:
        pass


def draw_line(surface: Surface, x1, y1, x2, y2):
    """
    Draws a line segment from (x1, y1) toward (x2, y2).

    Shallow lines (|slope| < 1) step one pixel along X and solve for Y;
    steep lines step along Y and solve for X, so neither leaves gaps.
    Stepping stops once both axes are within one pixel of the end point,
    which may leave the exact end point unplotted.
    """
    vertical = x1 == x2
    if not vertical:
        slope = (y2 - y1) / (x2 - x1)
        # Intercept from the left endpoint so both directions agree bit for bit
        if x1 < x2:
            yint = y1 - slope * x1
        else:
            yint = y2 - slope * x2

    _plot_clipped(surface, x1, y1)
    while abs(x1 - x2) > 1 or abs(y1 - y2) > 1:
        if vertical:
            y1 += 1.0 if y1 < y2 else -1.0
        elif abs(slope) < 1:
            x1 += 1.0 if x1 < x2 else -1.0
            y1 = x1 * slope + yint
        else:
            y1 += 1.0 if y1 < y2 else -1.0
            x1 = (y1 - yint) / slope
        _plot_clipped(surface, x1, y1)


def draw_curve(surface: Surface, x_start, x_end, a, b, c,
               step=CURVE_STEP, scale=CURVE_SCALE):
    """
    Plots samples of y = a*x^2 + b*x + c between x_start and x_end.

    X advances by `step` before each sample and Y is divided by `scale`.
    Samples are not joined, so `step` must be fine enough for the curve.
    """
    x = x_start
    while x < x_end:
        x += step
        y = (a * x * x + b * x + c) / scale
        _plot_clipped(surface, x, y)


def draw_rect(surface: Surface, x: int, y: int, w: int, h: int, fill: bool = False):
    """Draws a w x h rectangle with its bottom-left pixel at (x, y)."""
    if fill:
        for i in range(h):
            for j in range(w):
                _plot_clipped(surface, x + j, y + i)
        return

    for j in range(w):
        _plot_clipped(surface, x + j, y)
        _plot_clipped(surface, x + j, y + h - 1)
    # Corners already belong to the top and bottom rows
    for i in range(1, h - 1):
        _plot_clipped(surface, x, y + i)
        _plot_clipped(surface, x + w - 1, y + i)


def draw_bitmap(surface: Surface, bitmap, x: int, y: int):
    """
    Copies a binary mask onto the surface with its row 0 at pixel row y.

    Zero pixels clear the destination dot, non-zero pixels set it.
    """
    data = bitmap.data
    width = bitmap.width
    for row in range(bitmap.height):
        base = row * width
        for col in range(width):
            _plot_clipped(surface, x + col, y + row, data[base + col])
