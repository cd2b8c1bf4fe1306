#
# PROJECT: braille-cli-graphics
# MODULE: braille_cli_graphics/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

class BrailleError(Exception):
    """Base class for all errors raised by the braille graphics core."""


class OutOfBounds(BrailleError, IndexError):
    """A plot coordinate fell outside the surface's pixel space."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        super().__init__(
            f"point ({x}, {y}) outside pixel space {width}x{height}")


class DecodeFailure(BrailleError, ValueError):
    """A raster file could not be opened or parsed."""

    def __init__(self, reason: str, path=None):
        self.reason = reason
        self.path = path
        if path is not None:
            super().__init__(f"{path}: {reason}")
        else:
            super().__init__(reason)
