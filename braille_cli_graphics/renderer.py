#
# PROJECT: braille-cli-graphics
# MODULE: braille_cli_graphics/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import sys

from .dot_table import DotTable
from .surface import Surface

logger = logging.getLogger(__name__)

# VT100 control sequences
HIDE_CURSOR = b'\x1b[?25l'
SHOW_CURSOR = b'\x1b[?25h'
CURSOR_HOME = b'\x1b[H'
CLEAR_SCREEN = b'\x1b[2J'

# Emitted once by the owning program on exit
TEARDOWN = CLEAR_SCREEN + SHOW_CURSOR

FRAME_PREFIX = HIDE_CURSOR + CURSOR_HOME
FRAME_SUFFIX = CURSOR_HOME


class Renderer:
    """
    Rendering context that turns a Surface into a terminal byte stream.

    Owns the glyph lookup table and a single output buffer that is allocated
    on the first render and reused for every later frame of the same size.

    Frame layout:
      hide cursor, cursor home, one 3-byte glyph per cell (row-major,
      top line first), cursor home.
    """

    def __init__(self, dot_table=None):
        self.dot_table = dot_table if dot_table is not None else DotTable()
        self._buffer = None
        self._cells = 0

    @staticmethod
    def frame_size(surface: Surface) -> int:
        cells = surface.width * surface.height
        return len(FRAME_PREFIX) + DotTable.GLYPH_SIZE * cells + len(FRAME_SUFFIX)

    def _ensure_buffer(self, surface: Surface):
        cells = surface.width * surface.height
        if self._buffer is None or cells != self._cells:
            size = self.frame_size(surface)
            logger.debug("Allocating %d byte frame buffer for %dx%d surface",
                         size, surface.width, surface.height)
            self._buffer = bytearray(size)
            self._buffer[:len(FRAME_PREFIX)] = FRAME_PREFIX
            self._buffer[-len(FRAME_SUFFIX):] = FRAME_SUFFIX
            self._cells = cells
        return self._buffer

    def render(self, surface: Surface) -> bytearray:
        """
        Encode one frame.

        The returned bytearray is the renderer's own buffer; it is
        overwritten by the next call.
        """
        buf = self._ensure_buffer(surface)
        self.dot_table.encode_into(surface.data, buf, len(FRAME_PREFIX))
        return buf

    @staticmethod
    def default_stream():
        return sys.stdout.buffer

    def present(self, surface: Surface, stream=None):
        """Encode one frame and write it to `stream` (binary stdout by default)."""
        if stream is None:
            stream = self.default_stream()
        stream.write(self.render(surface))
        stream.flush()
