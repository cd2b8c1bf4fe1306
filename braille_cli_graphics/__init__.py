#
# PROJECT: braille-cli-graphics
# MODULE: braille_cli_graphics/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .errors import BrailleError, OutOfBounds, DecodeFailure
from .dot_table import DotTable, DOT_POSITIONS, encode_glyph
from .surface import Surface
from .rasterizer import draw_line, draw_curve, draw_rect, draw_bitmap
from .bitmap import Bitmap, decode_bitmap, load_bitmap
from .renderer import Renderer, TEARDOWN
from .config import RenderConfig
