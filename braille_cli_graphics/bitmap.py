#
# PROJECT: braille-cli-graphics
# MODULE: braille_cli_graphics/bitmap.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import struct

from .errors import DecodeFailure

logger = logging.getLogger(__name__)

# Header fields of the 24-bit raster container, little-endian int32
DATA_OFFSET_FIELD = 0x0A
WIDTH_FIELD = 0x12
HEIGHT_FIELD = 0x16
HEADER_SIZE = HEIGHT_FIELD + 4

BYTES_PER_PIXEL = 3
WHITE = (0xFF, 0xFF, 0xFF)


class Bitmap:
    """
    A binary mask with one byte (0 or 1) per pixel.

    Row 0 of `data` is the BOTTOM row of the image, the same orientation
    as Surface pixel coordinates.  The container stores rows bottom-up, so
    decoded rows are kept in file order.
    """
    __slots__ = ('width', 'height', 'data')

    def __init__(self, width: int, height: int, data=None):
        self.width = width
        self.height = height
        self.data = bytearray(width * height) if data is None else bytearray(data)
        if len(self.data) != width * height:
            raise ValueError(
                f"bitmap data has {len(self.data)} bytes, expected {width * height}")

    def __repr__(self):
        return f"Bitmap({self.width}x{self.height})"

    def pixel(self, x: int, y: int) -> int:
        return self.data[y * self.width + x]


def _read_int32(data, offset: int) -> int:
    return struct.unpack_from('<i', data, offset)[0]


def decode_bitmap(data: bytes, path=None) -> Bitmap:
    """
    Decodes raw raster file bytes into a Bitmap.

    Pixels are read as packed BGR triples from the data offset, row after
    row, with no row padding.  Pure white becomes 0, any other color 1.
    """
    if len(data) < HEADER_SIZE:
        raise DecodeFailure(
            f"header truncated: {len(data)} bytes, need {HEADER_SIZE}", path)

    width = _read_int32(data, WIDTH_FIELD)
    height = _read_int32(data, HEIGHT_FIELD)
    offset = _read_int32(data, DATA_OFFSET_FIELD)

    if width <= 0 or height <= 0:
        raise DecodeFailure(f"invalid dimensions {width}x{height}", path)
    if offset < 0:
        raise DecodeFailure(f"invalid data offset {offset}", path)

    count = width * height
    end = offset + count * BYTES_PER_PIXEL
    if end > len(data):
        raise DecodeFailure(
            f"pixel data truncated: need {end} bytes, have {len(data)}", path)

    mask = bytearray(count)
    for i, (b, g, r) in enumerate(struct.iter_unpack('3B', data[offset:end])):
        mask[i] = 0 if (r, g, b) == WHITE else 1

    logger.debug("Decoded bitmap %dx%d (%d set pixels)", width, height, sum(mask))
    return Bitmap(width, height, mask)


def load_bitmap(path) -> Bitmap:
    """Reads and decodes a raster file, raising DecodeFailure on any problem."""
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise DecodeFailure(f"cannot open file: {e.strerror or e}", path) from e
    return decode_bitmap(data, path)
