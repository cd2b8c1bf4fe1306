#
# PROJECT: braille-cli-graphics
# MODULE: braille_cli_graphics/dot_table.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

# Unicode braille patterns occupy U+2800 - U+28FF
BRAILLE_BASE = 0x2800

# Braille dot numbering inside one cell (Unicode bit values):
#  1   8
#  2   16
#  4   32
#  64  128
# Remapped to (column, row) with row 0 at the BOTTOM, so Y grows upward.
DOT_POSITIONS = {
    (0, 0): 0x40, (1, 0): 0x80,
    (0, 1): 0x04, (1, 1): 0x20,
    (0, 2): 0x02, (1, 2): 0x10,
    (0, 3): 0x01, (1, 3): 0x08,
}


def encode_glyph(value: int) -> bytes:
    """UTF-8 bytes of the braille glyph for an 8-bit cell value."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"cell value out of range: {value}")
    return chr(BRAILLE_BASE + value).encode('utf-8')


class DotTable:
    """
    Precomputed cell value -> encoded glyph lookup.

    All 256 sequences are built once on construction so the encoder never
    formats a character per cell.  Every entry is exactly 3 bytes.
    """
    __slots__ = ('_glyphs',)

    GLYPH_SIZE = 3

    def __init__(self):
        self._glyphs = tuple(encode_glyph(i) for i in range(256))

    def __getitem__(self, value: int) -> bytes:
        return self._glyphs[value]

    def __len__(self):
        return len(self._glyphs)

    def __iter__(self):
        return iter(self._glyphs)

    def encode_into(self, cells, buf: bytearray, start: int = 0) -> int:
        """
        Write the glyph of each cell byte into `buf` from `start` onward.

        Returns the offset just past the last glyph written.
        """
        glyphs = self._glyphs
        size = self.GLYPH_SIZE
        pos = start
        for value in cells:
            buf[pos:pos + size] = glyphs[value]
            pos += size
        return pos
