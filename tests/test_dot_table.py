import pytest

from braille_cli_graphics.dot_table import (
    BRAILLE_BASE,
    DOT_POSITIONS,
    DotTable,
    encode_glyph,
)


def test_table_covers_every_cell_value() -> None:
    table = DotTable()
    assert len(table) == 256
    assert len(set(table)) == 256
    for value in range(256):
        glyph = table[value]
        code = BRAILLE_BASE + value
        assert len(glyph) == 3
        assert glyph[0] == 0xE0 | (code >> 12)
        assert glyph[1] == 0x80 | ((code >> 6) & 0x3F)
        assert glyph[2] == 0x80 | (code & 0x3F)
        assert glyph.decode('utf-8') == chr(code)


def test_known_glyphs() -> None:
    table = DotTable()
    assert table[0] == '⠀'.encode('utf-8') == b'\xe2\xa0\x80'
    assert table[0xFF] == b'\xe2\xa3\xbf'


def test_encode_into_writes_in_place() -> None:
    table = DotTable()
    buf = bytearray(b'ab' + bytes(6) + b'z')
    end = table.encode_into(bytes([0, 0xFF]), buf, 2)
    assert end == 8
    assert buf == bytearray(b'ab\xe2\xa0\x80\xe2\xa3\xbfz')


def test_dot_positions_are_single_distinct_bits() -> None:
    assert sorted(DOT_POSITIONS.values()) == [1 << i for i in range(8)]
    assert set(DOT_POSITIONS) == {(c, r) for c in range(2) for r in range(4)}
    # Bottom row of the glyph is Unicode dots 7 and 8
    assert DOT_POSITIONS[(0, 0)] == 0x40
    assert DOT_POSITIONS[(1, 0)] == 0x80
    assert DOT_POSITIONS[(0, 3)] == 0x01


def test_encode_glyph_rejects_non_bytes() -> None:
    with pytest.raises(ValueError):
        encode_glyph(256)
    with pytest.raises(ValueError):
        encode_glyph(-1)
