"""Conversion of Shift-JIS text to Unicode code points and UTF-8."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from sjistext import (
    table_kanji_88_8f,
    table_kanji_90_97,
    table_kanji_98_9f,
    table_kanji_e0_ef,
    table_symbols,
)

# Lead-byte high nibbles that start a two-byte sequence, with the flat
# table offset at which their first row begins.
_LEAD_BASES = {0x80: 0x0100, 0x90: 0x1100, 0xE0: 0x2100}


def _build_table() -> tuple[int, ...]:
    rows: dict[int, tuple[int, ...]] = {}
    for module in (
        table_symbols,
        table_kanji_88_8f,
        table_kanji_90_97,
        table_kanji_98_9f,
        table_kanji_e0_ef,
    ):
        rows.update(module.rows())

    table = list(table_symbols.single_byte_row())
    for lead in (*range(0x80, 0xA0), *range(0xE0, 0xF0)):
        table.extend(rows[lead])
    return tuple(table)


_TABLE = _build_table()


@dataclass(frozen=True)
class DecodedChar:
    """One decoded character: its code point and the bytes it took up."""

    codepoint: int
    length: int

    @property
    def text(self) -> str:
        """The character as a Python string."""
        return chr(self.codepoint)


def code_unit_at(index: int) -> int:
    """Return the code point stored at a position in the flat lookup table."""
    if not 0 <= index < len(_TABLE):
        raise IndexError(f"lookup index {index} is outside the table")
    return _TABLE[index]


def shift_jis_to_utf32(data: bytes) -> DecodedChar:
    """Decode the character at the start of ``data``, reading at most two bytes."""
    if not data:
        raise ValueError("no bytes to decode")

    lead = data[0]
    base = _LEAD_BASES.get(lead & 0xF0)
    if base is None:
        return DecodedChar(_TABLE[lead], 1)

    if len(data) < 2:
        raise ValueError(f"lead byte {lead:#04x} is missing its trail byte")

    index = base + (((lead << 8) | data[1]) & 0xFFF)
    return DecodedChar(_TABLE[index], 2)


def utf32_to_utf8(codepoint: int) -> bytes:
    """Encode a code point as UTF-8, using at most four bytes."""
    if codepoint < 0:
        raise ValueError(f"code point {codepoint} is negative")
    if codepoint < 0x80:
        return bytes((codepoint,))
    if codepoint < 0x800:
        return bytes((0xC0 | codepoint >> 6, 0x80 | (codepoint & 0x3F)))
    if codepoint < 0x10000:
        return bytes(
            (
                0xE0 | codepoint >> 12,
                0x80 | (codepoint >> 6 & 0x3F),
                0x80 | (codepoint & 0x3F),
            )
        )
    if codepoint < 0x110000:
        return bytes(
            (
                0xF0 | codepoint >> 18,
                0x80 | (codepoint >> 12 & 0x3F),
                0x80 | (codepoint >> 6 & 0x3F),
                0x80 | (codepoint & 0x3F),
            )
        )
    raise ValueError(f"code point {codepoint:#x} is beyond the Unicode range")


def iter_shift_jis(data: bytes) -> Iterator[DecodedChar]:
    """Yield every character of a Shift-JIS byte string in order."""
    view = memoryview(bytes(data))
    position = 0
    while position < len(view):
        decoded = shift_jis_to_utf32(view[position : position + 2])
        yield decoded
        position += decoded.length


def decode_shift_jis(data: bytes) -> str:
    """Decode a whole Shift-JIS byte string into a Python string."""
    return "".join(decoded.text for decoded in iter_shift_jis(data))