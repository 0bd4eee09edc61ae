"""Shift-JIS lookup data for single bytes and the non-kanji lead bytes 0x80-0x87.

Every row holds 256 code points indexed by the trail byte. Positions with
no assigned character hold a space (U+0020).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

BLANK = 0x0020
ROW_SIZE = 0x100

_Segments = Sequence[tuple[int, Iterable[int]]]


def _build_row(segments: _Segments) -> tuple[int, ...]:
    """Lay out runs of code points in a 256-entry row padded with spaces."""
    row = [BLANK] * ROW_SIZE
    for start, codepoints in segments:
        values = list(codepoints)
        end = start + len(values)
        if end > ROW_SIZE:
            raise ValueError(f"segment at {start:#04x} overruns the row")
        row[start:end] = values
    return tuple(row)


_SINGLE_BYTE = _build_row(
    (
        (0x00, range(0x00, 0x5C)),
        (0x5C, (0x00A5,)),
        (0x5D, range(0x5D, 0x7E)),
        (0x7E, (0x203E, BLANK)),
        (0xA1, range(0xFF61, 0xFFA0)),
    )
)

_ROW_81 = _build_row(
    (
        (
            0x40,
            (
                0x3000, 0x3001, 0x3002, 0xFF0C, 0xFF0E, 0x30FB, 0xFF1A, 0xFF1B,
                0xFF1F, 0xFF01, 0x309B, 0x309C, 0x00B4, 0xFF40, 0x00A8, 0xFF3E,
                0xFFE3, 0xFF3F, 0x30FD, 0x30FE, 0x309D, 0x309E, 0x3003, 0x4EDD,
                0x3005, 0x3006, 0x3007, 0x30FC, 0x2015, 0x2010, 0xFF0F, 0x005C,
                0x301C, 0x2016, 0xFF5C, 0x2026, 0x2025, 0x2018, 0x2019, 0x201C,
                0x201D, 0xFF08, 0xFF09, 0x3014, 0x3015, 0xFF3B, 0xFF3D, 0xFF5B,
                0xFF5D, 0x3008, 0x3009, 0x300A, 0x300B, 0x300C, 0x300D, 0x300E,
                0x300F, 0x3010, 0x3011, 0xFF0B, 0x2212, 0x00B1, 0x00D7, BLANK,
                0x00F7, 0xFF1D, 0x2260, 0xFF1C, 0xFF1E, 0x2266, 0x2267, 0x221E,
                0x2234, 0x2642, 0x2640, 0x00B0, 0x2032, 0x2033, 0x2103, 0xFFE5,
                0xFF04, 0x00A2, 0x00A3, 0xFF05, 0xFF03, 0xFF06, 0xFF0A, 0xFF20,
                0x00A7, 0x2606, 0x2605, 0x25CB, 0x25CF, 0x25CE, 0x25C7, 0x25C6,
                0x25A1, 0x25A0, 0x25B3, 0x25B2, 0x25BD, 0x25BC, 0x203B, 0x3012,
                0x2192, 0x2190, 0x2191, 0x2193, 0x3013,
            ),
        ),
        (0xB8, (0x2208, 0x220B, 0x2286, 0x2287, 0x2282, 0x2283, 0x222A, 0x2229)),
        (0xC8, (0x2227, 0x2228, 0x00AC, 0x21D2, 0x21D4, 0x2200, 0x2203)),
        (
            0xDA,
            (
                0x2220, 0x22A5, 0x2312, 0x2202, 0x2207, 0x2261, 0x2252, 0x226A,
                0x226B, 0x221A, 0x223D, 0x221D, 0x2235, 0x222B, 0x222C,
            ),
        ),
        (0xF0, (0x212B, 0x2030, 0x266F, 0x266D, 0x266A, 0x2020, 0x2021, 0x00B6)),
        (0xFC, (0x25EF,)),
    )
)

_ROW_82 = _build_row(
    (
        (0x4F, range(0xFF10, 0xFF1A)),
        (0x60, range(0xFF21, 0xFF3B)),
        (0x81, range(0xFF41, 0xFF5B)),
        (0x9F, range(0x3041, 0x3094)),
    )
)

_ROW_83 = _build_row(
    (
        (0x40, range(0x30A1, 0x30E0)),
        (0x80, range(0x30E0, 0x30F7)),
        (0x9F, range(0x0391, 0x03A2)),
        (0xB0, range(0x03A3, 0x03AA)),
        (0xBF, range(0x03B1, 0x03C2)),
        (0xD0, range(0x03C3, 0x03CA)),
    )
)

_ROW_84 = _build_row(
    (
        (0x40, (*range(0x0410, 0x0416), 0x0401, *range(0x0416, 0x0430))),
        (0x70, (*range(0x0430, 0x0436), 0x0451, *range(0x0436, 0x043E))),
        (0x80, range(0x043E, 0x0450)),
        (
            0x9F,
            (
                0x2500, 0x2502, 0x250C, 0x2510, 0x2518, 0x2514, 0x251C, 0x252C,
                0x2524, 0x2534, 0x253C, 0x2501, 0x2503, 0x250F, 0x2513, 0x251B,
                0x2517, 0x2523, 0x2533, 0x252B, 0x253B, 0x254B, 0x2520, 0x252F,
                0x2528, 0x2537, 0x253F, 0x251D, 0x2530, 0x2525, 0x2538, 0x2542,
            ),
        ),
    )
)

_EMPTY_ROW = _build_row(())

_ROWS: dict[int, tuple[int, ...]] = {
    0x80: _EMPTY_ROW,
    0x81: _ROW_81,
    0x82: _ROW_82,
    0x83: _ROW_83,
    0x84: _ROW_84,
    0x85: _EMPTY_ROW,
    0x86: _EMPTY_ROW,
    0x87: _EMPTY_ROW,
}


def single_byte_row() -> tuple[int, ...]:
    """Return the code points for single-byte characters, indexed by byte value."""
    return _SINGLE_BYTE


def rows() -> dict[int, tuple[int, ...]]:
    """Return the rows for lead bytes 0x80-0x87, each indexed by trail byte."""
    return dict(_ROWS)