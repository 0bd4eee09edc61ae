"""Shift-JIS to Unicode decoding with a fixed lookup table."""

__version__ = "0.1.0"
__all__ = [
    "encoding",
    "table_symbols",
    "table_kanji_88_8f",
    "table_kanji_90_97",
    "table_kanji_98_9f",
    "table_kanji_e0_ef",
]