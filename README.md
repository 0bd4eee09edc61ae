# sjistext

Decode Shift-JIS encoded bytes into Unicode code points and UTF-8 text.

The decoder uses a fixed table covering single-byte ASCII and half-width
katakana, the JIS X 0208 symbol, kana, Greek, Cyrillic and box-drawing rows,
and the level 1 and level 2 kanji. Byte sequences with no mapping decode to a
space (U+0020) instead of raising an error.

## Installation

```
pip install sjistext
```

## Usage

```python
from sjistext.encoding import decode_shift_jis, iter_shift_jis, shift_jis_to_utf32, utf32_to_utf8

# Decode a whole byte string.
text = decode_shift_jis(b"\x82\xa0\x82\xa2")   # "あい"

# Decode one character from the start of a buffer.
char = shift_jis_to_utf32(b"\x88\x9f")
print(hex(char.codepoint), char.length)          # 0x4e9c 2
print(char.text)                                 # "亜"

# Walk a buffer character by character.
for char in iter_shift_jis(b"A\x83\x41"):
    print(hex(char.codepoint), char.length)      # 0x41 1, then 0x30a2 2

# Encode a single code point as UTF-8 bytes.
utf32_to_utf8(0x3042)                            # b"\xe3\x81\x82"
```

### What `sjistext.encoding` provides

- `DecodedChar` – a frozen dataclass with `codepoint`, `length` (bytes taken
  up, 1 or 2) and a `text` property giving the character as a string.
- `shift_jis_to_utf32(data)` – decodes the character at the start of `data`,
  reading at most two bytes.
- `iter_shift_jis(data)` – yields a `DecodedChar` for every character in order.
- `decode_shift_jis(data)` – decodes a whole byte string into a `str`.
- `utf32_to_utf8(codepoint)` – encodes one code point as UTF-8 bytes (at most
  four).
- `code_unit_at(index)` – gives raw access to the flat lookup table.

### Behaviour to keep in mind

- Lead bytes `0x80`–`0x9F` and `0xE0`–`0xEF` start a two-byte character; every
  other byte is a single character.
- In single-byte mode `0x5C` decodes to `¥` (U+00A5) and `0x7E` to `‾`
  (U+203E), as in JIS X 0201; `0xA1`–`0xDF` are half-width katakana.
- `shift_jis_to_utf32` raises `ValueError` for empty input and for a lead byte
  with no trail byte after it; `decode_shift_jis` and `iter_shift_jis` raise
  the same when a byte string ends in the middle of a character.
- `utf32_to_utf8` raises `ValueError` for negative code points and for code
  points of `0x110000` and above.
- `code_unit_at` raises `IndexError` for positions outside the table.

The table data lives in `sjistext.table_symbols` (with `single_byte_row()` and
`rows()`) and in `sjistext.table_kanji_88_8f`, `sjistext.table_kanji_90_97`,
`sjistext.table_kanji_98_9f` and `sjistext.table_kanji_e0_ef`, each with
`rows()` returning 256-entry rows keyed by lead byte.

## What it does not do

- It only decodes: there is no conversion from Unicode back to Shift-JIS.
- Characters outside the table (vendor extensions, user-defined areas) are not
  recognised and decode to a space.
- It has no command-line tool; it is a library only.

## Running the tests

```
pip install -e .[test]
pytest
```