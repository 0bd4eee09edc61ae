import pytest

from sjistext.encoding import (
    DecodedChar,
    code_unit_at,
    decode_shift_jis,
    iter_shift_jis,
    shift_jis_to_utf32,
    utf32_to_utf8,
)


@pytest.mark.parametrize(
    ("byte", "expected"),
    [(0x41, 0x41), (0x5C, 0x00A5), (0x7E, 0x203E), (0xA1, 0xFF61), (0xDF, 0xFF9F)],
)
def test_single_byte_characters(byte, expected):
    assert shift_jis_to_utf32(bytes((byte,))) == DecodedChar(expected, 1)


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"\x81\x40", 0x3000),
        (b"\x88\x9f", 0x4E9C),
        (b"\x90\x40", 0x62ED),
        (b"\xe0\x40", 0x6F3E),
        (b"\xea\xa4", 0x7199),
    ],
)
def test_double_byte_characters(data, expected):
    assert shift_jis_to_utf32(data) == DecodedChar(expected, 2)


def test_reads_at_most_two_bytes():
    assert shift_jis_to_utf32(b"\x81\x40\x41") == shift_jis_to_utf32(b"\x81\x40")


def test_unassigned_double_byte_gives_space():
    assert shift_jis_to_utf32(b"\x85\x40") == DecodedChar(0x20, 2)


def test_high_lead_byte_is_single_byte():
    assert shift_jis_to_utf32(b"\xf0\x40") == DecodedChar(0x20, 1)


def test_empty_input_raises():
    with pytest.raises(ValueError):
        shift_jis_to_utf32(b"")


def test_missing_trail_byte_raises():
    with pytest.raises(ValueError):
        shift_jis_to_utf32(b"\x82")


def test_code_unit_at_matches_decoder():
    assert code_unit_at(0x41) == 0x41
    assert code_unit_at(0x5C) == shift_jis_to_utf32(b"\x5c").codepoint


@pytest.mark.parametrize("index", [-1, 0x3100])
def test_code_unit_at_out_of_range(index):
    with pytest.raises(IndexError):
        code_unit_at(index)


@pytest.mark.parametrize("codepoint", [0x00, 0x41, 0x7F, 0x80, 0x7FF, 0x800, 0x3042, 0xFFFF, 0x10000, 0x10FFFF])
def test_utf8_matches_standard_encoding(codepoint):
    assert utf32_to_utf8(codepoint) == chr(codepoint).encode("utf-8")


def test_utf8_encodes_surrogates_directly():
    assert utf32_to_utf8(0xD800) == chr(0xD800).encode("utf-8", "surrogatepass")


@pytest.mark.parametrize("codepoint", [0x110000, -1])
def test_utf8_rejects_out_of_range(codepoint):
    with pytest.raises(ValueError):
        utf32_to_utf8(codepoint)


def test_utf8_lengths_never_exceed_four():
    for codepoint in (0x00, 0x80, 0x800, 0x10000, 0x10FFFF):
        assert 1 <= len(utf32_to_utf8(codepoint)) <= 4


def test_decode_matches_standard_codec_for_japanese():
    text = "あいうアイウ日本語亜"
    assert decode_shift_jis(text.encode("shift_jis")) == text


def test_iter_lengths_cover_input():
    data = "Aあ語".encode("shift_jis") + b"\xa1"
    decoded = list(iter_shift_jis(data))
    assert [item.length for item in decoded] == [1, 2, 2, 1]
    assert sum(item.length for item in decoded) == len(data)


def test_decode_truncated_input_raises():
    with pytest.raises(ValueError):
        decode_shift_jis(b"A\x82")


def test_decoded_char_text():
    assert shift_jis_to_utf32(b"\x82\xa0").text == "あ"


def test_decode_then_utf8_round_trip():
    text = "漢字テスト"
    data = text.encode("shift_jis")
    utf8 = b"".join(utf32_to_utf8(item.codepoint) for item in iter_shift_jis(data))
    assert utf8.decode("utf-8") == text


def test_decode_empty():
    assert decode_shift_jis(b"") == ""