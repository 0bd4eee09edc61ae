import pytest

from sjistext.table_symbols import rows, single_byte_row

BLANK = 0x20


def test_single_byte_row_has_one_entry_per_byte():
    assert len(single_byte_row()) == 256


@pytest.mark.parametrize("byte", [b for b in range(0x80) if b not in (0x5C, 0x7E, 0x7F)])
def test_ascii_bytes_map_to_themselves(byte):
    assert single_byte_row()[byte] == byte


def test_yen_overline_and_delete():
    row = single_byte_row()
    assert row[0x5C] == 0x00A5
    assert row[0x7E] == 0x203E
    assert row[0x7F] == BLANK


@pytest.mark.parametrize("byte", range(0xA1, 0xE0))
def test_halfwidth_katakana_matches_codec(byte):
    assert chr(single_byte_row()[byte]) == bytes([byte]).decode("shift_jis")


def test_unassigned_single_bytes_are_blank():
    row = single_byte_row()
    unassigned = [*range(0x80, 0xA1), *range(0xE0, 0x100)]
    assert all(row[b] == BLANK for b in unassigned)


def test_rows_cover_lead_bytes_80_to_87():
    assert sorted(rows()) == list(range(0x80, 0x88))


def test_every_row_has_256_entries():
    assert all(len(row) == 256 for row in rows().values())


def test_trail_bytes_outside_valid_range_are_blank():
    invalid = [*range(0x00, 0x40), 0x7F, *range(0xFD, 0x100)]
    for row in rows().values():
        assert all(row[t] == BLANK for t in invalid)


@pytest.mark.parametrize("lead", [0x80, 0x85, 0x86, 0x87])
def test_unused_lead_bytes_are_blank(lead):
    assert set(rows()[lead]) == {BLANK}


def test_ideographic_space_starts_symbol_row():
    assert rows()[0x81][0x40] == 0x3000


def test_hiragana_run_is_contiguous():
    row = rows()[0x82]
    hiragana = row[0x9F:0xF2]
    assert [b - a for a, b in zip(hiragana, hiragana[1:])] == [1] * (len(hiragana) - 1)
    assert row[0xF2] == BLANK


def test_rows_returns_independent_mapping():
    first = rows()
    first.pop(0x81)
    assert 0x81 in rows()
    assert rows()[0x82] == rows()[0x82]