import pytest

from sjistext.table_kanji_e0_ef import rows
from sjistext.table_symbols import BLANK, ROW_SIZE

FULL_LEADS = range(0xE0, 0xEA)
EMPTY_LEADS = range(0xEB, 0xF0)


def test_covers_lead_bytes_e0_to_ef():
    assert sorted(rows()) == list(range(0xE0, 0xF0))


@pytest.mark.parametrize("lead", range(0xE0, 0xF0))
def test_every_row_has_full_size(lead):
    assert len(rows()[lead]) == ROW_SIZE


@pytest.mark.parametrize("lead", range(0xE0, 0xF0))
def test_unused_trail_bytes_are_blank(lead):
    row = rows()[lead]
    assert all(value == BLANK for value in row[:0x40])
    assert row[0x7F] == BLANK
    assert all(value == BLANK for value in row[0xFD:])


@pytest.mark.parametrize("lead", FULL_LEADS)
def test_full_rows_assign_every_valid_trail_byte(lead):
    row = rows()[lead]
    for trail in (*range(0x40, 0x7F), *range(0x80, 0xFD)):
        assert row[trail] != BLANK
        assert 0x4E00 <= row[trail] <= 0x9FFF


@pytest.mark.parametrize("lead", EMPTY_LEADS)
def test_trailing_rows_are_empty(lead):
    assert set(rows()[lead]) == {BLANK}


def test_last_kanji_row_stops_after_0xa4():
    row = rows()[0xEA]
    assert row[0xA4] == 0x7199
    assert all(value == BLANK for value in row[0xA5:])
    assert all(0x4E00 <= value <= 0x9FFF for value in row[0x40:0x7F])


def test_known_entries():
    table = rows()
    assert table[0xE0][0x40] == 0x6F3E
    assert table[0xE0][0x80] == 0x70D9
    assert table[0xE0][0xFC] == 0x73F1
    assert table[0xE9][0xFC] == 0x9D48
    assert table[0xEA][0x40] == 0x9D5D


def test_rows_returns_independent_mapping():
    first = rows()
    first.pop(0xE0)
    assert 0xE0 in rows()


def test_assigned_code_points_do_not_repeat_within_a_row():
    for row in rows().values():
        assigned = [value for value in row if value != BLANK]
        assert len(assigned) == len(set(assigned))