import pytest

from sjistext.table_kanji_98_9f import rows
from sjistext.table_symbols import BLANK

ALL_LEADS = list(range(0x98, 0xA0))


def test_lead_bytes_covered():
    assert sorted(rows()) == ALL_LEADS


@pytest.mark.parametrize("lead", ALL_LEADS)
def test_row_length(lead):
    assert len(rows()[lead]) == 256


@pytest.mark.parametrize("lead", ALL_LEADS)
def test_unassigned_trail_bytes_are_blank(lead):
    row = rows()[lead]
    assert all(value == BLANK for value in row[:0x40])
    assert row[0x7F] == BLANK
    assert all(value == BLANK for value in row[0xFD:])


def test_first_level_ends_and_second_begins_in_row_98():
    row = rows()[0x98]
    assert row[0x40] == 0x84EE
    assert row[0x72] == 0x8155
    assert all(value == BLANK for value in row[0x73:0x9F])
    assert row[0x9F] == 0x5F0C


def test_last_entry_of_row_9f():
    row = rows()[0x9F]
    assert row[0xFC] == 0x6ECC
    assert row[0x40] == 0x6A97


@pytest.mark.parametrize("lead", ALL_LEADS[1:])
def test_full_rows_are_dense(lead):
    row = rows()[lead]
    assigned = [row[trail] for trail in range(0x40, 0xFD) if trail != 0x7F]
    assert BLANK not in assigned


@pytest.mark.parametrize("lead", ALL_LEADS)
def test_assigned_entries_are_cjk_ideographs(lead):
    assigned = [value for value in rows()[lead] if value != BLANK]
    assert all(0x4E00 <= value <= 0x9FFF for value in assigned)


def test_assigned_entries_are_unique():
    assigned = [
        value for row in rows().values() for value in row if value != BLANK
    ]
    assert len(assigned) == len(set(assigned))


def test_returned_mapping_is_a_copy():
    first = rows()
    del first[0x98]
    assert 0x98 in rows()
    assert rows()[0x98][0x40] == 0x84EE