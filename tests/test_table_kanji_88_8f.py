import pytest

from sjistext.table_kanji_88_8f import rows
from sjistext.table_symbols import BLANK, ROW_SIZE

LEADS = range(0x88, 0x90)


def _assigned(lead, row):
    start = 0x9F if lead == 0x88 else 0x40
    return [trail for trail in range(start, 0xFD) if trail != 0x7F]


def test_covers_expected_lead_bytes():
    assert sorted(rows()) == list(LEADS)


@pytest.mark.parametrize("lead", LEADS)
def test_row_length(lead):
    assert len(rows()[lead]) == ROW_SIZE


@pytest.mark.parametrize("lead", LEADS)
def test_unassigned_positions_are_blank(lead):
    row = rows()[lead]
    assigned = set(_assigned(lead, row))
    blanks = [row[trail] for trail in range(ROW_SIZE) if trail not in assigned]
    assert blanks
    assert all(value == BLANK for value in blanks)


@pytest.mark.parametrize("lead", LEADS)
def test_assigned_positions_are_cjk_ideographs(lead):
    row = rows()[lead]
    for trail in _assigned(lead, row):
        assert 0x4E00 <= row[trail] <= 0x9FFF, hex(trail)


@pytest.mark.parametrize("lead", LEADS)
def test_matches_standard_codec(lead):
    row = rows()[lead]
    for trail in _assigned(lead, row):
        expected = bytes((lead, trail)).decode("shift_jis")
        assert chr(row[trail]) == expected, f"{lead:02X}{trail:02X}"


def test_known_characters():
    table = rows()
    assert table[0x88][0x9F] == 0x4E9C
    assert table[0x88][0xEA] == 0x4E00
    assert table[0x8E][0x9A] == 0x5B57


def test_entries_within_row_are_unique():
    for lead, row in rows().items():
        values = [row[trail] for trail in _assigned(lead, row)]
        assert len(values) == len(set(values))


def test_returned_mapping_is_a_copy():
    first = rows()
    first.clear()
    assert sorted(rows()) == list(LEADS)