import pytest

from sjistext.table_kanji_90_97 import rows
from sjistext.table_symbols import BLANK, ROW_SIZE

LEADS = range(0x90, 0x98)
DATA_TRAILS = [*range(0x40, 0x7F), *range(0x80, 0xFD)]
BLANK_TRAILS = [*range(0x00, 0x40), 0x7F, *range(0xFD, 0x100)]


def test_rows_cover_exactly_the_lead_bytes():
    assert sorted(rows()) == list(LEADS)


@pytest.mark.parametrize("lead", LEADS)
def test_every_row_has_full_length(lead):
    assert len(rows()[lead]) == ROW_SIZE


@pytest.mark.parametrize("lead", LEADS)
def test_unassigned_trail_bytes_are_blank(lead):
    row = rows()[lead]
    assert all(row[trail] == BLANK for trail in BLANK_TRAILS)


@pytest.mark.parametrize("lead", LEADS)
def test_assigned_trail_bytes_are_cjk_ideographs(lead):
    row = rows()[lead]
    assert all(0x4E00 <= row[trail] <= 0x9FFF for trail in DATA_TRAILS)


@pytest.mark.parametrize("lead", LEADS)
def test_assigned_code_points_are_unique_within_row(lead):
    row = rows()[lead]
    values = [row[trail] for trail in DATA_TRAILS]
    assert len(set(values)) == len(values)


def test_code_points_unique_across_rows():
    table = rows()
    values = [table[lead][trail] for lead in LEADS for trail in DATA_TRAILS]
    assert len(set(values)) == len(values)


@pytest.mark.parametrize(
    ("lead", "trail", "codepoint"),
    [
        (0x90, 0x40, 0x62ED),
        (0x94, 0x80, 0x6973),
        (0x95, 0x7E, 0x6577),
        (0x97, 0xFC, 0x806F),
    ],
)
def test_pinned_entries(lead, trail, codepoint):
    assert rows()[lead][trail] == codepoint


@pytest.mark.parametrize("char", ["日", "本", "新", "水", "人", "力"])
def test_agrees_with_standard_codec_for_common_kanji(char):
    lead, trail = char.encode("shift_jis")
    assert rows()[lead][trail] == ord(char)


def test_rows_returns_independent_mapping():
    first = rows()
    first.pop(0x90)
    assert 0x90 in rows()