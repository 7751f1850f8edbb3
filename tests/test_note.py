import pytest

from squidbox.note import (
    NUM_OCTAVES,
    OCTAVES,
    Note,
    next_note,
    note_to_string,
    previous_note,
)


def test_enum_bounds_match_midi_numbers():
    assert note_to_string(Note(21)) == "A0"
    assert note_to_string(Note(127)) == "G9"
    assert note_to_string(20) == "Unknown"
    assert note_to_string(128) == "Unknown"


def test_members_are_consecutive():
    for note in list(Note)[:-1]:
        assert int(next_note(note)) == int(note) + 1


def test_note_to_string_known_names():
    assert note_to_string(Note.A0) == "A0"
    assert note_to_string(Note.CSHARP4) == "C#/Db4"
    assert note_to_string(Note.G9) == "G9"


@pytest.mark.parametrize("value", [0, 20, 128])
def test_note_to_string_out_of_range(value):
    assert note_to_string(value) == "Unknown"


def test_next_note_increments():
    assert next_note(Note.C4) is Note.CSHARP4
    assert next_note(Note.B3) is Note.C4


def test_next_note_stays_at_max_without_wrap():
    assert next_note(Note.G9) is Note.G9
    assert next_note(Note.C7, Note.C1, Note.C7) is Note.C7


def test_next_note_wraps_to_min():
    assert next_note(Note.G9, wrap=True) is Note.A0
    assert next_note(Note.C7, Note.C1, Note.C7, True) is Note.C1


def test_previous_note_decrements():
    assert previous_note(Note.C4) is Note.B3


def test_previous_note_stays_at_min_without_wrap():
    assert previous_note(Note.A0) is Note.A0
    assert previous_note(Note.C1, Note.C1, Note.C7) is Note.C1


def test_previous_note_wraps_to_max():
    assert previous_note(Note.A0, wrap=True) is Note.G9
    assert previous_note(Note.C1, Note.C1, Note.C7, True) is Note.C7


def test_next_then_previous_round_trip():
    for note in list(Note)[:-1]:
        assert previous_note(next_note(note)) is note


def test_octaves_are_cs_one_to_eight():
    assert NUM_OCTAVES == 8
    assert OCTAVES[0] is Note.C1
    assert OCTAVES[-1] is Note.C8
    assert all(b - a == 12 for a, b in zip(OCTAVES, OCTAVES[1:]))
    assert all(note_to_string(o).startswith("C") for o in OCTAVES)