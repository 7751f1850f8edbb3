"""MIDI note numbers and helpers for stepping through them."""

from __future__ import annotations

from enum import IntEnum

_MEMBER_PITCHES = (
    "C", "CSHARP", "D", "DSHARP", "E", "F",
    "FSHARP", "G", "GSHARP", "A", "ASHARP", "B",
)
_DISPLAY_PITCHES = (
    "C", "C#/Db", "D", "D#/Eb", "E", "F",
    "F#/Gb", "G", "G#/Ab", "A", "A#/Bb", "B",
)

LOWEST_MIDI = 21
HIGHEST_MIDI = 127


def _octave(number: int) -> int:
    return number // 12 - 1


Note = IntEnum(
    "Note",
    [
        (f"{_MEMBER_PITCHES[number % 12]}{_octave(number)}", number)
        for number in range(LOWEST_MIDI, HIGHEST_MIDI + 1)
    ],
    module=__name__,
)
Note.__doc__ = "MIDI note numbers from A0 (21) to G9 (127)."

OCTAVES = tuple(Note[f"C{octave}"] for octave in range(1, 9))
"""The C that starts each octave, from C1 to C8."""

NUM_OCTAVES = len(OCTAVES)

_NOTE_NAMES = {
    number: f"{_DISPLAY_PITCHES[number % 12]}{_octave(number)}"
    for number in range(LOWEST_MIDI, HIGHEST_MIDI + 1)
}


def next_note(note, min_note=Note.A0, max_note=Note.G9, wrap=False):
    """Return the note after ``note``, staying at or wrapping from ``max_note``."""
    if note == max_note:
        return Note(min_note) if wrap else Note(max_note)
    return Note(note % max_note + 1)


def previous_note(note, min_note=Note.A0, max_note=Note.G9, wrap=False):
    """Return the note before ``note``, staying at or wrapping from ``min_note``."""
    if note == min_note:
        return Note(max_note) if wrap else Note(min_note)
    return Note(note - 1)


def note_to_string(note):
    """Return a display name such as ``"C#/Db4"``, or ``"Unknown"``."""
    return _NOTE_NAMES.get(int(note), "Unknown")