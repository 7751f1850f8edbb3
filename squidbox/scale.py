"""Musical scales and the chord shapes built on them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChordType:
    """A chord shape given as scale-degree offsets from its root degree."""

    name: str
    offsets: tuple[int, ...]

    @property
    def num_notes(self) -> int:
        return len(self.offsets)


TRIAD = ChordType("Triad", (0, 2, 4))
SEVENTH = ChordType("Seventh", (0, 2, 4, 6))
SIXTH = ChordType("Sixth", (0, 2, 4, 5))
FIFTH = ChordType("Fifth (Power Chord)", (0, 4))
FOURTH = ChordType("Fourth", (0, 3))
THIRD = ChordType("Third", (0, 2))
SINGLE_NOTE = ChordType("Single Note", (0,))

CHORD_TYPES = (TRIAD, SEVENTH, SIXTH, FIFTH, FOURTH, THIRD, SINGLE_NOTE)


@dataclass(frozen=True)
class Scale:
    """A scale defined by the semitone offsets of its degrees within an octave."""

    name: str
    semitones: tuple[int, ...]

    @property
    def num_notes(self) -> int:
        return len(self.semitones)

    def note(self, root, index):
        """Return the MIDI number of scale degree ``index`` above ``root``."""
        if index < 0:
            raise ValueError(f"scale semitone not found with index {index}")
        octaves, degree = divmod(index, self.num_notes)
        return int(root) + self.semitones[degree] + 12 * octaves

    def chord_notes(self, root, index, chord):
        """Return the notes of ``chord`` built on scale degree ``index``."""
        return [self.note(root, index + offset) for offset in chord.offsets]


MAJOR = Scale("Major", (0, 2, 4, 5, 7, 9, 11))
MINOR = Scale("Minor", (0, 2, 3, 5, 7, 8, 10))
DORIAN = Scale("Dorian", (0, 2, 3, 5, 7, 9, 10))
PHRYGIAN = Scale("Phrygian", (0, 1, 3, 5, 7, 8, 10))
LYDIAN = Scale("Lydian", (0, 2, 4, 6, 7, 9, 11))
MIXOLYDIAN = Scale("Mixolydian", (0, 2, 4, 5, 7, 9, 10))
LOCRIAN = Scale("Locrian", (0, 1, 3, 5, 6, 8, 10))
HARMONIC_MINOR = Scale("Harmonic Minor", (0, 2, 3, 5, 7, 8, 11))
HARMONIC_MAJOR = Scale("Harmonic Major", (0, 2, 4, 5, 7, 8, 11))

SCALES = (
    MAJOR,
    MINOR,
    DORIAN,
    PHRYGIAN,
    LYDIAN,
    MIXOLYDIAN,
    LOCRIAN,
    HARMONIC_MINOR,
    HARMONIC_MAJOR,
)