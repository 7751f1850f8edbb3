"""Menu items that pick a chord type, octave, root note or scale."""

from __future__ import annotations

from .menu_item import MenuItem
from .note import OCTAVES, Note, next_note, note_to_string, previous_note
from .scale import CHORD_TYPES, SCALES


class _ChoiceMenuItem(MenuItem):
    """A menu item that steps through a fixed list with the knob."""

    def __init__(self, choices):
        super().__init__(on_knob_left=self._step_left, on_knob_right=self._step_right)
        self._choices = choices
        self.index = 0
        self._update_name()

    @property
    def _current(self):
        return self._choices[self.index]

    def _label(self, choice):
        raise NotImplementedError

    def _update_name(self):
        self.name = self._label(self._current)

    def _step_left(self):
        self.index = max(self.index - 1, 0)
        self._update_name()

    def _step_right(self):
        self.index = min(self.index + 1, len(self._choices) - 1)
        self._update_name()


class ChordTypeMenuItem(_ChoiceMenuItem):
    """Chooses one of the chord types."""

    def __init__(self):
        super().__init__(CHORD_TYPES)

    def _label(self, choice):
        return choice.name

    @property
    def chord_type(self):
        """The chord type currently chosen."""
        return self._current


class OctaveMenuItem(_ChoiceMenuItem):
    """Chooses the C that starts an octave, from C1 to C8."""

    def __init__(self):
        super().__init__(OCTAVES)

    def _label(self, choice):
        return note_to_string(choice)

    @property
    def note(self):
        """The C of the octave currently chosen."""
        return self._current


class ScaleMenuItem(_ChoiceMenuItem):
    """Chooses one of the scales."""

    def __init__(self):
        super().__init__(SCALES)

    def _label(self, choice):
        return choice.name

    @property
    def scale(self):
        """The scale currently chosen."""
        return self._current


class RootNoteMenuItem(MenuItem):
    """Chooses a root note between C1 and C7, starting at C4."""

    MIN_NOTE = Note.C1
    MAX_NOTE = Note.C7
    START_NOTE = Note.C4

    def __init__(self):
        super().__init__(on_knob_left=self._step_left, on_knob_right=self._step_right)
        self.root = self.START_NOTE
        self._update_name()

    def _update_name(self):
        self.name = note_to_string(self.root)

    def _step_left(self):
        self.root = previous_note(self.root, self.MIN_NOTE, self.MAX_NOTE)
        self._update_name()

    def _step_right(self):
        self.root = next_note(self.root, self.MIN_NOTE, self.MAX_NOTE)
        self._update_name()