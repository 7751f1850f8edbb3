"""Notes, scales, chords, presets, inputs, menus and a screen for a MIDI controller."""

__version__ = "0.1.0"