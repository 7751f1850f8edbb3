"""MIDI output devices."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


def _byte(value):
    return int(value) & 0xFF


class MidiController(ABC):
    """Common interface for anything that can send MIDI notes."""

    name = ""

    @abstractmethod
    def begin(self):
        """Start the controller."""

    @abstractmethod
    def is_connected(self):
        """Return whether a host is connected."""

    @abstractmethod
    def send_note_on(self, note, velocity, channel):
        """Send a note-on message."""

    @abstractmethod
    def send_note_off(self, note, velocity, channel):
        """Send a note-off message."""


class SimulatedMidiController(MidiController):
    """A controller that reports messages as text instead of sending them.

    Every message is also kept in :attr:`sent` as ``(kind, note, velocity,
    channel)`` with ``kind`` either ``"on"`` or ``"off"``.
    """

    name = "SIM"

    def __init__(self, output=None):
        self._output = output
        self.sent = []
        self.started = False

    def begin(self):
        """Mark the simulated controller as started."""
        self.started = True

    def is_connected(self):
        return True

    def _report(self, kind, label, note, velocity, channel):
        note, velocity, channel = _byte(note), _byte(velocity), _byte(channel)
        self.sent.append((kind, note, velocity, channel))
        stream = self._output if self._output is not None else sys.stdout
        stream.write(f"{label}: {note}, Velocity: {velocity}, Channel: {channel}\n")

    def send_note_on(self, note, velocity, channel):
        self._report("on", "Note On", note, velocity, channel)

    def send_note_off(self, note, velocity, channel):
        self._report("off", "Note Off", note, velocity, channel)