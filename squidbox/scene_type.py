"""The scenes the device can show."""

from __future__ import annotations

from enum import IntEnum


class SceneType(IntEnum):
    """Identifies a scene; ``NULL`` stands for no scene at all."""

    MAIN = 0
    CHORD = 1
    NOTE = 2
    DRUM = 3
    CUSTOM = 4
    JOYSTICK_CALIBRATOR = 5
    KNOB = 6
    BUTTON = 7
    NULL = 8


NUM_SCENES = 8
"""How many real scenes there are (``NULL`` excluded)."""