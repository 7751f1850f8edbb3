"""Which pin each control is wired to on the supported boards."""

from __future__ import annotations

from dataclasses import dataclass

FEATHER_ESP32_V2 = "adafruit_feather_esp32_v2"
ESP32_DEV = "esp32dev"


@dataclass(frozen=True)
class PinMap:
    """Pin numbers of every control; ``None`` means not connected."""

    joystick_x: int
    joystick_y: int
    joystick_button: int | None
    knob_a: int
    knob_b: int
    knob_button: int | None
    back_button: int
    ok_button: int
    buttons: tuple[int, ...]
    led: int | None = None


_PIN_MAPS = {
    FEATHER_ESP32_V2: PinMap(
        joystick_x=25,
        joystick_y=34,
        joystick_button=None,
        knob_a=5,
        knob_b=4,
        knob_button=None,
        back_button=26,
        ok_button=13,
        buttons=(21, 19, 12, 27, 33, 15, 32, 14),
    ),
    ESP32_DEV: PinMap(
        joystick_x=39,
        joystick_y=34,
        joystick_button=None,
        knob_a=32,
        knob_b=33,
        knob_button=None,
        back_button=36,
        ok_button=35,
        buttons=(18, 19, 25, 26, 27, 14, 12, 13),
        led=2,
    ),
}

BOARDS = tuple(_PIN_MAPS)


def pin_map(board):
    """Return the pin map of ``board``; ValueError for an unknown board."""
    try:
        return _PIN_MAPS[board]
    except KeyError:
        raise ValueError(
            f"unknown board {board!r}; expected one of {', '.join(BOARDS)}"
        ) from None