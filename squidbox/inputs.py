"""Buttons, the two-axis joystick and the rotary knob."""

from __future__ import annotations

import math
from enum import Enum


def _idle_level(pin):
    """Level of an unpressed input wired with a pull-up resistor."""
    return True


class Button:
    """A push button on a pull-up input: a low level means it is held down.

    ``read_level`` is called with the pin number and returns the current
    digital level (``True`` for high).
    """

    def __init__(self, pin, read_level=_idle_level):
        self.pin = pin
        self._read_level = read_level
        self._was_down = False
        self._was_up = True

    def is_down(self):
        """Return whether the button is held down right now."""
        return not self._read_level(self.pin)

    def is_pressed(self):
        """Return whether the button went down since the previous call."""
        down = self.is_down()
        pressed = down and not self._was_down
        self._was_down = down
        return pressed

    def is_released(self):
        """Return whether the button came up since the previous call."""
        up = not self.is_down()
        released = up and not self._was_up
        self._was_up = up
        return released


class Direction(Enum):
    """Where the joystick is pointing."""

    NONE = 0
    UP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4

    def __str__(self):
        return self.name


def _map_range(x, in_min, in_max, out_min, out_max):
    return (x - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def convert_raw_value(raw, center, minimum, maximum):
    """Map a raw axis reading onto ``[-1, 1]``.

    The stick is mounted rotated, so readings above ``center`` map to
    ``[0, -1]`` and readings at or below it map to ``[1, 0]``.
    """
    if raw > center:
        return _map_range(raw, center, maximum, 0, -1)
    return _map_range(raw, minimum, center, 1, 0)


class Joystick:
    """A two-axis analogue joystick with a push button.

    ``read_analog`` is called with a pin number and returns the raw reading;
    when it is not given each axis reads its resting centre. ``read_level``
    returns the digital level of the button pin. With ``simulation`` set the
    vertical axis is inverted, as on the simulated board.
    """

    DEADZONE = 0.6
    X_CENTER = 1911
    Y_CENTER = 1860
    X_MIN = 0
    Y_MIN = 0
    X_MAX = 4095
    Y_MAX = 4095

    def __init__(
        self,
        x_pin,
        y_pin,
        button_pin,
        read_analog=None,
        read_level=_idle_level,
        simulation=False,
    ):
        self.x_pin = x_pin
        self.y_pin = y_pin
        self.button_pin = button_pin
        self.simulation = simulation
        self._read_analog = read_analog
        self._read_level = read_level
        self._was = {direction: False for direction in Direction}

    def raw_x(self):
        """Return the raw reading of the horizontal axis."""
        if self._read_analog is None:
            return self.X_CENTER
        return self._read_analog(self.x_pin)

    def raw_y(self):
        """Return the raw reading of the vertical axis."""
        if self._read_analog is None:
            return self.Y_CENTER
        return self._read_analog(self.y_pin)

    def x(self):
        """Return the horizontal position in ``[-1, 1]``."""
        return convert_raw_value(self.raw_x(), self.X_CENTER, self.X_MIN, self.X_MAX)

    def y(self):
        """Return the vertical position in ``[-1, 1]``."""
        return convert_raw_value(self.raw_y(), self.Y_CENTER, self.Y_MIN, self.Y_MAX)

    def is_pressed(self):
        """Return whether the stick's button is held down."""
        return not self._read_level(self.button_pin)

    def direction(self):
        """Return the direction the stick points in, outside the dead zone."""
        x = self.x()
        y = self.y()
        if math.sqrt(x * x + y * y) < self.DEADZONE:
            return Direction.NONE
        if self.simulation:
            positive_y, negative_y = Direction.DOWN, Direction.UP
        else:
            positive_y, negative_y = Direction.UP, Direction.DOWN
        if y > 0 and y > abs(x):
            return positive_y
        if y < 0 and -y > abs(x):
            return negative_y
        if x < 0 and -x > abs(y):
            return Direction.LEFT
        if x > 0 and x > abs(y):
            return Direction.RIGHT
        return Direction.NONE

    def _just_inputted(self, direction):
        inputted = self.direction() == direction
        just = inputted and not self._was[direction]
        self._was[direction] = inputted
        return just

    def was_left_just_inputted(self):
        """Return whether the stick moved to the left since the previous check."""
        return self._just_inputted(Direction.LEFT)

    def was_right_just_inputted(self):
        """Return whether the stick moved to the right since the previous check."""
        return self._just_inputted(Direction.RIGHT)

    def was_up_just_inputted(self):
        """Return whether the stick moved up since the previous check."""
        return self._just_inputted(Direction.UP)

    def was_down_just_inputted(self):
        """Return whether the stick moved down since the previous check."""
        return self._just_inputted(Direction.DOWN)


class Knob:
    """A rotary encoder that counts steps and reports turns to callbacks.

    One detent of the physical knob produces two steps. Callbacks receive
    the count after the step.
    """

    def __init__(self, a_pin, b_pin, button_pin, read_level=_idle_level):
        self.a_pin = a_pin
        self.b_pin = b_pin
        self.button_pin = button_pin
        self._read_level = read_level
        self.count = 0
        self._left = None
        self._right = None

    def is_pressed(self):
        """Return the raw level of the knob's button pin."""
        return bool(self._read_level(self.button_pin))

    def clear_count(self):
        """Reset the step count to zero."""
        self.count = 0

    def attach_left(self, callback):
        """Call ``callback(count)`` on every step to the left."""
        self._left = callback

    def attach_right(self, callback):
        """Call ``callback(count)`` on every step to the right."""
        self._right = callback

    def detach_left(self):
        """Stop reporting steps to the left."""
        self._left = None

    def detach_right(self):
        """Stop reporting steps to the right."""
        self._right = None

    def turn(self, steps):
        """Turn the knob by ``steps``: positive to the right, negative to the left."""
        delta = 1 if steps > 0 else -1
        for _ in range(abs(steps)):
            self.count += delta
            callback = self._right if delta > 0 else self._left
            if callback is not None:
                callback(self.count)