"""A single selectable entry of a menu."""

from __future__ import annotations

from .ascii import Ascii


class MenuItem:
    """A named menu entry with optional actions for select and knob turns.

    Each action is a callable taking no arguments, or ``None``.
    """

    def __init__(self, name="", on_select=None, on_knob_left=None, on_knob_right=None):
        self.name = name
        self.on_select = on_select
        self.on_knob_left = on_knob_left
        self.on_knob_right = on_knob_right

    def select(self):
        """Run the select action, if there is one."""
        if self.on_select is not None:
            self.on_select()

    def knob_left(self):
        """Run the knob-left action, if there is one."""
        if self.on_knob_left is not None:
            self.on_knob_left()

    def knob_right(self):
        """Run the knob-right action, if there is one."""
        if self.on_knob_right is not None:
            self.on_knob_right()

    def prefix(self):
        """Return the marker shown before the item when it is selected."""
        if self.on_knob_left is not None or self.on_knob_right is not None:
            return Ascii.DOUBLE_VERTICAL_ARROW
        return Ascii.RIGHT_FAT_ARROW

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"