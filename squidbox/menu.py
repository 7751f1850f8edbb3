"""A list of menu items drawn under a header bar."""

from __future__ import annotations

from .ascii import Ascii
from .scene_type import SceneType
from .screen import CHECKMARK_BITMAP, X_BITMAP, Screen

_LINE_HEIGHT = 8


class Menu:
    """A titled list of items navigated with the joystick and buttons.

    ``draw`` expects a device exposing ``joystick``, ``ok_button``,
    ``back_button``, ``screen`` and ``midi_controller`` attributes and
    ``device_id()`` and ``switch_to(scene)`` methods.
    """

    def __init__(self, name, items=(), parent_scene=SceneType.NULL):
        self.name = name
        self.items = list(items)
        self.parent_scene = parent_scene
        self.selected_index = 0

    def has_menu_items(self):
        """Return whether the menu holds any items."""
        return len(self.items) > 0

    def has_parent_scene(self):
        """Return whether the back button leads somewhere."""
        return self.parent_scene != SceneType.NULL

    @property
    def _selected(self):
        return self.items[self.selected_index]

    def _next_index(self):
        return max(min(self.selected_index + 1, len(self.items) - 1), 0)

    def _previous_index(self):
        return max(self.selected_index - 1, 0)

    def _handle_input(self, device):
        joystick = device.joystick
        if joystick.was_up_just_inputted():
            self.selected_index = self._previous_index()
        elif joystick.was_down_just_inputted():
            self.selected_index = self._next_index()
        elif joystick.was_left_just_inputted():
            if self.has_menu_items():
                self._selected.knob_left()
        elif joystick.was_right_just_inputted():
            if self.has_menu_items():
                self._selected.knob_right()

        if self.has_menu_items() and device.ok_button.is_pressed():
            self._selected.select()

        if self.has_parent_scene() and device.back_button.is_pressed():
            device.switch_to(self.parent_scene)

    def draw(self, device):
        """Handle input, then draw the header, title and items."""
        self._handle_input(device)

        screen = device.screen
        clear_height = (len(self.items) + 2) * _LINE_HEIGHT
        screen.fill_rect(0, 0, Screen.WIDTH, clear_height, False)

        screen.set_cursor(0, 0)
        screen.write(device.device_id())
        controller = device.midi_controller
        screen.set_cursor(Screen.WIDTH - 24, 0)
        screen.write(controller.name)
        icon = CHECKMARK_BITMAP if controller.is_connected() else X_BITMAP
        screen.draw_bitmap(Screen.WIDTH - 8, 0, icon, 8, 8)

        screen.set_cursor(0, _LINE_HEIGHT)
        if self.has_parent_scene():
            screen.write(Ascii.LEFT_ARROW)
        screen.write(f"{self.name}\n")

        for index, item in enumerate(self.items):
            prefix = item.prefix() if index == self.selected_index else Ascii.NULL
            screen.write(int(prefix))
            screen.write(f"{item.name}\n")

        screen.update()

    def on_knob_left(self, count):
        """Knob step to the left; acts once per detent (every second step)."""
        if count % 2 == 0 and self.has_menu_items():
            self._selected.knob_left()

    def on_knob_right(self, count):
        """Knob step to the right; acts once per detent (every second step)."""
        if count % 2 == 0 and self.has_menu_items():
            self._selected.knob_right()