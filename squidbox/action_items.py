"""Menu items that choose a preset, switch scene or put the device to sleep."""

from __future__ import annotations

from .menu_item import MenuItem


class PresetMenuItem(MenuItem):
    """Steps through the presets held by a :class:`~squidbox.config.Config`."""

    def __init__(self, config):
        super().__init__(on_knob_left=self._step_left, on_knob_right=self._step_right)
        self.config = config
        self.index = 0
        self._update_name()

    def preset(self):
        """Return the preset currently chosen; IndexError if there is none."""
        return self.config.presets[self.index]

    def _update_name(self):
        presets = self.config.presets
        self.name = presets[self.index].name if self.index < len(presets) else ""

    def _step_left(self):
        self.index = max(self.index - 1, 0)
        self._update_name()

    def _step_right(self):
        self.index = max(min(self.index + 1, len(self.config.presets) - 1), 0)
        self._update_name()


class QuitMenuItem(MenuItem):
    """Puts the device to sleep when selected."""

    def __init__(self, device):
        super().__init__("Quit", on_select=device.sleep)
        self.device = device


class SwitchSceneMenuItem(MenuItem):
    """Switches the device to ``target_scene`` when selected."""

    def __init__(self, name, device, target_scene):
        super().__init__(name, on_select=self._switch)
        self.device = device
        self.target_scene = target_scene

    def _switch(self):
        self.device.switch_to(self.target_scene)