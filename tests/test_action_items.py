import pytest

from squidbox.action_items import PresetMenuItem, QuitMenuItem, SwitchSceneMenuItem
from squidbox.ascii import Ascii
from squidbox.config import Config, Preset
from squidbox.scene_type import SceneType


class FakeDevice:
    def __init__(self):
        self.sleeps = 0
        self.switched = []

    def sleep(self):
        self.sleeps += 1

    def switch_to(self, scene):
        self.switched.append(scene)


def make_config(tmp_path, names):
    config = Config(tmp_path / "config.json")
    config.presets = [Preset(name=n, description="d") for n in names]
    return config


def test_preset_item_starts_at_first(tmp_path):
    config = make_config(tmp_path, ["one", "two", "three"])
    item = PresetMenuItem(config)
    assert item.name == "one"
    assert item.preset() is config.presets[0]


def test_preset_item_steps_and_clamps(tmp_path):
    config = make_config(tmp_path, ["one", "two", "three"])
    item = PresetMenuItem(config)
    for _ in range(5):
        item.knob_right()
    assert item.name == "three"
    assert item.preset() is config.presets[-1]
    for _ in range(5):
        item.knob_left()
    assert item.name == "one"


def test_preset_item_without_presets(tmp_path):
    item = PresetMenuItem(make_config(tmp_path, []))
    item.knob_right()
    assert item.name == ""
    with pytest.raises(IndexError):
        item.preset()


def test_preset_item_follows_written_presets(tmp_path):
    config = make_config(tmp_path, [])
    item = PresetMenuItem(config)
    config.write([Preset(name="alpha"), Preset(name="beta")])
    item.knob_right()
    assert item.name == "beta"


def test_preset_item_prefix_shows_knob_marker(tmp_path):
    item = PresetMenuItem(make_config(tmp_path, ["one"]))
    assert item.prefix() == Ascii.DOUBLE_VERTICAL_ARROW


def test_quit_item_puts_device_to_sleep():
    device = FakeDevice()
    item = QuitMenuItem(device)
    assert item.name == "Quit"
    item.select()
    assert device.sleeps == 1


def test_switch_scene_item_switches():
    device = FakeDevice()
    item = SwitchSceneMenuItem("Chords", device, SceneType.CHORD)
    item.select()
    assert device.switched == [SceneType.CHORD]
    assert item.name == "Chords"
    assert item.prefix() == Ascii.RIGHT_FAT_ARROW