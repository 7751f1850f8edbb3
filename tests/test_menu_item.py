from squidbox.ascii import Ascii
from squidbox.menu_item import MenuItem


def test_default_name_is_empty():
    assert MenuItem().name == ""


def test_name_can_be_changed():
    item = MenuItem("Chords")
    item.name = "Notes"
    assert item.name == "Notes"


def test_select_runs_action():
    calls = []
    item = MenuItem("Go", on_select=lambda: calls.append("select"))
    item.select()
    item.select()
    assert calls == ["select", "select"]


def test_knob_actions_run_their_own_callbacks():
    calls = []
    item = MenuItem(
        "Value",
        on_knob_left=lambda: calls.append("left"),
        on_knob_right=lambda: calls.append("right"),
    )
    item.knob_right()
    item.knob_left()
    assert calls == ["right", "left"]


def test_missing_actions_do_nothing():
    calls = []
    item = MenuItem("Go", on_select=lambda: calls.append("select"))
    item.knob_left()
    item.knob_right()
    assert calls == []


def test_prefix_for_selectable_item():
    assert MenuItem("Go", on_select=lambda: None).prefix() == Ascii.RIGHT_FAT_ARROW


def test_prefix_for_plain_item():
    assert MenuItem("Plain").prefix() == Ascii.RIGHT_FAT_ARROW


def test_prefix_with_left_action_only():
    item = MenuItem("Value", on_knob_left=lambda: None)
    assert item.prefix() == Ascii.DOUBLE_VERTICAL_ARROW


def test_prefix_with_right_action_only():
    item = MenuItem("Value", on_knob_right=lambda: None)
    assert item.prefix() == Ascii.DOUBLE_VERTICAL_ARROW


def test_actions_can_be_set_after_creation():
    calls = []
    item = MenuItem("Late")
    item.on_select = lambda: calls.append(1)
    item.select()
    assert calls == [1]