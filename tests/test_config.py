import json

import pytest

from squidbox.config import (
    MAX_BUTTONS,
    Config,
    ConfigError,
    ConfigFileNotFoundError,
    ConfigReadError,
    Preset,
    presets_from_document,
    presets_to_document,
)


def _sample():
    return Preset(
        name="Pop",
        description="Four chords",
        notes=[[60, 64, 67], [62, 65, 69]],
    )


def test_preset_always_has_eight_note_lists():
    preset = _sample()
    assert len(preset.notes) == MAX_BUTTONS
    assert preset.notes[0] == [60, 64, 67]
    assert preset.notes[2:] == [[]] * (MAX_BUTTONS - 2)


def test_preset_dict_round_trip():
    preset = _sample()
    assert Preset.from_dict(preset.to_dict()) == preset


def test_from_dict_fills_missing_fields():
    preset = Preset.from_dict({})
    assert preset.name == ""
    assert preset.description == ""
    assert preset.notes == [[] for _ in range(MAX_BUTTONS)]


def test_from_dict_drops_extra_button_lists():
    data = {"name": "x", "notes": [[i] for i in range(12)]}
    preset = Preset.from_dict(data)
    assert preset.notes == [[i] for i in range(MAX_BUTTONS)]


def test_from_dict_non_list_entry_becomes_empty():
    preset = Preset.from_dict({"notes": [5, [1, 2]]})
    assert preset.notes[0] == []
    assert preset.notes[1] == [1, 2]


def test_document_round_trip():
    presets = [_sample(), Preset(name="Empty")]
    document = presets_to_document(presets)
    assert list(document) == ["presets"]
    assert presets_from_document(document) == presets


@pytest.mark.parametrize("document", [{}, {"presets": 3}, [], None])
def test_document_without_presets_gives_none(document):
    assert presets_from_document(document) == []


def test_write_then_load(tmp_path):
    path = tmp_path / "config.json"
    writer = Config(path)
    writer.write([_sample()])
    reader = Config(path)
    assert reader.load() == [_sample()]
    assert reader.presets == [_sample()]
    assert json.loads(path.read_text()) == presets_to_document([_sample()])


def test_load_missing_file_raises(tmp_path):
    config = Config(tmp_path / "absent.json")
    with pytest.raises(ConfigFileNotFoundError):
        config.load()


def test_load_invalid_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ConfigReadError):
        Config(path).load()


def test_write_failure_still_updates_memory(tmp_path):
    config = Config(tmp_path)
    with pytest.raises(ConfigFileNotFoundError):
        config.write([_sample()])
    assert config.presets == [_sample()]


def test_begin_reports_failure(tmp_path):
    config = Config(tmp_path / "absent.json")
    assert config.begin() is False
    assert config.presets == []


def test_errors_share_base_class(tmp_path):
    with pytest.raises(ConfigError):
        Config(tmp_path / "absent.json").load()
    path = tmp_path / "config.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError):
        Config(path).load()