# squidbox

Building blocks of a handheld MIDI controller that has a 128x64 monochrome
screen, a joystick, a rotary knob, a back button, an OK button and eight
play buttons. The package covers the music theory, preset storage, input
handling, menus and an in-memory screen; it has no runtime dependencies.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Music

- `squidbox.note`: `Note`, an `IntEnum` of MIDI note numbers from `Note.A0`
  (21) to `Note.G9` (127), with sharps named like `Note.CSHARP4`.
  `next_note(note, min_note, max_note, wrap)` and
  `previous_note(note, min_note, max_note, wrap)` step through a range,
  either staying at its end or wrapping round; the range defaults to A0–G9
  without wrapping. `note_to_string` gives names such as `"C4"` or
  `"C#/Db4"`, and `"Unknown"` outside the range. `OCTAVES` holds C1 to C8.
- `squidbox.scale`: `Scale` and the scales `MAJOR`, `MINOR`, `DORIAN`,
  `PHRYGIAN`, `LYDIAN`, `MIXOLYDIAN`, `LOCRIAN`, `HARMONIC_MINOR` and
  `HARMONIC_MAJOR` (all in `SCALES`); `ChordType` and the chord types
  `TRIAD`, `SEVENTH`, `SIXTH`, `FIFTH`, `FOURTH`, `THIRD` and `SINGLE_NOTE`
  (all in `CHORD_TYPES`). `Scale.note(root, index)` returns the MIDI number
  of a scale degree, continuing into higher octaves, and raises `ValueError`
  for a negative index. `Scale.chord_notes(root, index, chord)` returns the
  notes of a chord built on a degree.
- `squidbox.moving_average`: `MovingAverage(size)`, whose `next(value)`
  adds a value and returns the average of the last `size` values.

```python
from squidbox.note import Note, note_to_string
from squidbox.scale import MAJOR, TRIAD

MAJOR.chord_notes(Note.C4, 0, TRIAD)   # [60, 64, 67]
note_to_string(Note.CSHARP4)           # "C#/Db4"
```

## Presets

Presets are stored in a JSON document of this shape:

```json
{
  "presets": [
    {
      "name": "Basic",
      "description": "Major triads",
      "notes": [[60, 64, 67], [62, 65, 69], [], [], [], [], [], []]
    }
  ]
}
```

`squidbox.config.Preset` holds a name, a description and one list of notes
per play button (eight lists; missing ones are empty, extra ones dropped).
`Preset.from_dict` and `Preset.to_dict` convert to and from decoded JSON;
`presets_from_document` and `presets_to_document` do the same for a whole
document.

`Config(path)` (default `config.json`) keeps presets in `Config.presets`.
`load()` reads the file and `write(presets)` replaces and saves them; they
raise `ConfigFileNotFoundError`, `ConfigReadError` or `ConfigWriteError`,
all subclasses of `ConfigError`. `begin()` loads and logs a failure instead
of raising, returning whether it succeeded.

## Inputs and output

- `squidbox.inputs`: `Button` (on a pull-up input, with `is_down`,
  `is_pressed` and `is_released` edge detection), `Joystick` (raw and
  normalised axes, `direction()` returning a `Direction` outside a dead zone,
  and `was_up_just_inputted` and friends), and `Knob` (a step counter whose
  `turn(steps)` calls the attached left or right callback with the count).
  Hardware reads are supplied as callables, so everything can be driven in
  code.
- `squidbox.pins`: `pin_map(board)` returns the `PinMap` of a supported
  board (`"adafruit_feather_esp32_v2"` or `"esp32dev"`) and raises
  `ValueError` for any other.
- `squidbox.midi`: the abstract `MidiController` and
  `SimulatedMidiController`, which writes lines such as
  `Note On: 60, Velocity: 127, Channel: 0` to a stream and records every
  message in `sent`.
- `squidbox.screen`: `Screen`, a 128x64 pixel buffer with rectangles,
  bitmaps (`CHECKMARK_BITMAP`, `X_BITMAP`) and text in 6x8 character cells;
  `text_at(row)` reads a line of text back.
- `squidbox.ascii`: `Ascii`, the 256 codes of the code page 437 display
  font, with `char()` giving each glyph.

## Menus

- `squidbox.menu_item.MenuItem`: a named entry with optional select and
  knob-left/right actions; `prefix()` gives the marker shown when selected.
- `squidbox.music_items`: `ChordTypeMenuItem`, `OctaveMenuItem`,
  `ScaleMenuItem` and `RootNoteMenuItem` (C1 to C7, starting at C4), whose
  knob actions step through their choices and rename the item.
- `squidbox.action_items`: `PresetMenuItem` steps through a `Config`'s
  presets; `QuitMenuItem` calls the device's `sleep`;
  `SwitchSceneMenuItem` calls the device's `switch_to` with a `SceneType`.
- `squidbox.scene_type.SceneType`: the scene identifiers, with `NULL` for
  none.
- `squidbox.menu.Menu`: a titled list of items. `draw(device)` reads the
  joystick and OK/back buttons of the device object it is given, then draws
  the header bar, title and items onto its screen. `on_knob_left` and
  `on_knob_right` act on every second knob step.

## What the package does not do

The package has no command to start the controller and no object that ties
the parts together into a running device. It has no playing scenes (chords,
notes, drums, custom presets), no on-screen piano keyboard, no diagnostic
screens, and no serial command interface for reading or replacing presets.
It does not talk to real hardware or send MIDI over any transport; the only
MIDI controller provided is the simulated one.