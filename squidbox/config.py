"""Presets and the JSON file that stores them."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

log = logging.getLogger(__name__)

MAX_BUTTONS = 8
DEFAULT_CONFIG_FILE = "config.json"


class ConfigError(Exception):
    """Base class for configuration failures."""


class ConfigFileNotFoundError(ConfigError):
    """The configuration file could not be opened."""


class ConfigReadError(ConfigError):
    """The configuration file could not be parsed."""


class ConfigWriteError(ConfigError):
    """The configuration file could not be written."""


def _to_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def _to_int(value) -> int:
    if isinstance(value, (bool, int, float)):
        return int(value)
    return 0


def _empty_notes() -> list[list[int]]:
    return [[] for _ in range(MAX_BUTTONS)]


@dataclass
class Preset:
    """A named set of notes for each of the eight play buttons."""

    name: str = ""
    description: str = ""
    notes: list[list[int]] = field(default_factory=_empty_notes)

    def __post_init__(self):
        notes = [list(n) for n in self.notes[:MAX_BUTTONS]]
        notes.extend([] for _ in range(MAX_BUTTONS - len(notes)))
        self.notes = notes

    @classmethod
    def from_dict(cls, data):
        """Build a preset from a decoded JSON object, tolerating missing parts."""
        if not isinstance(data, dict):
            data = {}
        raw_notes = data.get("notes")
        if not isinstance(raw_notes, list):
            raw_notes = []
        notes = []
        for entry in raw_notes[:MAX_BUTTONS]:
            if isinstance(entry, list):
                notes.append([_to_int(n) for n in entry])
            else:
                notes.append([])
        return cls(
            name=_to_text(data.get("name")),
            description=_to_text(data.get("description")),
            notes=notes,
        )

    def to_dict(self):
        return {
            "name": self.name,
            "description": self.description,
            "notes": [list(n) for n in self.notes],
        }


def presets_from_document(document):
    """Return the presets held by a decoded configuration document."""
    if not isinstance(document, dict):
        return []
    entries = document.get("presets")
    if not isinstance(entries, list):
        return []
    return [Preset.from_dict(entry) for entry in entries]


def presets_to_document(presets):
    """Return the configuration document for ``presets``."""
    return {"presets": [preset.to_dict() for preset in presets]}


class Config:
    """Presets kept in memory and persisted to a JSON file."""

    def __init__(self, path=DEFAULT_CONFIG_FILE):
        self.path = Path(path)
        self.presets: list[Preset] = []

    def begin(self):
        """Load presets at start-up, logging rather than raising on failure."""
        try:
            self.load()
        except ConfigError as exc:
            log.error("%s", exc)
            return False
        return True

    def load(self):
        """Read presets from the file, replace the in-memory ones and return them."""
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                try:
                    document = json.load(handle)
                except (json.JSONDecodeError, UnicodeDecodeError) as exc:
                    raise ConfigReadError(
                        f"failed to parse config file: {exc}"
                    ) from exc
        except OSError as exc:
            raise ConfigFileNotFoundError(
                f"failed to open config file {self.path}"
            ) from exc

        self.presets = presets_from_document(document)
        log.info("Loaded presets:")
        for preset in self.presets:
            log.info("  %s: %s", preset.name, preset.description)
        return self.presets

    def write(self, presets):
        """Replace the in-memory presets and persist them to the file."""
        self.presets = list(presets)
        try:
            handle = self.path.open("w", encoding="utf-8")
        except OSError as exc:
            raise ConfigFileNotFoundError(
                f"failed to open config file {self.path}"
            ) from exc
        with handle:
            try:
                json.dump(
                    presets_to_document(self.presets),
                    handle,
                    separators=(",", ":"),
                )
            except (OSError, TypeError, ValueError) as exc:
                raise ConfigWriteError("failed to write config file") from exc
        log.info("Config file written successfully")