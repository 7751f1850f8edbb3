[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "squidbox"
version = "0.1.0"
description = "Building blocks of a handheld MIDI controller: notes, scales, chords, presets, inputs, menus and an in-memory screen"
requires-python = ">=3.10"
dependencies = []
keywords = ["midi", "controller", "chords", "scales", "music", "presets", "menu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["squidbox"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
