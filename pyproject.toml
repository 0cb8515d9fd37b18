[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vbanext"
version = "1.0.2"
description = "Support code for a Game Boy Advance emulator core: core options, per-game overrides, save RAM detection, cheats, input mapping, a small file layer and a save file converter"
requires-python = ">=3.10"
keywords = ["gba", "game boy advance", "emulator", "save", "srm", "cheats"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gbaconv = "vbanext.gbaconv:main"

[tool.hatch.build.targets.wheel]
packages = ["vbanext"]

[tool.pytest.ini_options]
addopts = "-ra"
