"""Support code for a Game Boy Advance emulator core: options, overrides, save RAM, input, cheats, files and save conversion."""

__version__ = "1.0.2"