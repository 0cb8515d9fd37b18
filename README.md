# vbanext

Support code for a Game Boy Advance emulator core, in plain Python with no
third-party dependencies.

## What is in the package

- `vbanext.core_options` – the option definitions (`vbanext_bios`,
  `vbanext_rtc`, optionally `vbanext_frameskip`, `vbanext_turboenable`,
  `vbanext_turbodelay`) in English, Simplified Chinese and Turkish.
  `build_registration(version, language, frame_skip)` returns an
  `OptionsRegistration`: for an options version of 1 or later it carries the
  English set (`us`) and, for a non-English language, the translated set
  (`local`); otherwise it carries legacy `variables` of the form
  `"Description; default|other|..."`.
- `vbanext.overrides` – the per-game override table (save type, flash size,
  RTC, mirroring), looked up by the four-character game code at offset 0xAC of
  a ROM. `resolve_settings(rom)` returns a `CartridgeSettings`;
  `rtc_enabled(settings, option_value)` applies the `vbanext_rtc` option.
- `vbanext.saveram` – `SaveBuffer`, a 0x22000-byte buffer erased to 0xFF,
  whose `adjust()` recognises the save chip (EEPROM 8/64 kbit, Flash
  512 kbit/1 Mbit) from its contents; `memory_size()` gives the sizes of the
  exposed memory regions.
- `vbanext.joypad` – `InputMapper.update(joy_bits)` turns a joypad bitmask
  into the ten console keys, with optional turbo A/B on X/Y and suppression of
  opposing directions; `bits_from_buttons()` builds a bitmask.
- `vbanext.cheats` – `parse_cheat(index, code)` splits a cheat string into
  CodeBreaker (12 digits, written `XXXXXXXX YYYY`) and GameShark (16 digits)
  codes and collects invalid ones.
- `vbanext.info` – system information, screen geometry and timing, the memory
  map, input descriptors, and parsing of the frameskip and turbo delay values.
- `vbanext.vfs_file` – `VfsFile`, a file opened with a `FileAccess` mode that
  tracks its size; read-only files opened with `AccessHint.FREQUENT_ACCESS`
  are memory-mapped. Usable as a context manager.
- `vbanext.fsops` – `stat_path`, `remove_path`, `rename_path`,
  `make_directory`, and `VfsDirectory`, which yields `DirEntry` items.
- `vbanext.timeutil` – `localtime(timestamp)`, a lock-protected conversion to
  local time.
- `vbanext.gbaconv` – conversion between raw `.sav` files and the padded
  0x22000-byte `.srm` layout, and the `gbaconv` command.

Messages about detected save types, overrides and cheat codes go through the
standard `logging` module.

## Installation

```
pip install .
```

## Converting save files

```
gbaconv game.sav
```

writes `game.srm`. Given a file ending in `.srm` (in any case), it writes the
matching `.sav` instead:

```
gbaconv game.srm
```

Any other extension of three or more characters is also converted to `.srm`;
a file with no such extension is rejected. The detected save type is printed.
If the type cannot be told from the file's size and contents, or the file
cannot be read or written, the command prints an error and exits with
status 1.

## Using the library

```python
from pathlib import Path
from vbanext.gbaconv import detect_save_type, to_srm

data = Path("game.sav").read_bytes()
kind = detect_save_type(data)
print(kind.describe())
srm = to_srm(data, kind)
```

```python
from vbanext.overrides import resolve_settings

settings = resolve_settings(rom_bytes)
print(settings.save_type, settings.flash_size, settings.enable_rtc)
```

```python
from vbanext.cheats import parse_cheat

result = parse_cheat(0, "12345678 9ABC")
print([c.code for c in result.codes])  # ['12345678 9ABC']
```

## What the package does not do

It does not emulate the console: there is no CPU, graphics, sound or ROM
loading here, and no front end to run games. The modules describe and prepare
what such a core needs — options, overrides, save memory, input, cheats and
files — but running a game is outside this package.

## Running the tests

```
pip install .[test]
pytest
```