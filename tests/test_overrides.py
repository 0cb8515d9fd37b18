import pytest

from vbanext.overrides import (
    CartridgeSettings,
    find_override,
    game_id_from_rom,
    resolve_settings,
    rtc_enabled,
)


def make_rom(game_id: bytes, size: int = 0x200) -> bytes:
    rom = bytearray(size)
    rom[0xAC:0xAC + len(game_id)] = game_id
    return bytes(rom)


def test_game_id_read_from_header():
    assert game_id_from_rom(make_rom(b"BPEE")) == "BPEE"


def test_game_id_stops_at_nul():
    assert game_id_from_rom(make_rom(b"AB\0D")) == "AB"


def test_game_id_short_rom_rejected():
    with pytest.raises(ValueError):
        game_id_from_rom(b"\0" * 0xAF)


def test_find_override_emerald():
    override = find_override("BPEE")
    assert override.title == "Pokemon - Emerald Version (USA, Europe)"
    assert override.flash_size == 131072
    assert override.rtc is True


def test_find_override_unknown_returns_none():
    assert find_override("ZZZZ") is None


def test_find_override_is_case_sensitive():
    assert find_override("AR8e").title == "Rocky (USA)(En,Fr,De,Es,It)"
    assert find_override("AR8E") is None


def test_duplicate_code_uses_first_entry():
    assert find_override("FTBJ").title == "Famicom Mini Vol. 16 - Dig Dug (Japan)"


def test_bios_flag_only_on_listed_game():
    assert find_override("BYGE").use_bios is True
    assert find_override("BY6P").use_bios is False


def test_resolve_settings_flash_and_rtc():
    settings = resolve_settings(make_rom(b"BPEE"))
    assert settings == CartridgeSettings(
        enable_rtc=True, flash_size=131072, save_type=0, mirroring=False
    )


def test_resolve_settings_zero_flash_uses_default():
    settings = resolve_settings(make_rom(b"BLFE"))
    assert settings.flash_size == 65536
    assert settings.save_type == 1


def test_resolve_settings_mirroring():
    settings = resolve_settings(make_rom(b"AGSE"))
    assert settings.mirroring is True
    assert settings.flash_size == 65536


def test_resolve_settings_unknown_game_defaults():
    assert resolve_settings(make_rom(b"ZZZZ")) == CartridgeSettings()


@pytest.mark.parametrize(
    "enable_rtc, option, expected",
    [
        (False, "enabled", True),
        (False, "auto", False),
        (True, "auto", True),
        (True, None, False),
        (False, None, False),
    ],
)
def test_rtc_enabled(enable_rtc, option, expected):
    settings = CartridgeSettings(enable_rtc=enable_rtc)
    assert rtc_enabled(settings, option) is expected