import pytest

from vbanext.info import (
    av_info,
    frameskip_code,
    input_descriptors,
    memory_descriptors,
    system_info,
    turbo_delay,
)
from vbanext.joypad import JoypadButton


def test_system_info_defaults():
    info = system_info()
    assert info.library_name == "VBA Next"
    assert info.library_version == "v1.0.2"
    assert info.valid_extensions == "gba"
    assert info.need_fullpath is False
    assert info.block_extract is False


def test_system_info_appends_git_version_and_needs_path():
    info = system_info(load_from_memory=False, git_version=" abc1234")
    assert info.library_version == "v1.0.2 abc1234"
    assert info.need_fullpath is True


def test_av_info_matches_screen_and_clock():
    info = av_info()
    assert (info.base_width, info.base_height) == (240, 160)
    assert (info.max_width, info.max_height) == (240, 160)
    assert info.aspect_ratio == pytest.approx(info.base_width / info.base_height)
    assert info.fps == pytest.approx(16777216.0 / 280896.0)
    assert info.sample_rate == 32000.0


def test_memory_descriptors_order_and_rom_size():
    rom_size = 0x100000
    descs = memory_descriptors(rom_size)
    assert [d.address_space for d in descs] == [
        "BIOS", "EWRAM", "IWRAM", "IOMEM", "PALRAM", "VRAM", "OAM",
        "ROM-WS0", "ROM-WS1", "ROM-WS2", "SRAM",
    ]
    assert all(d.length == rom_size for d in descs if d.address_space.startswith("ROM"))


def test_memory_descriptors_starts_ascend_and_vram_select():
    descs = memory_descriptors(0x200)
    starts = [d.start for d in descs]
    assert starts == sorted(starts)
    vram = next(d for d in descs if d.address_space == "VRAM")
    assert vram.select == 0xFFFE8000
    assert vram.start == 0x06000000
    assert all(d.select == 0 for d in descs if d.address_space != "VRAM")


def test_input_descriptors_cover_each_button_once():
    descs = input_descriptors()
    buttons = [d.button for d in descs]
    assert len(buttons) == len(set(buttons)) == 12
    assert JoypadButton.X in buttons and JoypadButton.Y in buttons
    assert all(d.port == 0 and d.index == 0 for d in descs)


def test_input_descriptor_labels_for_turbo():
    labels = {d.button: d.description for d in input_descriptors()}
    assert labels[JoypadButton.X] == "连发 A"
    assert labels[JoypadButton.Y] == "连发 B"


@pytest.mark.parametrize(
    "value, code",
    [("1/3", 0x13), ("1/2", 0x12), ("1", 0x1), ("2", 0x2), ("3", 0x3), ("4", 0x4)],
)
def test_frameskip_codes(value, code):
    assert frameskip_code(value) == code


@pytest.mark.parametrize("value", ["0", None, "5", "fast"])
def test_frameskip_unknown_is_zero(value):
    assert frameskip_code(value) == 0


@pytest.mark.parametrize("value", ["1", "2", "15"])
def test_turbo_delay_reads_number(value):
    assert turbo_delay(value) == int(value)


def test_turbo_delay_reads_leading_digits_only():
    assert turbo_delay(" 12frames") == 12


@pytest.mark.parametrize("value", [None, "", "abc"])
def test_turbo_delay_without_number_is_zero(value):
    assert turbo_delay(value) == 0