import pytest

from vbanext.saveram import (
    MemoryId,
    SaveBuffer,
    SaveKind,
    detect_save_size,
    memory_size,
    scan_area,
)


def test_new_buffer_is_erased_and_full_size():
    buffer = SaveBuffer()
    assert buffer.active_size() == 0x20000 + 0x2000
    assert not scan_area(buffer.data)


def test_adjust_on_erased_buffer_keeps_size():
    buffer = SaveBuffer()
    assert buffer.adjust() is None
    assert buffer.active_size() == 0x20000 + 0x2000
    assert buffer.kind is None


@pytest.mark.parametrize(
    "offset, kind",
    [
        (0, SaveKind.EEPROM_8KBIT),
        (511, SaveKind.EEPROM_8KBIT),
        (512, SaveKind.EEPROM_64KBIT),
        (0x1FFF, SaveKind.EEPROM_64KBIT),
        (0x2000, SaveKind.FLASH_512KBIT),
        (0xFFFF, SaveKind.FLASH_512KBIT),
        (0x10000, SaveKind.FLASH_1MBIT),
        (0x1FFFF, SaveKind.FLASH_1MBIT),
    ],
)
def test_adjust_detects_kind(offset, kind):
    buffer = SaveBuffer()
    buffer.data[offset] = 0
    assert buffer.adjust() is kind
    assert buffer.active_size() == int(kind)


def test_data_past_largest_chip_is_not_recognised():
    buffer = SaveBuffer()
    buffer.data[0x20000] = 0
    assert buffer.adjust() is None


def test_adjust_keeps_previous_size_when_nothing_found():
    buffer = SaveBuffer()
    buffer.data[0] = 0
    buffer.adjust()
    buffer.data[0] = 0xFF
    assert buffer.adjust() is None
    assert buffer.active_size() == 512


def test_detect_save_size_matches_kind_values():
    data = bytearray([0xFF]) * (0x20000 + 0x2000)
    data[0x3000] = 1
    assert detect_save_size(bytes(data)) == int(SaveKind.FLASH_512KBIT)


def test_kind_categories_of_detected_saves():
    eeprom_buffer = SaveBuffer()
    eeprom_buffer.data[600] = 0
    eeprom_kind = eeprom_buffer.adjust()
    assert eeprom_kind is SaveKind.EEPROM_64KBIT
    assert eeprom_kind.is_eeprom
    assert not eeprom_kind.is_flash

    flash_buffer = SaveBuffer()
    flash_buffer.data[0x10000] = 0
    flash_kind = flash_buffer.adjust()
    assert flash_kind is SaveKind.FLASH_1MBIT
    assert flash_kind.is_flash
    assert not flash_kind.is_eeprom


def test_scan_area():
    assert scan_area(b"\xff\xfe")
    assert not scan_area(b"\xff\xff")
    assert not scan_area(b"")


def test_memory_sizes():
    assert memory_size(MemoryId.SAVE_RAM, 512) == 512
    assert memory_size(MemoryId.SYSTEM_RAM, 512) == 0x40000
    assert memory_size(MemoryId.VIDEO_RAM, 512) == 0x20000
    assert memory_size(MemoryId.RTC, 512) == 0