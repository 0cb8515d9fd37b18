"""Core option definitions and how they are registered with a frontend.

Frontends that speak options version 1 or later receive the full
definitions: the English set plus an optional set for the user's
language. Older frontends receive plain ``key -> "Description; a|b|c"``
variables, with the default value listed first.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Language(IntEnum):
    """Frontend languages, numbered as the frontend reports them."""

    ENGLISH = 0
    JAPANESE = 1
    FRENCH = 2
    SPANISH = 3
    GERMAN = 4
    ITALIAN = 5
    DUTCH = 6
    PORTUGUESE_BRAZIL = 7
    PORTUGUESE_PORTUGAL = 8
    RUSSIAN = 9
    KOREAN = 10
    CHINESE_TRADITIONAL = 11
    CHINESE_SIMPLIFIED = 12
    ESPERANTO = 13
    POLISH = 14
    VIETNAMESE = 15
    ARABIC = 16
    GREEK = 17
    TURKISH = 18


@dataclass(frozen=True)
class OptionValue:
    """One selectable value of an option, with an optional display label."""

    value: str
    label: str | None = None


@dataclass(frozen=True)
class CoreOption:
    """A core option: key, description, help text, values and default."""

    key: str
    desc: str | None
    info: str
    values: tuple[OptionValue, ...]
    default_value: str | None

    def legacy_value(self) -> str | None:
        """Return the ``"desc; default|other|..."`` string, or None if it has none."""
        if self.desc is None or not self.values:
            return None
        names = [option.value for option in self.values]
        default_index = 0
        if self.default_value is not None:
            for index, name in enumerate(names):
                if name == self.default_value:
                    default_index = index
        ordered = [names[default_index]]
        ordered.extend(name for index, name in enumerate(names) if index != default_index)
        return f"{self.desc}; " + "|".join(ordered)


@dataclass(frozen=True)
class OptionsRegistration:
    """What gets handed to the frontend when options are registered.

    With an options interface of version 1 or later, ``us`` and ``local``
    are set; otherwise ``variables`` holds the legacy key/value pairs.
    """

    version: int
    us: tuple[CoreOption, ...] | None = None
    local: tuple[CoreOption, ...] | None = None
    variables: dict[str, str | None] | None = None

    @property
    def uses_definitions(self) -> bool:
        return self.us is not None


def _values(*names: str, labels: dict[str, str] | None = None) -> tuple[OptionValue, ...]:
    labels = labels or {}
    return tuple(OptionValue(name, labels.get(name)) for name in names)


_FRAMESKIP_VALUES = ("0", "1/3", "1/2", "1", "2", "3", "4")
_TURBO_DELAY_VALUES = tuple(str(frames) for frames in range(1, 16))


def _bios(desc: str, info: str) -> CoreOption:
    return CoreOption("vbanext_bios", desc, info, _values("enabled", "disabled"), "enabled")


def _frameskip(desc: str) -> CoreOption:
    return CoreOption("vbanext_frameskip", desc, "", _values(*_FRAMESKIP_VALUES), "0")


def _rtc(desc: str, info: str, labels: dict[str, str] | None = None) -> CoreOption:
    return CoreOption(
        "vbanext_rtc", desc, info, _values("auto", "enabled", labels=labels), "auto"
    )


def _turbo_enable(desc: str, info: str) -> CoreOption:
    return CoreOption(
        "vbanext_turboenable", desc, info, _values("disabled", "enabled"), "disabled"
    )


def _turbo_delay(desc: str, info: str) -> CoreOption:
    return CoreOption("vbanext_turbodelay", desc, info, _values(*_TURBO_DELAY_VALUES), "2")


def english_options(frame_skip: bool = False) -> tuple[CoreOption, ...]:
    """The default (English) option set; every other language falls back to it."""
    options = [
        _bios(
            "Use BIOS if available (Restart)",
            "Uses BIOS present in RetroArch's system directory.",
        ),
        _rtc(
            "Force Enable RTC (Restart)",
            "Forces RTC to be enabled even for unknown roms. This is helpful for "
            "romhacks that needs RTC (like pokemon romhacks) without a matching "
            "override entry.",
        ),
    ]
    if frame_skip:
        options.append(_frameskip("Frameskip"))
    options.append(
        _turbo_enable("Enable Turbo Buttons", "Enable or disable gamepad turbo buttons.")
    )
    options.append(
        _turbo_delay(
            "Turbo Delay in frames",
            "Repeat rate of turbo triggers in frames. Higher value triggers more.",
        )
    )
    return tuple(options)


def simplified_chinese_options(frame_skip: bool = False) -> tuple[CoreOption, ...]:
    """The Simplified Chinese option set."""
    options = [
        _bios("如果可用使用BIOS（需要重启）", "使用RetroArch系统目录中的BIOS文件。"),
        _rtc(
            "强制启用实时时钟（需要重启）",
            "对未知的ROM强制启用实时时钟。该选项有助于需要实时时钟的修改版游戏（例如修改版宝可梦）。",
            labels={"auto": "自动"},
        ),
    ]
    if frame_skip:
        options.append(_frameskip("跳帧"))
    options.append(_turbo_enable("启用连发键", "启用或者禁用手柄连发键。"))
    options.append(_turbo_delay("连发速度", "连发帧数频率，值越高连发速度越快。"))
    return tuple(options)


def turkish_options(frame_skip: bool = False) -> tuple[CoreOption, ...]:
    """The Turkish option set (partial; the rest falls back to English)."""
    options = [
        _bios(
            "Varsa BIOS'u kullanın (Yeniden Başlatma Gerekir)",
            "RetroArch'ın sistem dizininde bulunan BIOS'u kullanır.",
        )
    ]
    if frame_skip:
        options.append(_frameskip("Kare atlama"))
    return tuple(options)


_BUILDERS = {
    Language.ENGLISH: english_options,
    Language.CHINESE_SIMPLIFIED: simplified_chinese_options,
    Language.TURKISH: turkish_options,
}


def options_for_language(language: int, frame_skip: bool = False) -> tuple[CoreOption, ...] | None:
    """Return the option set translated for ``language``, or None if there is none."""
    try:
        builder = _BUILDERS.get(Language(language))
    except ValueError:
        return None
    return builder(frame_skip) if builder else None


def legacy_variables(options: tuple[CoreOption, ...]) -> dict[str, str | None]:
    """Turn option definitions into legacy ``key -> value string`` variables."""
    return {option.key: option.legacy_value() for option in options}


def build_registration(
    version: int | None, language: int | None, frame_skip: bool = False
) -> OptionsRegistration:
    """Decide what to register given the frontend's options version and language.

    ``None`` for either argument means the frontend did not report it.
    """
    us = english_options(frame_skip)
    effective_version = version or 0
    if effective_version >= 1:
        local = None
        if language is not None and language != Language.ENGLISH:
            local = options_for_language(language, frame_skip)
        return OptionsRegistration(version=effective_version, us=us, local=local)
    return OptionsRegistration(version=effective_version, variables=legacy_variables(us))