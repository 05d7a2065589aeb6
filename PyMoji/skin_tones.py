from __future__ import annotations

from enum import Enum

import regex

from PyMoji.classifier import SKIN_TONE_MODIFIERS, VS16, ZWJ


_MODIFIER_BASE_REGEX = regex.compile(r"\p{Emoji_Modifier_Base}")
_UNIFIED_REGEX = regex.compile(r"[0-9A-Fa-f]{1,6}(?:-[0-9A-Fa-f]{1,6})*")


class SkinTone(Enum):
    """Skin tones of the fitzpatrick scale, identified by the code point of their modifier"""

    DEFAULT = "default"
    LIGHT = "1F3FB"
    MEDIUM_LIGHT = "1F3FC"
    MEDIUM = "1F3FD"
    MEDIUM_DARK = "1F3FE"
    DARK = "1F3FF"

    @property
    def modifier(self) -> str:
        """Return the modifier character of this skin tone (an empty string for the default tone)."""

        if self == SkinTone.DEFAULT:
            return ""

        return chr(int(self.value, 16))

    @classmethod
    def from_modifier(cls, modifier: str) -> SkinTone:
        return cls(f"{ord(modifier):X}")


def get_skin_tone(glyph: str) -> SkinTone:
    """Return the first skin tone found in an emoji."""

    for char in glyph:
        if char in SKIN_TONE_MODIFIERS:
            return SkinTone.from_modifier(char)

    return SkinTone.DEFAULT


def strip_skin_tone(glyph: str) -> str:
    """Remove all skin tone modifiers from an emoji."""

    return "".join(char for char in glyph if char not in SKIN_TONE_MODIFIERS)


def _apply_to_component(component: str, modifier: str) -> str:
    if not component or not _MODIFIER_BASE_REGEX.match(component):
        return component

    base, rest = component[0], component[1:]

    # the presentation selector is dropped if a modifier follows the base
    if rest.startswith(VS16):
        rest = rest[1:]

    return base + modifier + rest


def apply_skin_tone(glyph: str, tone: SkinTone) -> str:
    """
    Change the skin tone of an emoji.

    Every component of a zwj sequence that can be modified gets the new skin tone.
    Emoji without such a component are returned unchanged.

    :param glyph: the unicode emoji
    :param tone: the new skin tone, SkinTone.DEFAULT removes all modifiers
    :return: the modified emoji
    """

    glyph = strip_skin_tone(glyph)
    if tone == SkinTone.DEFAULT:
        return glyph

    return ZWJ.join(_apply_to_component(component, tone.modifier) for component in glyph.split(ZWJ))


def emoji_to_unified(glyph: str) -> str:
    """Return the unified code of an emoji, e.g. 1F44D-1F3FD."""

    return "-".join(f"{ord(char):04X}" for char in glyph)


def unified_to_emoji(unified: str) -> str | None:
    """Return the emoji for a unified code or None if the code is invalid."""

    if not _UNIFIED_REGEX.fullmatch(unified):
        return None

    code_points = [int(part, 16) for part in unified.split("-")]

    if not all(0 <= cp <= 0x10FFFF for cp in code_points):
        return None

    return "".join(map(chr, code_points))
