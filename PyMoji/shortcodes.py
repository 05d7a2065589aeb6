from __future__ import annotations

import re

from PyMoji.classifier import iter_clusters
from PyMoji.reverse_index import EmojiMap, ReverseIndexCache, reverse_index_cache


# :name: token, the name may contain letters, digits, underscores, plus and minus
SHORTCODE_REGEX: re.Pattern[str] = re.compile(r":([a-zA-Z0-9_+\-]+):")


def is_shortcode(text: str) -> bool:
    """Return whether a string is exactly one :shortcode: token."""

    return SHORTCODE_REGEX.fullmatch(text) is not None


def find_shortcodes(text: str) -> list[str]:
    """Return the names of all :shortcode: tokens in a text, whether they are known or not."""

    return SHORTCODE_REGEX.findall(text)


def replace_shortcodes_with_unicode(text: str, emoji_map: EmojiMap | None) -> str:
    """
    Replace :shortcode: tokens with their unicode emoji.

    :param text: the text containing shortcodes
    :param emoji_map: maps shortcode names (without colons) to unicode emoji
    :return: the text with all known shortcodes replaced, unknown shortcodes are kept as they are
    """

    if not text or not emoji_map:
        return text

    def replace(match: re.Match[str]) -> str:
        glyph = emoji_map.get(match.group(1))
        return glyph if isinstance(glyph, str) else match.group(0)

    return SHORTCODE_REGEX.sub(replace, text)


def replace_unicode_with_shortcodes(
    text: str, emoji_map: EmojiMap | None, cache: ReverseIndexCache = reverse_index_cache
) -> str:
    """
    Replace unicode emoji with :shortcode: tokens.

    :param text: the text containing unicode emoji
    :param emoji_map: maps shortcode names (without colons) to unicode emoji
    :param cache: the cache to get the glyph -> shortcode index from
    :return: the text with all known emoji replaced, other emoji and text are kept as they are
    """

    if not text or not (reverse_index := cache.get(emoji_map)):
        return text

    out: list[str] = []
    for cluster in iter_clusters(text):
        if cluster.is_emoji and (name := reverse_index.get(cluster.text)) is not None:
            out.append(f":{name}:")
        else:
            out.append(cluster.text)

    return "".join(out)


def get_shortcode_for_emoji(
    glyph: str, emoji_map: EmojiMap | None, cache: ReverseIndexCache = reverse_index_cache
) -> str | None:
    """
    Return the shortcode name of a unicode emoji.

    If multiple names map to the emoji, the first one in the emoji map is returned.

    :param glyph: the unicode emoji
    :param emoji_map: maps shortcode names (without colons) to unicode emoji
    :param cache: the cache to get the glyph -> shortcode index from
    :return: the shortcode name without colons or None if the emoji is unknown
    """

    if not glyph:
        return None

    return cache.get(emoji_map).get(glyph)
