from __future__ import annotations

from typing import Iterator, NamedTuple

import regex


ZWJ = "\u200D"  # zero width joiner
VS15 = "\uFE0E"  # text presentation selector
VS16 = "\uFE0F"  # emoji presentation selector
KEYCAP = "\u20E3"  # combining enclosing keycap

# fitzpatrick skin tone modifiers (light to dark)
SKIN_TONE_MODIFIERS = "".join(map(chr, range(0x1F3FB, 0x1F3FF + 1)))

_PICTOGRAPH = r"[\p{Emoji_Presentation}\p{Extended_Pictographic}]"
_MODIFIER = r"[\U0001F3FB-\U0001F3FF]"
_TAG_SEQUENCE = r"[\U000E0020-\U000E007E]+\U000E007F"

# exactly one emoji grapheme cluster
EMOJI_REGEX: regex.Pattern[str] = regex.compile(
    # flag (pair of regional indicator symbols)
    r"[\U0001F1E6-\U0001F1FF]{2}"
    # keycap sequence
    r"|[0-9#*][\uFE0E\uFE0F]?\u20E3"
    # pictograph with optional modifier, presentation selector and tag sequence, joined by zwj
    rf"|{_PICTOGRAPH}{_MODIFIER}?[\uFE0E\uFE0F]?(?:{_TAG_SEQUENCE})?"
    rf"(?:\u200D{_PICTOGRAPH}{_MODIFIER}?\uFE0F?)*",
)

# code points that extend a non-emoji cluster
_CONTINUATION_REGEX: regex.Pattern[str] = regex.compile(r"[\p{M}\u200D]*")


class Cluster(NamedTuple):
    """A grapheme cluster and its position in the scanned text."""

    start: int
    end: int
    text: str
    is_emoji: bool


def iter_clusters(text: str) -> Iterator[Cluster]:
    """
    Split a string into grapheme clusters by scanning it from left to right.

    Emoji clusters are never split. Any other code point starts a new cluster which absorbs following combining
    marks (this includes variation selectors and the enclosing keycap) and zero width joiners.

    :param text: the string to scan
    :return: an iterator over all clusters, offsets are python string indices (code points)
    """

    pos = 0
    while pos < len(text):
        if match := EMOJI_REGEX.match(text, pos):
            yield Cluster(pos, match.end(), match.group(), True)
            pos = match.end()
            continue

        end = _CONTINUATION_REGEX.match(text, pos + 1).end()
        yield Cluster(pos, end, text[pos:end], False)
        pos = end


def clusters(text: str) -> list[str]:
    """Return the grapheme clusters of a string."""

    return [cluster.text for cluster in iter_clusters(text)]


def is_emoji_cluster(cluster: str) -> bool:
    """Return whether a single grapheme cluster is an emoji."""

    return EMOJI_REGEX.fullmatch(cluster) is not None


def is_emoji(text: str) -> bool:
    """
    Return whether a string consists of exactly one emoji.

    Modifiers, presentation selectors and zwj sequences belong to the emoji, anything else (including a second
    emoji or surrounding whitespace) makes this return False.
    """

    if not text:
        return False

    return is_emoji_cluster(text)
