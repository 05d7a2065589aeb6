from __future__ import annotations

from typing import NamedTuple

from PyMoji.classifier import iter_clusters


class EmojiOccurrence(NamedTuple):
    """
    An emoji found in a text.

    index and length are python string offsets (code points), so text[index:index + length] == emoji.
    """

    emoji: str
    index: int
    length: int

    @property
    def end(self) -> int:
        return self.index + self.length


def extract_emoji_with_positions(text: str) -> list[EmojiOccurrence]:
    """Return all emoji in a text together with their positions, in order of appearance."""

    if not text:
        return []

    return [
        EmojiOccurrence(cluster.text, cluster.start, cluster.end - cluster.start)
        for cluster in iter_clusters(text)
        if cluster.is_emoji
    ]


def extract_emoji(text: str) -> list[str]:
    """Return all emoji in a text, in order of appearance."""

    return [occurrence.emoji for occurrence in extract_emoji_with_positions(text)]


def count_emoji(text: str) -> int:
    """Count the emoji in a text. Zwj sequences, flags and emoji with modifiers count as one."""

    return len(extract_emoji_with_positions(text))
