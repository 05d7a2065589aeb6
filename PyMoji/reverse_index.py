from __future__ import annotations

from collections import OrderedDict
from threading import Lock
from typing import Mapping, NamedTuple

from PyMoji.environment import REVERSE_INDEX_CACHE_SIZE
from PyMoji.logger import get_logger


logger = get_logger(__name__)

EmojiMap = Mapping[str, str]


def invert_emoji_map(emoji_map: EmojiMap) -> dict[str, str]:
    """
    Invert an emoji map such that every glyph is mapped to a single shortcode name.

    If multiple names map to the same glyph, the first one in the map's iteration order is chosen.
    """

    out: dict[str, str] = {}
    for name, glyph in emoji_map.items():
        if isinstance(glyph, str) and glyph:
            out.setdefault(glyph, name)

    return out


class _Entry(NamedTuple):
    emoji_map: EmojiMap  # keeps the map alive so its id cannot be reused while cached
    size: int
    index: dict[str, str]


class ReverseIndexCache:
    """Memoization table for glyph -> shortcode indices, keyed by the identity of the emoji map"""

    def __init__(self, maxsize: int = REVERSE_INDEX_CACHE_SIZE):
        self.maxsize: int = max(maxsize, 1)
        self._entries: OrderedDict[int, _Entry] = OrderedDict()
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, emoji_map: EmojiMap | None) -> dict[str, str]:
        """
        Return (and build if necessary) the reverse index of a given emoji map.

        The returned dictionary is shared between callers and must not be modified.
        """

        if not emoji_map:
            return {}

        key = id(emoji_map)
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry.emoji_map is emoji_map and entry.size == len(emoji_map):
                self._entries.move_to_end(key)
                return entry.index

            logger.debug("building reverse index for emoji map with %d entries", len(emoji_map))
            entry = _Entry(emoji_map, len(emoji_map), invert_emoji_map(emoji_map))
            self._entries[key] = entry
            self._entries.move_to_end(key)

            while len(self._entries) > self.maxsize:
                _, evicted = self._entries.popitem(last=False)
                logger.debug("evicting reverse index for emoji map with %d entries", evicted.size)

        return entry.index

    def clear(self) -> None:
        """Remove all cached indices."""

        with self._lock:
            self._entries.clear()


# reverse index cache used by the shortcode functions if no other cache is given
reverse_index_cache = ReverseIndexCache()
