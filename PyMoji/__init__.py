from PyMoji.classifier import EMOJI_REGEX, clusters, is_emoji, is_emoji_cluster, iter_clusters
from PyMoji.message import LARGE_EMOJI_THRESHOLD, is_large_emoji_only, is_only_emoji
from PyMoji.reverse_index import EmojiMap, ReverseIndexCache, invert_emoji_map, reverse_index_cache
from PyMoji.scanner import EmojiOccurrence, count_emoji, extract_emoji, extract_emoji_with_positions
from PyMoji.shortcodes import (
    SHORTCODE_REGEX,
    find_shortcodes,
    get_shortcode_for_emoji,
    is_shortcode,
    replace_shortcodes_with_unicode,
    replace_unicode_with_shortcodes,
)
from PyMoji.skin_tones import (
    SkinTone,
    apply_skin_tone,
    emoji_to_unified,
    get_skin_tone,
    strip_skin_tone,
    unified_to_emoji,
)


__all__ = [
    "EMOJI_REGEX",
    "LARGE_EMOJI_THRESHOLD",
    "SHORTCODE_REGEX",
    "EmojiMap",
    "EmojiOccurrence",
    "ReverseIndexCache",
    "SkinTone",
    "apply_skin_tone",
    "clusters",
    "count_emoji",
    "emoji_to_unified",
    "extract_emoji",
    "extract_emoji_with_positions",
    "find_shortcodes",
    "get_shortcode_for_emoji",
    "get_skin_tone",
    "invert_emoji_map",
    "is_emoji",
    "is_emoji_cluster",
    "is_large_emoji_only",
    "is_only_emoji",
    "is_shortcode",
    "iter_clusters",
    "replace_shortcodes_with_unicode",
    "replace_unicode_with_shortcodes",
    "reverse_index_cache",
    "strip_skin_tone",
    "unified_to_emoji",
]
