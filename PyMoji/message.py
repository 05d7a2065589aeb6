from PyMoji.classifier import is_emoji
from PyMoji.environment import LARGE_EMOJI_THRESHOLD
from PyMoji.scanner import count_emoji, extract_emoji


__all__ = ["LARGE_EMOJI_THRESHOLD", "is_emoji", "is_only_emoji", "is_large_emoji_only"]

# ascii whitespace allowed between the emoji of an emoji-only message
_WHITESPACE = str.maketrans("", "", " \t\n\r")


def is_only_emoji(text: str) -> bool:
    """
    Return whether a message consists of emoji only.

    Whitespace between the emoji is ignored, an empty or whitespace-only message is not considered emoji-only.
    """

    if not (stripped := text.translate(_WHITESPACE)):
        return False

    return "".join(extract_emoji(stripped)) == stripped


def is_large_emoji_only(text: str, threshold: int = LARGE_EMOJI_THRESHOLD) -> bool:
    """
    Return whether a message should be rendered with large emoji glyphs.

    :param text: the message content
    :param threshold: the maximum number of emoji
    :return: True if the message contains only emoji and at most threshold of them
    """

    return is_only_emoji(text) and count_emoji(text) <= threshold
