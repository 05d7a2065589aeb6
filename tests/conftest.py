import pytest

from PyMoji.reverse_index import reverse_index_cache


FAMILY = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
FAMILY_WITH_BOY = "\U0001F468\u200d\U0001F469\u200d\U0001F466"
HEART = "\u2764\ufe0f"


@pytest.fixture
def emoji_map() -> dict[str, str]:
    return {
        "smile": "\U0001F604",
        "heart": HEART,
        "thumbsup": "\U0001F44D",
        "+1": "\U0001F44D",
        "fire": "\U0001F525",
        "wave": "\U0001F44B",
        "family": FAMILY,
        "flag_us": "\U0001F1FA\U0001F1F8",
    }


@pytest.fixture(autouse=True)
def clear_reverse_index_cache():
    reverse_index_cache.clear()
    yield
    reverse_index_cache.clear()
