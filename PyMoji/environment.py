from os import getenv


def get_bool(key: str, default: bool) -> bool:
    """Get a boolean from an environment variable."""

    return getenv(key, str(default)).lower() in ("true", "t", "yes", "y", "1")


def get_int(key: str, default: int, minimum: int = 0) -> int:
    """Get an integer from an environment variable, falling back to the default for invalid values."""

    try:
        value = int(getenv(key, default))
    except ValueError:
        return default

    return max(value, minimum)


LOG_LEVEL: str = getenv("LOG_LEVEL", "INFO")

# maximum number of emoji in an emoji-only message that is still rendered with large glyphs
LARGE_EMOJI_THRESHOLD: int = get_int("LARGE_EMOJI_THRESHOLD", 3)

# number of glyph -> shortcode indices kept in memory
REVERSE_INDEX_CACHE_SIZE: int = get_int("REVERSE_INDEX_CACHE_SIZE", 32, minimum=1)

SENTRY_DSN: str | None = getenv("SENTRY_DSN")  # sentry data source name
SENTRY_TRACES: bool = get_bool("SENTRY_TRACES", False)
