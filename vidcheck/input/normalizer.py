from __future__ import annotations

SHORT_URL_PREFIX = "youtu.be/"

# Removed in this order; "/" goes last so the prefixes above still match.
STRIPPED_FRAGMENTS = (
    "https://",
    "http://",
    "www.",
    "youtube.com/watchv?=",
    "youtube.com/watch?v=",
    SHORT_URL_PREFIX,
    "/",
)


def normalize_token(raw: str) -> str:
    """
    Reduce a raw URL-like string to the bare video id.

    >>> normalize_token("https://youtu.be/dQw4w9WgXcQ")
    'dQw4w9WgXcQ'
    """
    token = raw.strip()
    for fragment in STRIPPED_FRAGMENTS:
        token = token.replace(fragment, "")
    return token


def format_short_url(token: str) -> str:
    return f"{SHORT_URL_PREFIX}{token}"
