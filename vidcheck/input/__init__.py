"""Reading and normalizing candidate video ids."""

from .loader import load_tokens, split_tokens
from .normalizer import format_short_url, normalize_token

__all__ = [
    "load_tokens",
    "split_tokens",
    "format_short_url",
    "normalize_token",
]
