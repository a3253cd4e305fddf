from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from ..errors import InputFileError

logger = logging.getLogger(__name__)

TOKEN_SEPARATOR = ","


def split_tokens(text: str) -> List[str]:
    """Split comma separated input, dropping blank entries."""
    tokens = [part.strip() for part in text.split(TOKEN_SEPARATOR)]
    return [token for token in tokens if token]


def load_tokens(path: str | Path) -> List[str]:
    """
    Read raw tokens from ``path``.

    Raises:
        InputFileError: the file cannot be opened or decoded
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputFileError(f"Couldn't read {path}: {exc}") from exc

    tokens = split_tokens(text)
    logger.info("Loaded %d candidate tokens from %s", len(tokens), path)
    return tokens
