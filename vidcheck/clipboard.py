from __future__ import annotations

import logging
from typing import Sequence

import pyperclip

logger = logging.getLogger(__name__)


def copy_urls(urls: Sequence[str]) -> bool:
    """Copy ``urls`` to the system clipboard, one per line. Returns False on failure."""
    try:
        pyperclip.copy("\n".join(urls))
    except pyperclip.PyperclipException as exc:
        logger.error("Clipboard unavailable: %s", exc)
        return False
    logger.info("Copied %d URLs to the clipboard", len(urls))
    return True
