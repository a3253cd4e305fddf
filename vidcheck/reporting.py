"""User facing status lines for validated tokens."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from .types import TokenResult

Notifier = Callable[[TokenResult], None]


def format_status_line(result: TokenResult) -> str:
    if result.result is not None:
        return (
            f"{result.token}: Succeeded with the attomic number "
            f"({result.result.score}) with the format {result.result.label.value}."
        )
    return f"{result.token}: {result.error}"


def format_summary(accepted_count: int) -> str:
    if accepted_count:
        return f"Found {accepted_count} valid URLs."
    return "Program has finished without finding any valid URLs."


class ConsoleNotifier:
    """Prints one status line per token as each validation completes."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def __call__(self, result: TokenResult) -> None:
        print(format_status_line(result), file=self._stream or sys.stdout, flush=True)
