"""
Command line entry point: validate the video ids listed in a file.
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from .clipboard import copy_urls
from .config import RunConfig, load_run_config
from .errors import ConfigError, InputFileError
from .input.loader import load_tokens
from .parallel.runner import run_batch_sync
from .reporting import ConsoleNotifier, format_summary
from .utils import setup_logging

logger = logging.getLogger(__name__)

USAGE_MESSAGE = "Please provide a file as an argument."
COPY_PROMPT = "Do you want to copy all urls. (y)/(n)"
DECLINED_MESSAGE = "Program has finished without copying any URLs."


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="vidcheck",
        description="Validate comma separated video ids or short URLs read from a file.",
    )
    p.add_argument("file", nargs="?", help="File containing comma separated ids/URLs.")
    p.add_argument("--config", default=None, help="Optional YAML run configuration.")
    p.add_argument("--max-concurrent", type=int, default=None, help="Worker threads.")
    p.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for a single id (default: wait forever).",
    )
    group = p.add_mutually_exclusive_group()
    group.add_argument("--yes", action="store_true", help="Copy accepted URLs without asking.")
    group.add_argument(
        "--no-prompt",
        action="store_true",
        help="Never prompt or wait for a key press.",
    )
    p.add_argument("--log-level", default=None, help="Logging level (default: INFO).")
    p.add_argument("--log-file", default=None, help="Write logs to this file.")
    return p


def _merge_args(config: RunConfig, args: argparse.Namespace) -> RunConfig:
    if args.max_concurrent is not None:
        config.max_concurrent = args.max_concurrent
    if args.timeout is not None:
        config.timeout_per_request = args.timeout
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_file is not None:
        config.log_file = args.log_file
    if args.no_prompt:
        config.prompt = False
    return config


def _ask(question: str) -> str:
    try:
        return input(question + "\n")
    except EOFError:
        return ""


def _wait_for_exit(message: str, prompt: bool) -> None:
    print(f"\n{message}")
    if prompt:
        _ask("Press ENTER to exit.")


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_arg_parser().parse_args(argv)

    if args.file is None:
        print(USAGE_MESSAGE)
        return 0

    try:
        config = _merge_args(load_run_config(args.config), args)
        setup_logging(config)
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        raw_tokens = load_tokens(args.file)
    except InputFileError as exc:
        print(exc, file=sys.stderr)
        return 1

    batch = run_batch_sync(
        raw_tokens,
        max_concurrent=config.max_concurrent,
        timeout_per_request=config.timeout_per_request,
        notifier=ConsoleNotifier(),
    )

    if not batch.accepted:
        _wait_for_exit(format_summary(0), config.prompt)
        return 0

    print(f"\n{format_summary(len(batch.accepted))}")
    if args.yes:
        wants_copy = True
    elif config.prompt:
        wants_copy = _ask(COPY_PROMPT)[:1] in ("y", "Y")
    else:
        wants_copy = False

    if not wants_copy:
        _wait_for_exit(DECLINED_MESSAGE, config.prompt)
        return 0

    if not copy_urls(batch.accepted):
        print("Couldn't access the system clipboard.", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
