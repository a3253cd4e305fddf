from __future__ import annotations

import logging
from pathlib import Path

from ..config import RunConfig
from ..errors import ConfigError

LOGGER_NAME = "vidcheck"
CONSOLE_FORMAT = "[%(levelname)s] %(name)s - %(message)s"
# Validations run on "vidcheck_worker_N" threads; the file log records which one.
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(threadName)s %(name)s - %(message)s"


def setup_logging(config: RunConfig) -> logging.Logger:
    """
    Attach handlers for ``config`` to the ``vidcheck`` logger.

    Status lines for each token go to stdout through the notifier; this only
    covers diagnostics, which go to stderr and, when ``config.log_file`` is
    set, to that file as well. Calling it again replaces earlier handlers.

    Raises:
        ConfigError: ``config.log_level`` is not a logging level name
    """
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level: {config.log_level}")

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    package_logger.addHandler(console)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        package_logger.addHandler(file_handler)

    return package_logger
