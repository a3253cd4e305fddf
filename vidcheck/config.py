from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {"max_concurrent", "timeout_per_request", "log_level", "log_file", "prompt"}


@dataclass
class RunConfig:
    max_concurrent: int = 10
    timeout_per_request: Optional[float] = None
    log_level: str = "INFO"
    log_file: Optional[str] = None
    prompt: bool = True


def load_run_config(path: str | Path | None = None) -> RunConfig:
    """Build a RunConfig from defaults, an optional YAML file and the environment."""
    config = RunConfig()
    if path is not None:
        config = _apply_file(config, Path(path))
    return apply_env(config, os.environ)


def _apply_file(config: RunConfig, path: Path) -> RunConfig:
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Couldn't load config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        logger.warning("Ignoring unknown keys in config %s: %s", path, ", ".join(unknown))

    timeout = data.get("timeout_per_request", config.timeout_per_request)
    try:
        return replace(
            config,
            max_concurrent=int(data.get("max_concurrent", config.max_concurrent)),
            timeout_per_request=float(timeout) if timeout is not None else None,
            log_level=str(data.get("log_level", config.log_level)),
            log_file=data.get("log_file", config.log_file),
            prompt=bool(data.get("prompt", config.prompt)),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid value in config {path}: {exc}") from exc


def apply_env(config: RunConfig, env: Mapping[str, str]) -> RunConfig:
    """Override config fields from VIDCHECK_* environment variables."""
    updates: Dict[str, Any] = {}
    try:
        if env.get("VIDCHECK_MAX_CONCURRENT"):
            updates["max_concurrent"] = int(env["VIDCHECK_MAX_CONCURRENT"])
        if env.get("VIDCHECK_TIMEOUT"):
            updates["timeout_per_request"] = float(env["VIDCHECK_TIMEOUT"])
    except ValueError as exc:
        raise ConfigError(f"Invalid environment override: {exc}") from exc
    if env.get("VIDCHECK_LOG_LEVEL"):
        updates["log_level"] = env["VIDCHECK_LOG_LEVEL"]
    if env.get("VIDCHECK_LOG_FILE"):
        updates["log_file"] = env["VIDCHECK_LOG_FILE"]
    return replace(config, **updates)
