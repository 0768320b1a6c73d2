"""Build a Logger from loaded configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import IO, Mapping

from config.models import Config
from core.levels import Level, parse_level
from core.sinks import HTTPSink, open_sink
from core.writer import parse_flags
from logger import Logger, new_logger


@dataclass
class LoggerHandle:
    """A configured logger and the sink it writes to."""

    logger: Logger
    sink: IO | HTTPSink
    owned: bool

    def close(self) -> None:
        """Close the sink if it was opened for this logger."""
        if self.owned:
            self.sink.close()


def effective_level(cfg: Config, environ: Mapping[str, str] | None = None) -> Level:
    """Return the configured threshold, letting ``level_env`` override it.

    Raises:
        InvalidLevelError: If the configured or environment value is not a
            level name.
    """
    env = os.environ if environ is None else environ
    name = cfg.logger.level
    if cfg.logger.level_env:
        env_value = env.get(cfg.logger.level_env, "").strip()
        if env_value:
            name = env_value
    return parse_level(name)


def build_logger(cfg: Config, environ: Mapping[str, str] | None = None) -> LoggerHandle:
    """Open the configured output and wrap it in a Logger.

    Raises:
        InvalidLevelError: On a bad level name.
        ValueError: On an unknown decoration name.
        OSError: If a file target cannot be opened.
    """
    level = effective_level(cfg, environ)
    flags = parse_flags(cfg.logger.flags)
    sink, owned = open_sink(cfg.output.target, http_timeout=cfg.output.http_timeout_seconds)
    logger = new_logger(sink, cfg.logger.prefix, flags, level=level, test_mode=cfg.logger.test_mode)
    return LoggerHandle(logger=logger, sink=sink, owned=owned)
