"""Configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class LoggerConfig:
    """Threshold, prefix and decoration settings."""

    level: str = "INFO"
    level_env: str = "LOG_LEVEL"
    prefix: str = ""
    flags: List[str] = field(default_factory=lambda: ["std"])
    test_mode: bool = False


@dataclass
class OutputConfig:
    """Where log lines are written."""

    target: str = "stderr"
    http_timeout_seconds: float = 10.0


@dataclass
class Config:
    """Top-level configuration container."""

    logger: LoggerConfig
    output: OutputConfig
