"""Configuration loading and normalization."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from config.merge import merge_sections
from config.models import Config, LoggerConfig, OutputConfig


def _as_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, list):
        return [str(v) for v in value]
    return [str(value)]


_TRUE_STRINGS = ("1", "true", "yes", "on")
_FALSE_STRINGS = ("0", "false", "no", "off")


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return default


def _as_float(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _load_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def config_from_dict(raw: Dict[str, Any]) -> Config:
    """Build a Config instance from a raw dictionary."""
    logger_raw = raw.get("logger", {}) or {}
    output_raw = raw.get("output", {}) or {}

    flags_raw = logger_raw.get("flags", ["std"])
    logger = LoggerConfig(
        level=str(logger_raw.get("level", "INFO")),
        level_env=str(logger_raw.get("level_env", "LOG_LEVEL") or ""),
        prefix=str(logger_raw.get("prefix", "") or ""),
        flags=_as_list(flags_raw),
        test_mode=_as_bool(logger_raw.get("test_mode"), False),
    )
    output = OutputConfig(
        target=str(output_raw.get("target", "stderr") or "stderr"),
        http_timeout_seconds=_as_float(output_raw.get("http_timeout_seconds", 10.0), 10.0),
    )
    return Config(logger=logger, output=output)


def load_config(path: Path | None, overrides: Dict[str, Any] | None = None) -> Config:
    """Load config data into a Config instance.

    Args:
        path: Optional JSON file; missing sections fall back to defaults.
        overrides: Per-section values layered over the file, e.g. from CLI
            flags.

    Returns:
        Normalized Config.
    """
    raw: Dict[str, Any] = {}
    if path is not None:
        raw = _load_json(path)
    if overrides:
        raw = merge_sections(raw, overrides)
    return config_from_dict(raw)
