#!/usr/bin/env python3
"""CLI entrypoint for the leveled logger."""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Iterator

from cli import EmitOptions, LevelsOptions, parse_cli
from config import Config, load_config
from core.errors import InvalidLevelError, LoggerPanic
from core.levels import Level, parse_level
from core.services.logger_setup import build_logger, effective_level
from logger import Logger, get_logger

log = get_logger()


def _overrides(options: EmitOptions | LevelsOptions) -> Dict[str, Any]:
    threshold = options.threshold
    logger_overrides: Dict[str, Any] = {
        "level": threshold,
        # An explicit threshold wins over the environment.
        "level_env": "" if threshold else None,
    }
    output_overrides: Dict[str, Any] = {}
    if isinstance(options, EmitOptions):
        logger_overrides["prefix"] = options.prefix
        logger_overrides["flags"] = options.flags
        logger_overrides["test_mode"] = True if options.test_mode else None
        output_overrides["target"] = options.output
    return {"logger": logger_overrides, "output": output_overrides}


def _messages(options: EmitOptions) -> Iterator[tuple[str, ...]]:
    if options.from_stdin:
        for line in sys.stdin:
            yield (line.rstrip("\r\n"),)
        return
    yield tuple(options.message)


def _dispatch(logger: Logger, method: str, options: EmitOptions, values: tuple[str, ...]) -> None:
    if options.template is not None:
        getattr(logger, method + "f")(options.template, *values)
    elif options.newline:
        getattr(logger, method + "ln")(*values)
    else:
        getattr(logger, method)(*values)


def _method_for(level_name: str) -> str:
    if level_name.strip().lower() == "panic":
        return "panic"
    level = parse_level(level_name)
    if level == Level.NONE:
        raise InvalidLevelError(level_name)
    return level.label.lower()


def emit(options: EmitOptions, cfg: Config) -> int:
    """Write the requested message(s) and return the exit code."""
    try:
        method = _method_for(options.level)
    except InvalidLevelError as exc:
        log.error(f"Cannot emit at level: {exc}")
        return 2
    if not options.from_stdin and not options.message:
        log.error("No message given")
        return 2

    try:
        handle = build_logger(cfg)
    except (ValueError, OSError) as exc:
        log.error(f"Invalid logger config: {exc}")
        return 2

    try:
        for values in _messages(options):
            _dispatch(handle.logger, method, options, values)
    except LoggerPanic:
        return 1
    except OSError as exc:
        log.error(f"Could not write to {cfg.output.target}: {exc}")
        return 2
    finally:
        handle.close()
    # Only reached after fatal when test mode kept the process alive.
    if method == "fatal":
        return 1
    return 0


def list_levels(cfg: Config) -> int:
    """Print every level with its rank, marking the ones the threshold admits."""
    try:
        threshold = effective_level(cfg)
    except InvalidLevelError as exc:
        log.error(f"Invalid logger config: {exc}")
        return 2
    for level in Level:
        marker = "*" if level != Level.NONE and threshold >= level else " "
        print(f"{marker} {level.value} {level.label}")
    print(f"threshold: {threshold.label}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the CLI entrypoint.

    Returns:
        Process exit code.
    """
    command, options = parse_cli(argv)
    if options.config_path:
        if not options.config_path.exists():
            log.error(f"Config path not found: {options.config_path}")
            return 2
        if options.config_path.is_dir():
            log.error(f"Config path must be a file: {options.config_path}")
            return 2

    try:
        cfg = load_config(options.config_path, _overrides(options))
    except (OSError, json.JSONDecodeError) as exc:
        log.error(f"Could not read config: {exc}")
        return 2

    if command == "levels":
        return list_levels(cfg)
    return emit(options, cfg)


if __name__ == "__main__":
    raise SystemExit(main())
