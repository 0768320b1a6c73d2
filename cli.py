"""Command-line parsing helpers."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="Path to a config.json file")
    parser.add_argument("--threshold", help="Logger threshold (none, fatal, error, warn, info, debug)")


@dataclass
class EmitOptions:
    """Parsed CLI options used by the emit command."""

    level: str
    message: list[str]
    config_path: Path | None
    threshold: str | None
    prefix: str | None
    flags: list[str] | None
    output: str | None
    template: str | None
    newline: bool
    from_stdin: bool
    test_mode: bool


@dataclass
class LevelsOptions:
    """Parsed CLI options used by the levels command."""

    config_path: Path | None
    threshold: str | None


def _parse_emit_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the emit command.

    Args:
        argv: Optional argument list.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        prog="simple-logger",
        description="Write a message through a leveled logger.",
    )
    parser.add_argument("level", help="Message level (fatal, error, warn, info, debug) or panic")
    parser.add_argument("message", nargs="*", help="Message values, joined with a space")
    _add_common_args(parser)
    parser.add_argument("--prefix", help="Text placed at the start of every line")
    parser.add_argument(
        "--flag",
        action="append",
        help="Line decoration, repeatable or comma separated, e.g. --flag date,time --flag shortfile",
    )
    parser.add_argument("--output", help="stderr, stdout, '-', a file path or an http(s) URL")
    parser.add_argument("--format", dest="template", help="%%-style template applied to the message values")
    parser.add_argument("--newline", action="store_true", help="Append a newline to the joined values")
    parser.add_argument("--stdin", action="store_true", help="Emit one message per line read from stdin")
    parser.add_argument(
        "--test",
        action="store_true",
        help="Test mode: fatal messages are written but do not exit the process",
    )
    return parser.parse_args(argv)


def _parse_levels_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="simple-logger levels",
        description="List log levels and which ones the threshold admits.",
    )
    _add_common_args(parser)
    return parser.parse_args(argv)


def _normalize_flags(raw_values: Iterable[str] | None) -> list[str] | None:
    if raw_values is None:
        return None
    flags: list[str] = []
    for item in raw_values:
        for raw in str(item).split(","):
            value = raw.strip().lower()
            if value:
                flags.append(value)
    return flags


def resolve_config_path(args: argparse.Namespace) -> Path | None:
    """Resolve the config path from CLI arguments.

    Args:
        args: Parsed argparse namespace.

    Returns:
        Resolved config path, ``./config.json`` when present, or None.
    """
    if args.config:
        return Path(args.config).expanduser().resolve()
    default_file = Path.cwd() / "config.json"
    if default_file.exists():
        return default_file.resolve()
    return None


def get_emit_options(argv: list[str] | None = None) -> EmitOptions:
    """Build an EmitOptions instance from CLI arguments."""
    args = _parse_emit_args(argv)
    return EmitOptions(
        level=args.level,
        message=list(args.message),
        config_path=resolve_config_path(args),
        threshold=args.threshold,
        prefix=args.prefix,
        flags=_normalize_flags(args.flag),
        output=args.output,
        template=args.template,
        newline=bool(args.newline),
        from_stdin=bool(args.stdin),
        test_mode=bool(args.test),
    )


def get_levels_options(argv: list[str] | None = None) -> LevelsOptions:
    """Build a LevelsOptions instance from CLI arguments."""
    args = _parse_levels_args(argv)
    return LevelsOptions(config_path=resolve_config_path(args), threshold=args.threshold)


def parse_cli(argv: list[str] | None = None) -> tuple[str, EmitOptions | LevelsOptions]:
    """Parse command-line arguments and return the command name and options."""
    if argv is None:
        import sys

        args = sys.argv[1:]
    else:
        args = argv
    if args and args[0] == "levels":
        return "levels", get_levels_options(args[1:])
    if args and args[0] == "emit":
        return "emit", get_emit_options(args[1:])
    return "emit", get_emit_options(args)
