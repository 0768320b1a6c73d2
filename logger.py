"""Leveled logger over a line sink."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from datetime import datetime
from typing import IO, Any, Callable

from core.errors import LoggerPanic
from core.levels import Level, coerce_level
from core.writer import Decoration, LineSink, LineWriter

# Frames between LineSink.output and the code that called a public method:
# output <- _log/_force <- public method <- caller.
_CALLDEPTH = 3

_PLAIN = "plain"
_FORMAT = "format"
_LINE = "line"

PANIC_TAG = "PANIC"

LevelLike = Level | int | str


def _render(shape: str, values: tuple[Any, ...]) -> str:
    if shape == _FORMAT:
        template, args = values[0], values[1:]
        if not args:
            return str(template)
        try:
            if len(args) == 1 and isinstance(args[0], Mapping):
                return str(template) % args[0]
            return str(template) % args
        except (TypeError, ValueError, KeyError):
            # Mismatched templates still produce a line; fatal and panic must always write.
            return f"{template} %!(BADFORMAT {' '.join(str(a) for a in args)})"
    text = " ".join(str(v) for v in values)
    if shape == _LINE:
        return text + "\n"
    return text


class Logger:
    """Level-filtered logger writing through a LineSink.

    Leveled methods (``debug``, ``info``, ``warn``, ``error`` and their
    ``f``/``ln`` variants) write only while the threshold admits them.
    ``print``/``log`` always write, without a level tag. ``fatal`` always
    writes and then exits the process unless ``test_mode`` is set; ``panic``
    always writes and then raises LoggerPanic.

    Each method family comes in three shapes: values joined by a space,
    a ``%``-style template with arguments, and values joined by a space with
    a trailing newline.
    """

    def __init__(self, sink: LineSink, level: LevelLike = Level.INFO, test_mode: bool = False) -> None:
        self._sink = sink
        self._level = coerce_level(level)
        self.test_mode = test_mode

    @property
    def sink(self) -> LineSink:
        return self._sink

    @property
    def level(self) -> Level:
        return self._level

    def set_level(self, level: LevelLike) -> None:
        """Set the threshold; names are parsed with ``parse_level``."""
        self._level = coerce_level(level)

    def with_level(self, level: LevelLike) -> "Logger":
        self.set_level(level)
        return self

    def enabled(self, level: LevelLike) -> bool:
        """Return True when a message at ``level`` would be written."""
        level = coerce_level(level)
        return level != Level.NONE and self._level >= level

    def prefix(self) -> str:
        return self._sink.prefix()

    def set_prefix(self, prefix: str) -> None:
        self._sink.set_prefix(prefix)

    def flags(self) -> Decoration:
        return self._sink.flags()

    def set_flags(self, flags: Decoration) -> None:
        self._sink.set_flags(flags)

    def set_output(self, out: IO | None) -> None:
        self._sink.set_output(out)

    def _log(self, level: Level, shape: str, values: tuple[Any, ...]) -> None:
        if self._level < level:
            return
        self._sink.output(f"{level.label} {_render(shape, values)}", _CALLDEPTH)

    def _force(self, tag: str | None, shape: str, values: tuple[Any, ...]) -> str:
        message = _render(shape, values)
        line = message if tag is None else f"{tag} {message}"
        self._sink.output(line, _CALLDEPTH)
        return message

    def debug(self, *values: Any) -> None:
        self._log(Level.DEBUG, _PLAIN, values)

    def debugf(self, template: str, *args: Any) -> None:
        self._log(Level.DEBUG, _FORMAT, (template, *args))

    def debugln(self, *values: Any) -> None:
        self._log(Level.DEBUG, _LINE, values)

    def info(self, *values: Any) -> None:
        self._log(Level.INFO, _PLAIN, values)

    def infof(self, template: str, *args: Any) -> None:
        self._log(Level.INFO, _FORMAT, (template, *args))

    def infoln(self, *values: Any) -> None:
        self._log(Level.INFO, _LINE, values)

    def warn(self, *values: Any) -> None:
        self._log(Level.WARN, _PLAIN, values)

    def warnf(self, template: str, *args: Any) -> None:
        self._log(Level.WARN, _FORMAT, (template, *args))

    def warnln(self, *values: Any) -> None:
        self._log(Level.WARN, _LINE, values)

    # Aliases for callers written against LeveledLogger.
    def warning(self, *values: Any) -> None:
        self._log(Level.WARN, _PLAIN, values)

    def warningf(self, template: str, *args: Any) -> None:
        self._log(Level.WARN, _FORMAT, (template, *args))

    def warningln(self, *values: Any) -> None:
        self._log(Level.WARN, _LINE, values)

    def error(self, *values: Any) -> None:
        self._log(Level.ERROR, _PLAIN, values)

    def errorf(self, template: str, *args: Any) -> None:
        self._log(Level.ERROR, _FORMAT, (template, *args))

    def errorln(self, *values: Any) -> None:
        self._log(Level.ERROR, _LINE, values)

    def fatal(self, *values: Any) -> None:
        """Write a FATAL line regardless of the threshold, then exit with status 1."""
        self._force(Level.FATAL.label, _PLAIN, values)
        self._exit()

    def fatalf(self, template: str, *args: Any) -> None:
        self._force(Level.FATAL.label, _FORMAT, (template, *args))
        self._exit()

    def fatalln(self, *values: Any) -> None:
        self._force(Level.FATAL.label, _LINE, values)
        self._exit()

    def _exit(self) -> None:
        if not self.test_mode:
            sys.exit(1)

    def panic(self, *values: Any) -> None:
        """Write a PANIC line regardless of the threshold, then raise LoggerPanic."""
        raise LoggerPanic(self._force(PANIC_TAG, _PLAIN, values))

    def panicf(self, template: str, *args: Any) -> None:
        raise LoggerPanic(self._force(PANIC_TAG, _FORMAT, (template, *args)))

    def panicln(self, *values: Any) -> None:
        raise LoggerPanic(self._force(PANIC_TAG, _LINE, values))

    def print(self, *values: Any) -> None:
        self._force(None, _PLAIN, values)

    def printf(self, template: str, *args: Any) -> None:
        self._force(None, _FORMAT, (template, *args))

    def println(self, *values: Any) -> None:
        self._force(None, _LINE, values)

    def log(self, *values: Any) -> None:
        """Write an untagged line regardless of the threshold."""
        self._force(None, _PLAIN, values)

    def logf(self, template: str, *args: Any) -> None:
        self._force(None, _FORMAT, (template, *args))


def new_logger(
    out: IO | None = None,
    prefix: str = "",
    flags: Decoration = Decoration.NONE,
    *,
    level: LevelLike = Level.INFO,
    test_mode: bool = False,
    clock: Callable[[], datetime] | None = None,
) -> Logger:
    """Create a Logger writing to ``out`` through a new LineWriter.

    Args:
        out: Destination stream; None writes to the current ``sys.stderr``.
        prefix: Text placed at the start of every line (or before the message
            with ``Decoration.MSGPREFIX``).
        flags: Header decorations.
        level: Initial threshold.
        test_mode: When True, ``fatal`` returns instead of exiting.
        clock: Time source for timestamp decorations.

    Returns:
        Configured Logger.
    """
    return Logger(LineWriter(out, prefix, flags, clock=clock), level=level, test_mode=test_mode)


# Process-wide logger on stderr. Created once at import; changed only through
# explicit calls such as STD_LOGGER.set_level() and never reset implicitly.
STD_LOGGER = new_logger(None, "", Decoration.STD)


def get_logger() -> Logger:
    """Return the shared logger instance."""
    return STD_LOGGER
