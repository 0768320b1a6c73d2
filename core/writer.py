"""Line writer used as the output sink of a Logger."""

from __future__ import annotations

import io
import os
import sys
import threading
from datetime import datetime, timezone
from enum import IntFlag
from typing import IO, Callable, Iterable, Protocol


class Decoration(IntFlag):
    """Header decorations added to every line by a LineWriter."""

    NONE = 0
    DATE = 1
    TIME = 2
    MICROSECONDS = 4
    LONGFILE = 8
    SHORTFILE = 16
    UTC = 32
    MSGPREFIX = 64
    STD = DATE | TIME


_FLAG_NAMES = {
    "none": Decoration.NONE,
    "date": Decoration.DATE,
    "time": Decoration.TIME,
    "microseconds": Decoration.MICROSECONDS,
    "longfile": Decoration.LONGFILE,
    "shortfile": Decoration.SHORTFILE,
    "utc": Decoration.UTC,
    "msgprefix": Decoration.MSGPREFIX,
    "std": Decoration.STD,
}


def parse_flags(names: Iterable[str]) -> Decoration:
    """Combine decoration names (e.g. ``["date", "shortfile"]``) into flags.

    Raises:
        ValueError: If a name is not a known decoration.
    """
    flags = Decoration.NONE
    for raw in names:
        name = str(raw).strip().lower()
        if not name:
            continue
        if name not in _FLAG_NAMES:
            known = ", ".join(sorted(_FLAG_NAMES))
            raise ValueError(f"unknown decoration '{raw}' (expected one of: {known})")
        flags |= _FLAG_NAMES[name]
    return flags


class LineSink(Protocol):
    """Formatted line destination consumed by Logger."""

    def output(self, text: str, calldepth: int = 1) -> None:
        """Write one line; ``calldepth`` selects the frame reported by file flags."""

    def prefix(self) -> str:
        """Return the current line prefix."""

    def set_prefix(self, prefix: str) -> None:
        """Replace the line prefix."""

    def flags(self) -> Decoration:
        """Return the current decoration flags."""

    def set_flags(self, flags: Decoration) -> None:
        """Replace the decoration flags."""

    def set_output(self, out: IO | None) -> None:
        """Redirect subsequent lines to another stream."""


class LineWriter:
    """Writes decorated lines to a byte or text stream.

    Every call to ``output`` formats a header (prefix, timestamp, caller) and
    writes header, message and a trailing newline with a single ``write``
    call while holding a lock, so lines from concurrent callers never
    interleave. When ``out`` is None the current ``sys.stderr`` is used.
    Streams that are ``io.TextIOBase`` instances or expose an ``encoding``
    attribute receive ``str``; every other stream receives UTF-8 ``bytes``.
    """

    def __init__(
        self,
        out: IO | None = None,
        prefix: str = "",
        flags: Decoration = Decoration.NONE,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._out = out
        self._prefix = prefix
        self._flags = Decoration(flags)
        self._clock = clock or datetime.now
        self._lock = threading.Lock()

    def prefix(self) -> str:
        with self._lock:
            return self._prefix

    def set_prefix(self, prefix: str) -> None:
        with self._lock:
            self._prefix = prefix

    def flags(self) -> Decoration:
        with self._lock:
            return self._flags

    def set_flags(self, flags: Decoration) -> None:
        with self._lock:
            self._flags = Decoration(flags)

    def writer(self) -> IO:
        """Return the stream lines are currently written to."""
        with self._lock:
            return self._out or sys.stderr

    def set_output(self, out: IO | None) -> None:
        with self._lock:
            self._out = out

    def output(self, text: str, calldepth: int = 1) -> None:
        """Write ``text`` as one decorated line.

        Args:
            text: Message body; a newline is appended when missing.
            calldepth: Frames to skip when resolving the caller for file
                decorations. 1 is the direct caller of ``output``.
        """
        now = self._clock()
        caller = None
        if self._flags & (Decoration.SHORTFILE | Decoration.LONGFILE):
            caller = _caller(calldepth)
        with self._lock:
            line = self._format_header(now, caller)
            if self._flags & Decoration.MSGPREFIX:
                line += self._prefix
            line += text
            if not line.endswith("\n"):
                line += "\n"
            _write(self._out or sys.stderr, line)

    def _format_header(self, now: datetime, caller: tuple[str, int] | None) -> str:
        flags = self._flags
        parts: list[str] = []
        if self._prefix and not flags & Decoration.MSGPREFIX:
            parts.append(self._prefix)
        if flags & (Decoration.DATE | Decoration.TIME | Decoration.MICROSECONDS):
            if flags & Decoration.UTC:
                now = now.astimezone(timezone.utc)
            if flags & Decoration.DATE:
                parts.append(now.strftime("%Y/%m/%d "))
            if flags & (Decoration.TIME | Decoration.MICROSECONDS):
                stamp = now.strftime("%H:%M:%S")
                if flags & Decoration.MICROSECONDS:
                    stamp += f".{now.microsecond:06d}"
                parts.append(stamp + " ")
        if caller is not None:
            filename, lineno = caller
            if flags & Decoration.SHORTFILE:
                filename = os.path.basename(filename)
            parts.append(f"{filename}:{lineno}: ")
        return "".join(parts)


def _caller(depth: int) -> tuple[str, int]:
    # Frame 1 is LineWriter.output; ``depth`` counts from there.
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return "???", 0
    return frame.f_code.co_filename, frame.f_lineno


def _is_text_stream(stream: IO) -> bool:
    # Text writers that do not subclass TextIOBase are recognized by ``encoding``.
    return isinstance(stream, io.TextIOBase) or getattr(stream, "encoding", None) is not None


def _write(stream: IO, line: str) -> None:
    if _is_text_stream(stream):
        stream.write(line)
    else:
        stream.write(line.encode("utf-8"))
    flush = getattr(stream, "flush", None)
    if flush is not None:
        flush()
