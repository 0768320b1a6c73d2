"""Log level registry."""

from __future__ import annotations

from enum import IntEnum

from rapidfuzz import fuzz, process

from core.errors import InvalidLevelError


class Level(IntEnum):
    """Severity levels ordered from least to most verbose.

    A message at ``level`` is written when the logger threshold is greater
    than or equal to it. ``NONE`` is only meaningful as a threshold.
    """

    NONE = 0
    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5

    @property
    def label(self) -> str:
        return self.name


# Suggestions below this QRatio score are not offered.
_SUGGEST_CUTOFF = 60.0

_BY_NAME = {level.name: level for level in Level}


def display_name(level: Level) -> str:
    """Return the canonical uppercase name of a level."""
    return Level(level).label


def suggest_level(name: str) -> Level | None:
    """Return the level whose name is closest to ``name``, if any is close enough."""
    if not name:
        return None
    match = process.extractOne(
        name.strip().upper(),
        list(_BY_NAME),
        scorer=fuzz.QRatio,
        score_cutoff=_SUGGEST_CUTOFF,
    )
    if match is None:
        return None
    return _BY_NAME[match[0]]


def parse_level(name: str) -> Level:
    """Parse a level name, ignoring case.

    Args:
        name: Level name such as ``"warn"`` or ``"DEBUG"``.

    Returns:
        The matching Level.

    Raises:
        InvalidLevelError: If the name matches no level exactly.
    """
    level = _BY_NAME.get(str(name).upper())
    if level is None:
        raise InvalidLevelError(str(name), suggest_level(str(name)))
    return level


def coerce_level(value: Level | int | str) -> Level:
    """Convert a Level, integer rank or level name to a Level."""
    if isinstance(value, Level):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Level(value)
        except ValueError:
            raise InvalidLevelError(str(value)) from None
    return parse_level(value)
